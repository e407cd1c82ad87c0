"""カタログ関連のMCPリソース定義。"""

from pathlib import Path

import yaml
from fastmcp import FastMCP

from systemcraft.validators.structural import RULES


def register_catalog_resources(mcp: FastMCP, config_dir: Path) -> None:
    """コンポーネントカタログと評価ルールのMCPリソースを登録する。"""

    @mcp.resource("systemcraft://catalog/components")
    async def components() -> str:
        """キャンバスに配置可能なコンポーネント定義を取得する。"""
        components_file = config_dir / "components.yaml"
        with open(components_file, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return yaml.dump(data, allow_unicode=True, default_flow_style=False, sort_keys=False)

    @mcp.resource("systemcraft://evaluation/rules")
    async def evaluation_rules() -> str:
        """構造評価に使用されるルールの一覧を取得する。

        各ルールのID、表示名、重み、重要度を返します。
        """
        rules = [
            {"id": r.id, "description": r.description, "weight": r.weight, "severity": r.severity} for r in RULES
        ]
        return yaml.dump({"rules": rules}, allow_unicode=True, default_flow_style=False, sort_keys=False)
