"""コンポーネントカタログを提供するサービス。"""

from pathlib import Path
from typing import Any

import yaml

from systemcraft.models.errors import ConfigurationError


class CatalogService:
    """キャンバスに配置可能なコンポーネント定義を提供する。"""

    def __init__(self, config_dir: Path) -> None:
        self._config_dir = config_dir
        self._sections: list[dict[str, Any]] | None = None

    def _load_sections(self) -> list[dict[str, Any]]:
        """コンポーネント定義を読み込む。"""
        if self._sections is not None:
            return self._sections

        components_file = self._config_dir / "components.yaml"
        try:
            with open(components_file, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise ConfigurationError(f"Component catalog not found: {components_file}") from None
        self._sections = data["sections"]
        return self._sections

    async def list_components(self) -> list[dict[str, Any]]:
        """カテゴリ別のコンポーネント一覧を返す。"""
        return self._load_sections()

    async def component_types(self) -> list[str]:
        """カタログに定義されたコンポーネント種別を定義順に返す。"""
        return [c["type"] for section in self._load_sections() for c in section["components"]]
