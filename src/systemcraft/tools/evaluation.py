"""採点関連のMCPツール定義。"""

from typing import Any

from fastmcp import FastMCP
from pydantic import ValidationError

from systemcraft.models.errors import InvalidDesignError, SystemCraftError
from systemcraft.models.evaluation import StructuralEvaluation
from systemcraft.models.graph import Question
from systemcraft.services.catalog import CatalogService
from systemcraft.services.evaluation import EvaluationService, parse_graph


def register_evaluation_tools(
    mcp: FastMCP,
    evaluation_service: EvaluationService,
    catalog_service: CatalogService,
) -> None:
    """採点関連のMCPツールを登録する。"""

    @mcp.tool()
    async def evaluate_structure(
        nodes: list[dict[str, Any]],
        connections: list[dict[str, Any]],
        requirements: list[str] | None = None,
        constraints: list[str] | None = None,
    ) -> dict[str, Any]:
        """アーキテクチャ図を構造ルールに基づいて採点する。

        ロードバランサー・DB・アプリケーションサーバーの有無や接続関係などを
        重み付きルールで判定し、0〜100のスコアとルールごとの結果を返します。

        Args:
            nodes: ノードリスト。各要素は {"id": str, "type": str, "label": str} 形式。
            connections: 接続リスト。各要素は {"id": str, "from": str, "to": str} 形式。
            requirements: 設問の機能要件（任意）。
            constraints: 設問の規模・性能制約（任意）。
        """
        try:
            parsed_nodes, parsed_connections = parse_graph(nodes, connections)
            question = Question(requirements=requirements or [], constraints=constraints or [])
            result = await evaluation_service.evaluate_structure(question, parsed_nodes, parsed_connections)
            return result.model_dump(by_alias=True)
        except SystemCraftError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def request_design_review(
        question: dict[str, Any],
        nodes: list[dict[str, Any]],
        connections: list[dict[str, Any]],
    ) -> dict[str, Any]:
        """構造評価を実行し、定性レビュー用のプロンプトを生成する。

        返却される review_prompt に従って設計をレビューし、その結果を
        combine_evaluations ツールに渡して最終スコアを算出してください。

        Args:
            question: 設問。{"prompt": str, "requirements": [str], "constraints": [str]} 形式。
            nodes: ノードリスト。
            connections: 接続リスト。
        """
        try:
            parsed_nodes, parsed_connections = parse_graph(nodes, connections)
            try:
                parsed_question = Question.model_validate(question)
            except ValidationError as e:
                raise InvalidDesignError(str(e)) from e
            structural, prompt = await evaluation_service.review_prompt(
                parsed_question, parsed_nodes, parsed_connections
            )
            return {"structural": structural.model_dump(by_alias=True), "review_prompt": prompt}
        except SystemCraftError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def combine_evaluations(
        structural: dict[str, Any],
        reasoning: dict[str, Any],
    ) -> dict[str, Any]:
        """構造評価と定性評価を統合して最終スコアを算出する。

        最終スコアは 構造評価 × 0.6 + 定性評価 × 0.4 を四捨五入した値です。
        定性評価のスコアは0〜100に切り詰められ、欠けているリストは空として扱われます。

        Args:
            structural: evaluate_structure ツールの結果。
            reasoning: {"score": number, "strengths": [str], "weaknesses": [str], "suggestions": [str]} 形式。
        """
        try:
            try:
                parsed_structural = StructuralEvaluation.model_validate(structural)
            except ValidationError as e:
                raise InvalidDesignError(str(e)) from e
            final = await evaluation_service.combine(parsed_structural, reasoning)
            return final.model_dump(by_alias=True)
        except SystemCraftError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def grade_design(
        question: dict[str, Any],
        nodes: list[dict[str, Any]],
        connections: list[dict[str, Any]],
    ) -> dict[str, Any]:
        """提出された設計をサーバー側で一括採点する。

        サーバーに定性評価器が設定されていない場合、定性評価は中立的な代替評価
        （スコア50）となります。コンポーネントが一つもない設計は採点できません。

        Args:
            question: 設問。{"prompt": str, "requirements": [str], "constraints": [str]} 形式。
            nodes: ノードリスト。
            connections: 接続リスト。
        """
        try:
            parsed_nodes, parsed_connections = parse_graph(nodes, connections)
            try:
                parsed_question = Question.model_validate(question)
            except ValidationError as e:
                raise InvalidDesignError(str(e)) from e
            final = await evaluation_service.grade(parsed_question, parsed_nodes, parsed_connections)
            return final.model_dump(by_alias=True)
        except SystemCraftError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def list_component_types() -> dict[str, Any]:
        """キャンバスに配置可能なコンポーネント種別の一覧を取得する。"""
        try:
            sections = await catalog_service.list_components()
            return {"sections": sections}
        except SystemCraftError as e:
            return {"error": type(e).__name__, "message": str(e)}
