"""提出されたアーキテクチャ図の採点を行うサービス。"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from systemcraft.models.errors import EmptyDesignError, InvalidDesignError
from systemcraft.models.evaluation import FinalEvaluation, ReasoningEvaluation, StructuralEvaluation
from systemcraft.models.graph import Connection, Node, Question
from systemcraft.scoring.combiner import combine_evaluations
from systemcraft.scoring.reasoning import (
    ReasoningEvaluator,
    build_reasoning_prompt,
    fallback_reasoning,
    normalize_reasoning,
)
from systemcraft.validators.structural import evaluate_structure

logger = logging.getLogger(__name__)


def parse_graph(
    nodes: Sequence[Mapping[str, Any]],
    connections: Sequence[Mapping[str, Any]],
) -> tuple[list[Node], list[Connection]]:
    """辞書形式のノード・接続をモデルに変換する。

    Raises:
        InvalidDesignError: 必須フィールドの欠落など形式が不正な場合。
    """
    try:
        parsed_nodes = [Node.model_validate(n) for n in nodes]
        parsed_connections = [Connection.model_validate(c) for c in connections]
    except ValidationError as e:
        raise InvalidDesignError(str(e)) from e
    return parsed_nodes, parsed_connections


class EvaluationService:
    """構造評価・定性評価・最終スコア算出の一連の採点を行う。"""

    def __init__(self, reasoning_evaluator: ReasoningEvaluator | None = None) -> None:
        self._reasoning_evaluator = reasoning_evaluator

    async def evaluate_structure(
        self,
        question: Question,
        nodes: Sequence[Node],
        connections: Sequence[Connection],
    ) -> StructuralEvaluation:
        """設問の要件に対してアーキテクチャ図の構造評価を行う。"""
        return evaluate_structure(nodes, connections, question.requirements, question.constraints)

    async def review_prompt(
        self,
        question: Question,
        nodes: Sequence[Node],
        connections: Sequence[Connection],
    ) -> tuple[StructuralEvaluation, str]:
        """構造評価を行い、定性評価器に渡すレビュー依頼プロンプトと合わせて返す。"""
        structural = await self.evaluate_structure(question, nodes, connections)
        return structural, build_reasoning_prompt(question, nodes, connections, structural.details)

    async def combine(
        self,
        structural: StructuralEvaluation,
        reasoning: ReasoningEvaluation | Mapping[str, Any],
    ) -> FinalEvaluation:
        """定性評価を正規化したうえで構造評価と統合する。"""
        return combine_evaluations(structural, normalize_reasoning(reasoning))

    async def grade(
        self,
        question: Question,
        nodes: Sequence[Node],
        connections: Sequence[Connection],
    ) -> FinalEvaluation:
        """アーキテクチャ図を採点し、最終評価を返す。

        定性評価器が未設定、または評価器が例外を送出した場合は
        中立的な代替評価を用いて採点を完了する。

        Args:
            question: 設問。
            nodes: 配置されたコンポーネント。
            connections: コンポーネント間の接続。

        Returns:
            最終評価。

        Raises:
            EmptyDesignError: コンポーネントが一つもない場合。
        """
        if not nodes:
            raise EmptyDesignError()

        structural = await self.evaluate_structure(question, nodes, connections)
        reasoning = await self._reason(question, nodes, connections, structural)
        final = await self.combine(structural, reasoning)
        logger.info(
            "Graded design: structural=%d reasoning=%s final=%d",
            structural.score,
            final.reasoning.score,
            final.final_score,
        )
        return final

    async def _reason(
        self,
        question: Question,
        nodes: Sequence[Node],
        connections: Sequence[Connection],
        structural: StructuralEvaluation,
    ) -> ReasoningEvaluation | Mapping[str, Any]:
        if self._reasoning_evaluator is None:
            logger.warning("No reasoning evaluator configured; using fallback evaluation")
            return fallback_reasoning()
        try:
            return await self._reasoning_evaluator(question, nodes, connections, structural.details)
        except Exception:
            logger.exception("Reasoning evaluation failed; using fallback evaluation")
            return fallback_reasoning()
