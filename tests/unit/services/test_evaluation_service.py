"""EvaluationServiceのユニットテスト。"""

from collections.abc import Mapping, Sequence
from typing import Any

import pytest

from systemcraft.models.errors import EmptyDesignError, InvalidDesignError
from systemcraft.models.evaluation import ReasoningEvaluation, RuleResult
from systemcraft.models.graph import Connection, Node, Question
from systemcraft.services.evaluation import EvaluationService, parse_graph


class _RecordingEvaluator:
    """受け取った引数を記録し、固定の評価を返すテスト用評価器。"""

    def __init__(self, result: ReasoningEvaluation | Mapping[str, Any]) -> None:
        self.result = result
        self.details: Sequence[RuleResult] | None = None

    async def __call__(
        self,
        question: Question,
        nodes: Sequence[Node],
        connections: Sequence[Connection],
        details: Sequence[RuleResult],
    ) -> ReasoningEvaluation | Mapping[str, Any]:
        self.details = details
        return self.result


async def _failing_evaluator(
    question: Question,
    nodes: Sequence[Node],
    connections: Sequence[Connection],
    details: Sequence[RuleResult],
) -> ReasoningEvaluation:
    raise TimeoutError("reasoning provider timed out")


class TestParseGraph:
    def test_parse_graph_from_wire_format(self) -> None:
        nodes, connections = parse_graph(
            [{"id": "1", "type": "LB", "icon": "alt_route", "x": 1, "y": 2}],
            [{"id": "a", "from": "1", "to": "2"}],
        )
        assert nodes[0].type == "LB"
        assert connections[0].source == "1"
        assert connections[0].target == "2"

    def test_parse_graph_rejects_missing_fields(self) -> None:
        with pytest.raises(InvalidDesignError):
            parse_graph([{"id": "1"}], [])

    def test_parse_graph_rejects_malformed_connection(self) -> None:
        with pytest.raises(InvalidDesignError):
            parse_graph([], [{"id": "a", "from": "1"}])


class TestGrade:
    async def test_grade_without_evaluator_uses_fallback(
        self,
        evaluation_service: EvaluationService,
        three_tier_nodes: list[Node],
        three_tier_connections: list[Connection],
    ) -> None:
        final = await evaluation_service.grade(Question(), three_tier_nodes, three_tier_connections)
        assert final.structural.score == 89
        assert final.reasoning.score == 50
        # 89 * 0.6 + 50 * 0.4 = 73.4
        assert final.final_score == 73

    async def test_grade_passes_structural_details_to_evaluator(
        self, three_tier_nodes: list[Node], three_tier_connections: list[Connection]
    ) -> None:
        evaluator = _RecordingEvaluator({"score": 90, "strengths": ["Clear tiers"]})
        service = EvaluationService(reasoning_evaluator=evaluator)
        final = await service.grade(Question(), three_tier_nodes, three_tier_connections)

        assert evaluator.details == final.structural.details
        assert final.reasoning.strengths == ["Clear tiers"]
        assert final.reasoning.weaknesses == []
        # 89 * 0.6 + 90 * 0.4 = 89.4
        assert final.final_score == 89

    async def test_grade_normalizes_out_of_range_reasoning(
        self, three_tier_nodes: list[Node], three_tier_connections: list[Connection]
    ) -> None:
        service = EvaluationService(reasoning_evaluator=_RecordingEvaluator({"score": 250}))
        final = await service.grade(Question(), three_tier_nodes, three_tier_connections)
        assert final.reasoning.score == 100

    async def test_grade_falls_back_when_evaluator_raises(
        self, three_tier_nodes: list[Node], three_tier_connections: list[Connection]
    ) -> None:
        service = EvaluationService(reasoning_evaluator=_failing_evaluator)
        final = await service.grade(Question(), three_tier_nodes, three_tier_connections)
        assert final.reasoning.score == 50
        assert final.reasoning.strengths == ["Basic structure present"]

    async def test_grade_rejects_empty_canvas(self, evaluation_service: EvaluationService) -> None:
        with pytest.raises(EmptyDesignError):
            await evaluation_service.grade(Question(), [], [])

    async def test_grade_uses_question_requirements(self, evaluation_service: EvaluationService) -> None:
        question = Question(requirements=["Handle 1M scale"])
        final = await evaluation_service.grade(question, [Node(id="s", type="Server")], [])
        assert "Includes Caching for performance" in final.structural.failed_rules


class TestReviewPrompt:
    async def test_review_prompt_contains_checks(
        self,
        evaluation_service: EvaluationService,
        three_tier_nodes: list[Node],
        three_tier_connections: list[Connection],
    ) -> None:
        question = Question(prompt="Design a pastebin")
        structural, prompt = await evaluation_service.review_prompt(
            question, three_tier_nodes, three_tier_connections
        )
        assert structural.score == 89
        assert "Prompt: Design a pastebin" in prompt
        assert "- Uses Queues for async tasks: FAIL" in prompt


class TestCombine:
    async def test_combine_normalizes_reasoning(
        self,
        evaluation_service: EvaluationService,
        three_tier_nodes: list[Node],
        three_tier_connections: list[Connection],
    ) -> None:
        structural = await evaluation_service.evaluate_structure(Question(), three_tier_nodes, three_tier_connections)
        final = await evaluation_service.combine(structural, {"score": "n/a"})
        assert final.reasoning.score == 70
        # 89 * 0.6 + 70 * 0.4 = 81.4
        assert final.final_score == 81
