"""定性評価連携のユニットテスト。"""

import math

from systemcraft.models.evaluation import ReasoningEvaluation, RuleResult
from systemcraft.models.graph import Connection, Node, Question, TrafficProfile
from systemcraft.scoring.reasoning import (
    DEFAULT_REASONING_SCORE,
    build_reasoning_prompt,
    fallback_reasoning,
    normalize_reasoning,
)


class TestNormalizeReasoning:
    def test_well_formed_passes_through(self) -> None:
        result = normalize_reasoning(
            {"score": 82, "strengths": ["a"], "weaknesses": ["b"], "suggestions": ["c"]}
        )
        assert result == ReasoningEvaluation(score=82, strengths=["a"], weaknesses=["b"], suggestions=["c"])

    def test_non_numeric_score_uses_default(self) -> None:
        assert normalize_reasoning({"score": "eighty"}).score == DEFAULT_REASONING_SCORE
        assert normalize_reasoning({}).score == DEFAULT_REASONING_SCORE
        assert normalize_reasoning({"score": None}).score == DEFAULT_REASONING_SCORE
        assert normalize_reasoning({"score": True}).score == DEFAULT_REASONING_SCORE
        assert normalize_reasoning({"score": math.nan}).score == DEFAULT_REASONING_SCORE

    def test_score_is_clamped(self) -> None:
        assert normalize_reasoning({"score": 150}).score == 100
        assert normalize_reasoning({"score": -20}).score == 0
        assert normalize_reasoning({"score": 64.5}).score == 64.5

    def test_missing_lists_become_empty(self) -> None:
        result = normalize_reasoning({"score": 60, "strengths": None, "weaknesses": "not a list"})
        assert result.strengths == []
        assert result.weaknesses == []
        assert result.suggestions == []

    def test_accepts_model_instance(self) -> None:
        result = normalize_reasoning(ReasoningEvaluation(score=120, strengths=["x"]))
        assert result.score == 100
        assert result.strengths == ["x"]


class TestFallbackReasoning:
    def test_fallback_is_neutral(self) -> None:
        result = fallback_reasoning()
        assert result.score == 50
        assert result.weaknesses == ["AI feedback unavailable at this time"]

    def test_fallback_returns_fresh_instance(self) -> None:
        first = fallback_reasoning()
        first.strengths.append("mutated")
        assert fallback_reasoning().strengths == ["Basic structure present"]


class TestBuildReasoningPrompt:
    def test_prompt_includes_question_graph_and_checks(self) -> None:
        question = Question(
            prompt="Design a URL shortening service like Bitly",
            requirements=["Shorten URLs", "Redirect quickly"],
            constraints=["500K URLs per day"],
            traffic_profile=TrafficProfile(users="500K DAU"),
        )
        nodes = [Node(id="1", type="LB", label="Edge LB", x=12, y=34)]
        connections = [Connection(id="c1", source="1", target="2")]
        details = [
            RuleResult(
                rule="Design includes a Load Balancer",
                status="pass",
                message="Load balancer correctly identified",
                severity="critical",
            )
        ]
        prompt = build_reasoning_prompt(question, nodes, connections, details)

        assert "Prompt: Design a URL shortening service like Bitly" in prompt
        assert "Requirements: Shorten URLs, Redirect quickly" in prompt
        assert "Constraints: 500K URLs per day" in prompt
        assert '"users":"500K DAU"' in prompt
        assert '{"id": "1", "type": "LB", "label": "Edge LB"}' in prompt
        assert '{"from": "1", "to": "2"}' in prompt
        assert "- Design includes a Load Balancer: PASS (Load balancer correctly identified)" in prompt
        # 座標は評価に不要
        assert "34" not in prompt
