"""外部の定性評価（設計の妥当性レビュー）との連携。

定性評価そのものは外部のモデルに委ねる。このモジュールは評価器に渡すプロンプトと、
評価器の戻り値を統合可能な形に正規化する処理のみを扱う。
"""

import json
import math
from collections.abc import Awaitable, Mapping, Sequence
from numbers import Real
from typing import Any, Protocol

from systemcraft.models.evaluation import ReasoningEvaluation, RuleResult
from systemcraft.models.graph import Connection, Node, Question

# 評価器がスコアを返さなかった場合に用いる値
DEFAULT_REASONING_SCORE = 70
FALLBACK_REASONING_SCORE = 50

_LIST_FIELDS: tuple[str, ...] = ("strengths", "weaknesses", "suggestions")


class ReasoningEvaluator(Protocol):
    """定性評価器のインターフェース。"""

    def __call__(
        self,
        question: Question,
        nodes: Sequence[Node],
        connections: Sequence[Connection],
        details: Sequence[RuleResult],
    ) -> Awaitable[ReasoningEvaluation | Mapping[str, Any]]: ...


def fallback_reasoning() -> ReasoningEvaluation:
    """定性評価が得られなかった場合の中立的な評価を返す。"""
    return ReasoningEvaluation(
        score=FALLBACK_REASONING_SCORE,
        strengths=["Basic structure present"],
        weaknesses=["AI feedback unavailable at this time"],
        suggestions=["Please review your design against functional requirements manually"],
    )


def normalize_reasoning(raw: ReasoningEvaluation | Mapping[str, Any]) -> ReasoningEvaluation:
    """評価器の出力を統合可能な定性評価に正規化する。

    - スコアが数値でなければ DEFAULT_REASONING_SCORE とする
    - スコアは 0〜100 に切り詰める
    - strengths / weaknesses / suggestions が欠けていれば空リストとする
    """
    data: Mapping[str, Any] = raw.model_dump() if isinstance(raw, ReasoningEvaluation) else raw

    score = data.get("score")
    if not isinstance(score, Real) or isinstance(score, bool) or math.isnan(score):
        score = DEFAULT_REASONING_SCORE
    score = max(0, min(100, score))

    lists: dict[str, list[str]] = {}
    for field in _LIST_FIELDS:
        value = data.get(field)
        lists[field] = [str(item) for item in value] if isinstance(value, list) else []

    return ReasoningEvaluation(score=score, **lists)


def build_reasoning_prompt(
    question: Question,
    nodes: Sequence[Node],
    connections: Sequence[Connection],
    details: Sequence[RuleResult],
) -> str:
    """定性評価器に渡すレビュー依頼プロンプトを組み立てる。

    構造ルールの判定結果を含めることで、評価器が既に検出済みの問題を参照できるようにする。
    """
    graph_nodes = [{"id": n.id, "type": n.type, "label": n.label} for n in nodes]
    graph_connections = [{"from": c.source, "to": c.target} for c in connections]
    checks = "\n".join(f"- {d.rule}: {d.status.upper()} ({d.message})" for d in details)

    return (
        "You are a senior system design interviewer at a top-tier tech company.\n"
        "Evaluate the following candidate design based on the provided question and architectural constraints.\n\n"
        "### THE QUESTION\n"
        f"Prompt: {question.prompt}\n"
        f"Requirements: {', '.join(question.requirements)}\n"
        f"Constraints: {', '.join(question.constraints)}\n"
        f"Traffic Profile: {question.traffic_profile.model_dump_json(exclude_none=True)}\n\n"
        "### CANDIDATE DESIGN (JSON Structure)\n"
        f"Nodes: {json.dumps(graph_nodes)}\n"
        f"Connections: {json.dumps(graph_connections)}\n\n"
        "### DETERMINISTIC CHECKS\n"
        f"{checks}\n\n"
        "### EVALUATION CRITERIA\n"
        "1. Does it meet ALL functional requirements qualitatively?\n"
        "2. Are trade-offs appropriate for the specific scale constraints?\n"
        "3. Are there hidden bottlenecks that the deterministic checks missed?\n"
        "4. Is the overall architecture coherent and justified?\n\n"
        "Return your evaluation as a JSON object with exactly these fields:\n"
        '{"score": <number 0-100>, "strengths": [<string>], "weaknesses": [<string>], "suggestions": [<string>]}\n'
    )
