"""評価結果関連のデータモデル。"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from systemcraft.models.rule import Severity

RuleStatus = Literal["pass", "fail"]


class _EvaluationModel(BaseModel):
    """JSON上はcamelCase、Python上はsnake_caseで扱う評価モデルの基底。"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RuleResult(_EvaluationModel):
    """単一ルールの評価結果。"""

    rule: str
    status: RuleStatus
    message: str
    severity: Severity


class StructuralEvaluation(_EvaluationModel):
    """構造ルールエンジンの評価結果。"""

    score: int = Field(ge=0, le=100)
    passed_rules: list[str] = Field(default_factory=list)
    failed_rules: list[str] = Field(default_factory=list)
    details: list[RuleResult] = Field(default_factory=list)


class ReasoningEvaluation(_EvaluationModel):
    """外部の定性評価の結果。"""

    score: float
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


class EvaluationWeights(_EvaluationModel):
    """最終スコア算出に用いた重み。"""

    model_config = ConfigDict(frozen=True)

    structural: float
    reasoning: float


class FinalEvaluation(_EvaluationModel):
    """構造評価と定性評価を統合した最終評価。"""

    structural: StructuralEvaluation
    reasoning: ReasoningEvaluation
    final_score: int
    weights: EvaluationWeights
