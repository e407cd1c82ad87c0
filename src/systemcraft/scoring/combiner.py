"""構造評価と定性評価を統合して最終スコアを算出する。"""

from systemcraft.models.evaluation import (
    EvaluationWeights,
    FinalEvaluation,
    ReasoningEvaluation,
    StructuralEvaluation,
)
from systemcraft.scoring.rounding import round_half_up

# 設問の難易度によらず固定
WEIGHTS = EvaluationWeights(structural=0.6, reasoning=0.4)


def combine_evaluations(structural: StructuralEvaluation, reasoning: ReasoningEvaluation) -> FinalEvaluation:
    """構造評価と定性評価を固定の重みで統合する。

    入力値の範囲は検証しない。定性評価は呼び出し側で正規化済みであること。

    Args:
        structural: 構造ルールエンジンの評価結果。
        reasoning: 外部の定性評価結果。

    Returns:
        両評価と使用した重みを含む最終評価。
    """
    final_score = round_half_up(structural.score * WEIGHTS.structural + reasoning.score * WEIGHTS.reasoning)
    return FinalEvaluation(
        structural=structural.model_copy(deep=True),
        reasoning=reasoning.model_copy(deep=True),
        final_score=final_score,
        weights=WEIGHTS,
    )
