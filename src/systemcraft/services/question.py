"""面接設問の出題を行うサービス。"""

import logging
import random
from pathlib import Path
from typing import Any

import yaml

from systemcraft.models.errors import ConfigurationError, UnknownDifficultyError
from systemcraft.models.graph import Question

logger = logging.getLogger(__name__)


class QuestionService:
    """難易度別の出題設定と設問プールを管理する。"""

    def __init__(self, config_dir: Path, rng: random.Random | None = None) -> None:
        self._config_dir = config_dir
        self._rng = rng or random.Random()
        self._difficulties: dict[str, dict[str, Any]] | None = None

    def _load_difficulties(self) -> dict[str, dict[str, Any]]:
        """出題設定を読み込む。"""
        if self._difficulties is None:
            questions_file = self._config_dir / "questions.yaml"
            try:
                with open(questions_file, encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except FileNotFoundError:
                raise ConfigurationError(f"Question bank not found: {questions_file}") from None
            self._difficulties = data["difficulties"]
        return self._difficulties

    async def list_difficulties(self) -> list[str]:
        """定義されている難易度の一覧を返す。"""
        return list(self._load_difficulties())

    async def get_difficulty(self, difficulty: str) -> dict[str, Any]:
        """難易度ごとの出題設定を返す。

        Raises:
            UnknownDifficultyError: 難易度が定義されていない場合。
        """
        difficulties = self._load_difficulties()
        if difficulty not in difficulties:
            raise UnknownDifficultyError(difficulty)
        return difficulties[difficulty]

    async def get_question(self, difficulty: str) -> Question:
        """指定難易度の設問プールから一問を選んで返す。

        Raises:
            UnknownDifficultyError: 難易度が定義されていない場合。
            ConfigurationError: 設問プールが空の場合。
        """
        profile = await self.get_difficulty(difficulty)
        pool = profile.get("questions") or []
        if not pool:
            raise ConfigurationError(f"No questions defined for difficulty: {difficulty}")
        question = Question.model_validate(self._rng.choice(pool))
        logger.info("Selected %s question: %s", difficulty, question.prompt)
        return question
