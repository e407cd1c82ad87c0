"""出題関連のMCPツール定義。"""

from typing import Any

from fastmcp import FastMCP

from systemcraft.models.errors import SystemCraftError
from systemcraft.services.question import QuestionService


def register_question_tools(mcp: FastMCP, question_service: QuestionService) -> None:
    """出題関連のMCPツールを登録する。"""

    @mcp.tool()
    async def get_interview_question(difficulty: str) -> dict[str, Any]:
        """指定した難易度の面接設問を一問取得する。

        Args:
            difficulty: 難易度（"easy" / "medium" / "hard"）。
        """
        try:
            profile = await question_service.get_difficulty(difficulty)
            question = await question_service.get_question(difficulty)
            return {
                "difficulty": difficulty,
                "time_minutes": profile.get("time_minutes"),
                "question": question.model_dump(by_alias=True),
            }
        except SystemCraftError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def list_difficulties() -> dict[str, Any]:
        """出題可能な難易度と制限時間の一覧を取得する。"""
        try:
            difficulties = []
            for name in await question_service.list_difficulties():
                profile = await question_service.get_difficulty(name)
                difficulties.append({"difficulty": name, "time_minutes": profile.get("time_minutes")})
            return {"difficulties": difficulties}
        except SystemCraftError as e:
            return {"error": type(e).__name__, "message": str(e)}
