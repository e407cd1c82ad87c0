"""模擬面接のMCPプロンプト定義。"""

from typing import Any

from fastmcp import FastMCP

from systemcraft.services.question import QuestionService


def build_question_prompt(difficulty: str, profile: dict[str, Any]) -> str:
    """設問生成を依頼するプロンプトを組み立てる。"""
    topics = ", ".join(profile.get("example_topics", []))
    time_minutes = profile.get("time_minutes")
    return (
        "You are a senior system design interviewer at a top tech company.\n\n"
        f'Generate a unique, realistic system design interview question at the "{difficulty}" difficulty level.\n\n'
        "DIFFICULTY GUIDELINES:\n"
        f"- Scale: {profile.get('scale_range', '')}\n"
        f"- {profile.get('complexity_guidance', '')}\n"
        f"- Example topics (for inspiration, DO NOT copy directly; create a unique variant): {topics}\n\n"
        "RULES:\n"
        '1. The question must be a SPECIFIC system (e.g., "Design a real-time collaborative whiteboard" '
        'not "Design a system")\n'
        "2. Include 3-5 functional requirements that are CLEAR and TESTABLE\n"
        "3. Include 2-4 scale constraints with SPECIFIC numbers\n"
        "4. Traffic profile must use realistic numbers matching the difficulty\n"
        "5. Provide 2-3 hints that guide toward good architecture WITHOUT giving the answer\n"
        "6. DO NOT use generic questions; make it specific and interesting\n"
        f"7. Requirements should be achievable within {time_minutes} minutes of design time\n\n"
        "Return ONLY this JSON structure:\n"
        "{\n"
        '  "prompt": "Design a [specific system description]",\n'
        '  "requirements": ["Functional requirement 1", "Functional requirement 2", "Functional requirement 3"],\n'
        '  "constraints": ["Scale constraint with specific number", "Performance constraint with specific SLA"],\n'
        '  "trafficProfile": {"users": "X DAU/MAU", "rps": "X requests/sec at peak", "storage": "X TB/PB"},\n'
        '  "hints": ["Architectural hint 1", "Architectural hint 2"]\n'
        "}\n"
    )


def register_interview_prompts(mcp: FastMCP, question_service: QuestionService) -> None:
    """模擬面接関連のMCPプロンプトを登録する。"""

    @mcp.prompt()
    async def generate_question(difficulty: str) -> str:
        """指定難易度の新しい設問を生成するためのプロンプト。

        生成に失敗した場合は `get_interview_question` ツールで設問プールから出題できます。

        Args:
            difficulty: 難易度（"easy" / "medium" / "hard"）。
        """
        profile = await question_service.get_difficulty(difficulty)
        return build_question_prompt(difficulty, profile)

    @mcp.prompt()
    async def mock_interview(difficulty: str) -> str:
        """模擬面接の一連の流れをガイドするプロンプト。

        Args:
            difficulty: 難易度（"easy" / "medium" / "hard"）。
        """
        return (
            f"難易度 `{difficulty}` のシステム設計模擬面接を実施します。\n\n"
            "## 手順\n\n"
            f"1. `get_interview_question` ツールで難易度 `{difficulty}` の設問を取得し、利用者に提示してください。\n"
            "2. `systemcraft://catalog/components` リソースで利用可能なコンポーネントを確認してください。\n"
            "3. 利用者と対話しながら、ノード（id, type, label）と接続（id, from, to）を組み立ててください。\n"
            "4. 制限時間内に設計が完成したら `request_design_review` ツールを呼び出してください。\n"
            "5. 返却された `review_prompt` に従って設計をレビューし、"
            "score / strengths / weaknesses / suggestions を作成してください。\n"
            "6. `combine_evaluations` ツールに構造評価とレビュー結果を渡し、最終スコアを算出してください。\n"
            "7. 最終スコア、失敗したルール、改善提案を利用者に提示してください。\n\n"
            "## 注意事項\n\n"
            "- 構造評価のスコアは決定的なルールに基づくため、レビューで上書きしないでください。\n"
            "- `systemcraft://evaluation/rules` リソースで各ルールの重みと重要度を確認できます。\n"
        )
