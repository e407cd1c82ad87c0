"""FastMCPベースのMCPサーバーエントリポイント。"""

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from systemcraft.config import ServerConfig
from systemcraft.prompts.interview import register_interview_prompts
from systemcraft.resources.catalog import register_catalog_resources
from systemcraft.scoring.reasoning import ReasoningEvaluator
from systemcraft.services.catalog import CatalogService
from systemcraft.services.evaluation import EvaluationService
from systemcraft.services.question import QuestionService
from systemcraft.tools.evaluation import register_evaluation_tools
from systemcraft.tools.question import register_question_tools


def create_server(
    config: ServerConfig | None = None,
    reasoning_evaluator: ReasoningEvaluator | None = None,
) -> FastMCP:
    """SystemCraft MCPサーバーを作成し、ツール・リソース・プロンプトを登録する。

    Args:
        config: サーバー設定。Noneの場合はデフォルト設定を使用。
        reasoning_evaluator: 定性評価器。Noneの場合はMCPクライアント側でレビューを行う。

    Returns:
        設定済みのFastMCPインスタンス。
    """
    if config is None:
        config = ServerConfig()

    mcp = FastMCP("systemcraft")

    # サービス層
    catalog_service = CatalogService(config_dir=config.config_dir)
    question_service = QuestionService(config_dir=config.config_dir)
    evaluation_service = EvaluationService(reasoning_evaluator=reasoning_evaluator)

    # MCPインターフェース登録
    register_question_tools(mcp, question_service)
    register_evaluation_tools(mcp, evaluation_service, catalog_service)
    register_catalog_resources(mcp, config.config_dir)
    register_interview_prompts(mcp, question_service)

    # ヘルスチェックエンドポイント
    @mcp.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok"})

    return mcp
