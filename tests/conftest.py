"""テスト共通フィクスチャ。"""

import random
from pathlib import Path

import pytest

from systemcraft.config import ServerConfig
from systemcraft.models.graph import Connection, Node
from systemcraft.services.catalog import CatalogService
from systemcraft.services.evaluation import EvaluationService
from systemcraft.services.question import QuestionService


@pytest.fixture
def config_dir() -> Path:
    """設定ファイルディレクトリ。"""
    return Path(__file__).parent.parent / "config"


@pytest.fixture
def catalog_service(config_dir: Path) -> CatalogService:
    """テスト用CatalogService。"""
    return CatalogService(config_dir=config_dir)


@pytest.fixture
def question_service(config_dir: Path) -> QuestionService:
    """乱数シードを固定したテスト用QuestionService。"""
    return QuestionService(config_dir=config_dir, rng=random.Random(42))


@pytest.fixture
def evaluation_service() -> EvaluationService:
    """定性評価器を持たないテスト用EvaluationService。"""
    return EvaluationService()


@pytest.fixture
def server_config(config_dir: Path) -> ServerConfig:
    """テスト用ServerConfig。"""
    return ServerConfig(config_dir=config_dir)


@pytest.fixture
def three_tier_nodes() -> list[Node]:
    """LB → Server → SQL の3層構成のノード。"""
    return [
        Node(id="1", type="LB"),
        Node(id="2", type="Server"),
        Node(id="3", type="SQL"),
    ]


@pytest.fixture
def three_tier_connections() -> list[Connection]:
    """LB → Server → SQL の3層構成の接続。"""
    return [
        Connection(id="a", source="1", target="2"),
        Connection(id="b", source="2", target="3"),
    ]
