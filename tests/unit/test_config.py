"""ServerConfigとログ設定のユニットテスト。"""

import logging
from pathlib import Path

import pytest

from systemcraft.config import ServerConfig
from systemcraft.logging_config import setup_logging


class TestServerConfig:
    def test_defaults(self) -> None:
        config = ServerConfig()
        assert config.port == 8000
        assert config.log_level == "INFO"
        assert (config.config_dir / "questions.yaml").exists()

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("SYSTEMCRAFT_PORT", "9100")
        monkeypatch.setenv("SYSTEMCRAFT_CONFIG_DIR", str(tmp_path))
        config = ServerConfig()
        assert config.port == 9100
        assert config.config_dir == tmp_path


class TestSetupLogging:
    def test_installs_single_handler(self) -> None:
        setup_logging("debug")
        setup_logging("debug")
        logger = logging.getLogger("systemcraft")
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
