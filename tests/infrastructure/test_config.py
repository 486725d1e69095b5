"""Tests for configuration and logging setup."""

import logging
from pathlib import Path

from orderpad.infrastructure.config import Config
from orderpad.infrastructure.logging_config import setup_logging


class TestConfig:

    def test_defaults(self):
        config = Config.from_env({})
        assert config.output_dir == Path("pedidos")
        assert config.log_level == "WARNING"
        assert not config.file_logging
        assert config.share_enabled

    def test_environment_overrides(self):
        config = Config.from_env({
            "ORDERPAD_OUTPUT_DIR": "/srv/pedidos",
            "ORDERPAD_LOG_LEVEL": "debug",
            "ORDERPAD_LOG_DIR": "/var/log/orderpad",
            "ORDERPAD_FILE_LOGGING": "1",
            "ORDERPAD_SHARE": "0",
        })
        assert config.output_dir == Path("/srv/pedidos")
        assert config.log_level == "DEBUG"
        assert config.log_dir == Path("/var/log/orderpad")
        assert config.file_logging
        assert not config.share_enabled

    def test_blank_flag_uses_default(self):
        assert Config.from_env({"ORDERPAD_SHARE": " "}).share_enabled


class TestSetupLogging:

    def test_console_only(self):
        logger = setup_logging(log_level="INFO")
        assert logger.name == "orderpad"
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert not logger.propagate

    def test_reconfiguring_replaces_handlers(self, tmp_path):
        setup_logging(log_level="INFO")
        logger = setup_logging(log_level=logging.DEBUG, log_dir=tmp_path, enable_file_logging=True)
        assert len(logger.handlers) == 3
        assert (tmp_path / "orderpad.log").exists()
        setup_logging()

    def test_unknown_level_falls_back_to_warning(self):
        assert setup_logging(log_level="chatty").level == logging.WARNING
