import json
import logging

import pytest
from loguru import logger

from src.ichor.api.utils.app_startup import configure_logging
from src.ichor.runtime.config.config_data import ConfigData, LoggingConfig


@pytest.fixture
def restore_logging():
    yield
    configure_logging()


class TestConfigureLogging:
    def test_json_file_sink(self, tmp_path, restore_logging):
        """File logs are serialized as one JSON record per line."""
        log_file = tmp_path / "logs" / "ichor.log"
        configure_logging(
            ConfigData(logging=LoggingConfig(level="INFO", format="json", file=str(log_file)))
        )

        logger.bind(request_id="req-1").info("currency created")
        logger.complete()

        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        messages = [r["record"]["message"] for r in records]
        assert "currency created" in messages
        created = records[messages.index("currency created")]
        assert created["record"]["extra"]["request_id"] == "req-1"

    def test_stdlib_logging_is_intercepted(self, restore_logging):
        configure_logging(ConfigData(logging=LoggingConfig(level="DEBUG")))
        log_messages: list = []
        handler_id = logger.add(log_messages.append, format="{message}")
        try:
            logging.getLogger("ichor.tests").warning("from stdlib")
        finally:
            logger.remove(handler_id)

        assert any("from stdlib" in str(m) for m in log_messages)
