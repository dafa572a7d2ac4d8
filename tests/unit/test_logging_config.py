"""
Tests pour configure_logging et les traces du dispatcher.
"""

import json

import pytest
from loguru import logger

from tests.fixtures.fake_transport import FakeTransport, json_response
from xtream_api.adapters.api.dispatcher import RequestDispatcher
from xtream_api.config import ClientConfig
from xtream_api.logging_config import configure_logging


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.disable("xtream_api")


class TestConfigureLogging:
    """Tests pour configure_logging()."""

    def test_file_keeps_only_client_records_as_json(self, tmp_path, restore_logger):
        log_file = tmp_path / "logs" / "xtream.log"

        configure_logging(log_level="WARNING", log_file=log_file)
        logger.info("hello from test")
        logger.remove()

        lines = log_file.read_text().splitlines()
        records = [json.loads(line)["record"] for line in lines]
        messages = [record["message"] for record in records]
        assert "Logging configure" in messages
        assert "hello from test" not in messages
        assert all(record["name"].startswith("xtream_api") for record in records)

    def test_console_only(self, restore_logger, capsys):
        configure_logging(log_level="INFO")
        logger.info("console message")

        assert "console message" in capsys.readouterr().err


class TestDispatcherTracing:
    """Tests des traces de requetes."""

    @pytest.mark.asyncio
    async def test_trace_redacts_password(self, restore_logger):
        messages = []
        configure_logging(log_level="ERROR")
        logger.add(messages.append, level="DEBUG", format="{message} {extra}")
        config = ClientConfig(
            _env_file=None,
            base_url="http://example.com",
            username="user",
            password="s3cret",
        )
        dispatcher = RequestDispatcher(config, FakeTransport(json_response([])))

        await dispatcher.dispatch("get_profile")

        output = "".join(str(message) for message in messages)
        assert "get_profile" in output
        assert "s3cret" not in output

    @pytest.mark.asyncio
    async def test_tracing_disabled_does_not_change_result(self):
        logger.disable("xtream_api")
        config = ClientConfig(
            _env_file=None,
            base_url="http://example.com",
            username="user",
            password="pass",
        )
        dispatcher = RequestDispatcher(config, FakeTransport(json_response({"ok": 1})))

        assert await dispatcher.dispatch("get_profile") == {"ok": 1}
