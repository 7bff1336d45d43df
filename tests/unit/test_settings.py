"""Tests for settings and logging setup."""

import io
import logging

from knightpath import logs
from knightpath.logs import setup_logging
from knightpath.settings import Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch) -> None:
        """Test the built-in defaults."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("MAX_EXHAUSTIVE_CELLS", raising=False)
        monkeypatch.delenv("MAX_BOARD_CELLS", raising=False)
        settings = Settings(_env_file=None)

        assert settings.default_depth == 8
        assert settings.default_width == 8
        assert settings.default_start == (1, 2)
        assert settings.verbose is False
        assert settings.log_level == "INFO"
        assert settings.api_prefix == "/api"
        assert settings.max_exhaustive_cells == 64
        assert settings.max_board_cells == 1_000_000

    def test_environment_override(self, monkeypatch) -> None:
        """Test that environment variables override defaults."""
        monkeypatch.setenv("DEFAULT_DEPTH", "5")
        monkeypatch.setenv("VERBOSE", "true")
        settings = Settings(_env_file=None)

        assert settings.default_depth == 5
        assert settings.verbose is True


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_single_handler(self) -> None:
        """Test that repeated calls do not stack handlers."""
        setup_logging("WARNING")
        setup_logging("DEBUG")

        root_handlers = logging.getLogger().handlers
        assert root_handlers.count(logs._console_handler) == 1
        assert logging.getLogger("knightpath").level == logging.DEBUG

        setup_logging("WARNING")
        assert logging.getLogger("knightpath").level == logging.WARNING

    def test_stream_follows_latest_call(self) -> None:
        """Test that each call points the handler at the stream it is given."""
        first = io.StringIO()
        second = io.StringIO()
        logger = logging.getLogger("knightpath.tests")

        try:
            setup_logging("INFO", stream=first)
            logger.info("to first")
            setup_logging("INFO", stream=second)
            logger.info("to second")
        finally:
            setup_logging("WARNING")

        assert "to first" in first.getvalue()
        assert "to second" not in first.getvalue()
        assert "to second" in second.getvalue()
        assert " - knightpath.tests - INFO - " in second.getvalue()
