"""Tests for tally.logging."""

import logging

import pytest

from tally.logging import StderrHandler, configure_logging, get_logger, resolve_log_level


class TestResolveLogLevel:
    """Tests for resolve_log_level."""

    def test_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should default to WARNING."""
        monkeypatch.delenv("TALLY_LOG_LEVEL", raising=False)
        assert resolve_log_level() == logging.WARNING

    def test_explicit_level_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should prefer an explicit level over the environment."""
        monkeypatch.setenv("TALLY_LOG_LEVEL", "ERROR")
        assert resolve_log_level("debug") == logging.DEBUG
        assert resolve_log_level(logging.INFO) == logging.INFO

    def test_environment_beats_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should prefer TALLY_LOG_LEVEL over the config value."""
        monkeypatch.setenv("TALLY_LOG_LEVEL", "info")
        assert resolve_log_level(fallback="ERROR") == logging.INFO

    def test_config_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should use the config value when nothing else is set."""
        monkeypatch.delenv("TALLY_LOG_LEVEL", raising=False)
        assert resolve_log_level(fallback="DEBUG") == logging.DEBUG


class TestConfigureLogging:
    """Tests for configure_logging and get_logger."""

    def test_attaches_single_handler(self) -> None:
        """Should not add duplicate handlers on repeated calls."""
        configure_logging(logging.INFO)
        configure_logging(logging.ERROR)

        logger = logging.getLogger("tally")
        assert len([h for h in logger.handlers if isinstance(h, StderrHandler)]) == 1
        assert logger.level == logging.ERROR

    def test_records_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Should write records to stderr, never stdout."""
        configure_logging(logging.DEBUG)
        get_logger("tally.tests").debug("balance changed")

        captured = capsys.readouterr()
        assert "balance changed" in captured.err
        assert captured.out == ""
        configure_logging(logging.WARNING)

    def test_get_logger_namespaces(self) -> None:
        """Should put foreign names under the tally namespace."""
        assert get_logger("tally.commands.menu").name == "tally.commands.menu"
        assert get_logger("other").name == "tally.other"
