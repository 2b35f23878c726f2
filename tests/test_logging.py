"""Tests for structlog rendering of library log records."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from datetime import datetime, timezone

import pytest

from pyisoduration import ParseError, configure_logging, parse, shift


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Restore root and package logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("pyisoduration")
    pkg_handlers = pkg.handlers[:]
    pkg_level = pkg.level
    pkg_propagate = pkg.propagate
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.handlers = pkg_handlers
    pkg.setLevel(pkg_level)
    pkg.propagate = pkg_propagate


def _clamp_month_end() -> None:
    shift(datetime(2018, 1, 31, tzinfo=timezone.utc), parse("P1M"))


class TestLibraryDefaults:
    def test_null_handler_installed(self) -> None:
        handlers = logging.getLogger("pyisoduration").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("pyisoduration").level == logging.DEBUG

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("pyisoduration").level == logging.WARNING

    def test_root_logger_untouched(self) -> None:
        root = logging.getLogger()
        app_handler = logging.StreamHandler()
        root.addHandler(app_handler)
        root.setLevel(logging.INFO)
        configure_logging(verbose=True, log_json=True)
        assert app_handler in root.handlers
        assert root.level == logging.INFO

    def test_records_do_not_reach_root(self) -> None:
        configure_logging(verbose=True, log_json=True)
        assert logging.getLogger("pyisoduration").propagate is False

    def test_reconfigure_replaces_handler(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        streams = [
            h
            for h in logging.getLogger("pyisoduration").handlers
            if isinstance(h, logging.StreamHandler)
        ]
        assert len(streams) == 1

    def test_human_mode_output(self) -> None:
        configure_logging(verbose=True, log_json=False)
        _clamp_month_end()
        # Smoke test: format depends on the terminal

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        _clamp_month_end()
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert "clamped day of month" in parsed["event"]
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "pyisoduration._calendar"
        assert "timestamp" in parsed

    def test_quiet_by_default(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        _clamp_month_end()
        with pytest.raises(ParseError):
            parse("P2F")
        assert capfd.readouterr().err == ""
