"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from tsconv.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    tsconv = logging.getLogger("tsconv")
    tsconv_level = tsconv.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    tsconv.setLevel(tsconv_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("tsconv").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("tsconv").level == logging.WARNING

    def test_human_mode_output(self) -> None:
        configure_logging(verbose=True, log_json=False)
        log = structlog.get_logger("tsconv.test")
        log.warning("hello world", key="val")

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("tsconv.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "tsconv.test"
        assert "timestamp" in parsed

    def test_converter_debug_is_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        from tsconv.domain.conversion import convert

        configure_logging(verbose=True, log_json=True)
        convert("1700000000")

        captured = capfd.readouterr()
        lines = [json.loads(line) for line in captured.err.strip().splitlines()]
        assert any(line["logger"] == "tsconv.domain.conversion" for line in lines)
        assert all(line["level"] == "debug" for line in lines)

    def test_converter_quiet_without_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        from tsconv.domain.conversion import convert

        configure_logging(verbose=False, log_json=True)
        convert("1700000000")

        captured = capfd.readouterr()
        assert captured.err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        root = logging.getLogger()
        assert len(root.handlers) == 1
