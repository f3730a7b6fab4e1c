"""Shared pytest fixtures for tsconv tests."""

from __future__ import annotations

from datetime import timedelta, timezone
from pathlib import Path

import pytest
from click.testing import CliRunner

from tsconv.config.settings import TsconvSettings

UTC_PLUS_8 = timezone(timedelta(hours=8))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep TSCONV_* variables from the developer's shell out of tests."""
    for var in ("TSCONV_CONFIG", "TSCONV_TZ", "TSCONV_JSON_OUTPUT", "TSCONV_QUIET"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to an empty temp dir so no tsconv.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path) -> TsconvSettings:
    """Settings with UTC as the local zone and default display zone (+08:00)."""
    return TsconvSettings.from_cli(start=tmp_path, tz="UTC")
