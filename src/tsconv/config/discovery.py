"""Locate and read ``tsconv.toml``.

The file is found by walking up from the working directory, the way git
finds ``.git/``. ``TSCONV_CONFIG`` names a file directly and disables the
walk-up. Settings merging lives in :mod:`tsconv.config.settings`.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "tsconv.toml"
CONFIG_ENV_VAR = "TSCONV_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest tsconv.toml at or above *start* (default: cwd).

    When TSCONV_CONFIG is set, only that file is considered.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path | None) -> dict[str, Any]:
    """Parse *path* into raw TOML sections; a missing file yields ``{}``.

    Raises:
        click.ClickException: If the file is not valid TOML.
    """
    if path is None or not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
