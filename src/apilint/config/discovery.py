"""Locating and reading ``apilint.toml``.

The file is found by walking up from the starting directory towards the
filesystem root, stopping at the first ``apilint.toml``.  Setting
``APILINT_CONFIG`` names the file directly and turns the walk off.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "apilint.toml"
CONFIG_ENV_VAR = "APILINT_CONFIG"


class ConfigError(Exception):
    """``apilint.toml`` exists but could not be read or parsed."""


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), or None.

    A set but dangling ``APILINT_CONFIG`` yields None rather than falling
    back to the walk.
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


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* into a plain table of sections and top-level keys.

    Raises:
        ConfigError: The file is unreadable or not valid TOML.
    """
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except OSError as exc:
        msg = f"Cannot read {path}: {exc.strerror or exc}"
        raise ConfigError(msg) from exc
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc
