"""Settings for one apilint invocation.

Sources, first match wins:

1. Global CLI flags (``--json``, ``-q``, ``-v``, ``--log-json``)
2. ``APILINT_*`` environment variables; ``__`` reaches into a section,
   e.g. ``APILINT_LINT__WORKERS=4``
3. ``apilint.toml``, located by :func:`~apilint.config.discovery.find_config`
4. Defaults on :mod:`apilint.config.models`
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from apilint.config.discovery import ConfigError, find_config, read_config
from apilint.config.models import FixConfig, LintConfig, PluginsConfig

logger = logging.getLogger(__name__)

# Fields computed from where the config file lives; a TOML file cannot set them.
_LOCATION_FIELDS = frozenset({"project_root", "config_path"})

# The source is built by pydantic-settings from a classmethod, so the file
# chosen by from_cli() reaches it through this per-thread slot.
_pending = threading.local()


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings read from an ``apilint.toml`` table.

    Keys apilint does not know are dropped with a warning so that a typo
    in the file does not stop every command from starting.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = _known_keys(settings_cls, toml_path, _load(toml_path))

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


def _load(toml_path: Path | None) -> dict[str, Any]:
    if toml_path is None:
        return {}
    try:
        return read_config(toml_path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc


def _known_keys(
    settings_cls: type[BaseSettings], toml_path: Path | None, data: dict[str, Any]
) -> dict[str, Any]:
    allowed = set(settings_cls.model_fields) - _LOCATION_FIELDS
    for key in sorted(set(data) - allowed):
        logger.warning("Ignoring unknown key %r in %s", key, toml_path)
    return {key: value for key, value in data.items() if key in allowed}


class ApiLintSettings(BaseSettings):
    """Frozen settings shared by every command through ``AppContext``.

    Attributes:
        project_root: Directory of the config file in effect, else the CWD.
            A relative ``[plugins] local_dir`` resolves against it.
        config_path: The ``apilint.toml`` that was read, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "APILINT_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    lint: LintConfig = Field(default_factory=LintConfig)
    fix: FixConfig = Field(default_factory=FixConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlSettingsSource(settings_cls, getattr(_pending, "toml_path", None))
        return (init_settings, env_settings, toml)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> ApiLintSettings:
        """Build settings for a CLI run.

        An explicit *config_path* (``--config``) must name a readable file;
        otherwise the file is discovered from *project_root* or the CWD.

        Raises:
            click.ClickException: The config file is unreadable or invalid.
        """
        toml_path = Path(config_path) if config_path else find_config(project_root)
        if project_root is None:
            project_root = toml_path.parent if toml_path else Path.cwd()

        _pending.toml_path = toml_path
        try:
            return cls(project_root=project_root, config_path=toml_path, **cli_flags)
        finally:
            _pending.toml_path = None

    @property
    def plugin_dir(self) -> Path:
        """Local plugin directory, resolved against the project root."""
        path = Path(self.plugins.local_dir)
        return path if path.is_absolute() else self.project_root / path
