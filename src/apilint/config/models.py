"""Section models for ``apilint.toml``.

Every field has a default, so a config file only lists what it changes
and an empty or absent file is valid.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LintConfig(BaseModel):
    """``[lint]``: which rules run and how many worker threads run them.

    An empty ``rules`` list selects every registered rule.
    """

    model_config = {"frozen": True}

    rules: list[str] = Field(default_factory=list)
    workers: int = Field(default=1, ge=1)


class FixConfig(BaseModel):
    """``[fix]``: the ``listType`` value written onto untagged members."""

    model_config = {"frozen": True}

    list_type: str = "atomic"


class PluginsConfig(BaseModel):
    """``[plugins]``: plugin loading switch and local plugin directory."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".apilint/plugins"
