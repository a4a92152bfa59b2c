"""Pluggy hook specifications for apilint.

One setup-time hook lets plugins contribute rules to the registry; two
observer hooks report the outcome of each lint run and each fix.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from apilint.rules.base import Rule

PROJECT_NAME = "apilint"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class ApiLintHookSpec:
    """Hook specifications for the apilint plugin system."""

    @hookspec
    def register_rules(self) -> list[Rule] | None:
        """Return rule instances to add to the registry."""

    @hookspec
    def post_lint(
        self,
        types_checked: int,
        violations_found: int,
        failures_found: int,
    ) -> None:
        """Called after a lint run completes."""

    @hookspec
    def post_fix(self, path: str, strategy: str, members_tagged: int) -> None:
        """Called after a fix completes.

        *strategy* is the dry-run strategy value; with anything but
        ``none`` the file was left untouched and *members_tagged* counts
        planned edits.
        """
