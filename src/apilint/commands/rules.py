"""Command: list registered lint rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from apilint.commands._base import LintCommand

if TYPE_CHECKING:
    from apilint.commands._context import AppContext


@click.command(
    cls=LintCommand,
    examples="""\
  apilint rules
  apilint -q rules
  apilint --json rules""",
)
@click.pass_obj
def rules(app: AppContext) -> None:
    """List the rules available to `apilint lint`."""
    from apilint.services.lint import LintService

    app.emit(LintService(app.registry).list_rules())
