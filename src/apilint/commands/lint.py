"""Command: run lint rules over a schema file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from apilint.commands._base import LintCommand

if TYPE_CHECKING:
    from apilint.commands._context import AppContext


@click.command(
    cls=LintCommand,
    examples="""\
  apilint lint api/types.yaml
  apilint lint api/types.yaml --rule list_type_missing
  apilint --json lint api/types.json
  apilint -q lint api/types.yaml --workers 4""",
)
@click.argument("schema", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "-r",
    "--rule",
    "rules",
    multiple=True,
    help="Rule to run (repeatable). Defaults to [lint] rules, or every rule.",
)
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Evaluate (type, rule) pairs on this many threads.",
)
@click.pass_obj
def lint(app: AppContext, schema: Path, rules: tuple[str, ...], workers: int | None) -> None:
    """Check SCHEMA against the registered lint rules."""
    from apilint.services.lint import LintService

    selection = list(rules) or list(app.settings.lint.rules) or None
    svc = LintService(app.registry, plugins=app.plugins)
    app.emit(
        svc.lint_file(
            schema,
            rules=selection,
            workers=workers or app.settings.lint.workers,
        )
    )
