"""Command: add missing list-type tags to a schema file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from apilint.commands._base import LintCommand
from apilint.commands._options import dry_run_option
from apilint.rules.list_type_missing import LIST_TYPES

if TYPE_CHECKING:
    from apilint.commands._context import AppContext
    from apilint.domain.dry_run import DryRunStrategy


@click.command(
    cls=LintCommand,
    examples="""\
  apilint fix api/types.yaml --dry-run=client
  apilint fix api/types.yaml --dry-run=server
  apilint fix api/types.yaml --dry-run=none --list-type set""",
)
@click.argument("schema", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--list-type",
    type=click.Choice(LIST_TYPES),
    default=None,
    help="listType value to add. Defaults to [fix] list_type.",
)
@dry_run_option
@click.pass_obj
def fix(app: AppContext, schema: Path, list_type: str | None, dry_run: DryRunStrategy) -> None:
    """Tag every untagged slice member in SCHEMA with +listType."""
    from apilint.services.fix import FixService

    svc = FixService(app.registry, plugins=app.plugins)
    app.emit(
        svc.fix(
            schema,
            list_type=list_type or app.settings.fix.list_type,
            strategy=dry_run,
        )
    )
