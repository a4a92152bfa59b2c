"""Reusable Click options shared by mutating commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import click
from click.core import ParameterSource

from apilint.domain.dry_run import DryRunStrategy, resolve_dry_run

F = TypeVar("F", bound=Callable[..., Any])

DRY_RUN_HELP = (
    'Must be "none", "server", or "client". If client strategy, only print the '
    "changes that would be made, without writing them. If server strategy, "
    "re-validate the changed schema without writing it."
)


def _resolve(ctx: click.Context, param: click.Parameter, value: str | None) -> DryRunStrategy:
    source = ctx.get_parameter_source(param.name or "dry_run")
    explicit = source is not None and source is not ParameterSource.DEFAULT
    try:
        return resolve_dry_run(value, explicit=explicit)
    except ValueError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from exc


def dry_run_option(func: F) -> F:
    """Add ``--dry-run`` and pass the resolved :class:`DryRunStrategy` as ``dry_run``."""
    return click.option(
        "--dry-run",
        "dry_run",
        default=None,
        metavar="[none|client|server]",
        callback=_resolve,
        help=DRY_RUN_HELP,
    )(func)
