"""Subcommand modules for apilint.

Provides register_commands() which uses deferred imports to keep
``apilint --help`` fast as the codebase grows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from apilint.commands.fix import fix
    from apilint.commands.lint import lint
    from apilint.commands.rules import rules

    cli.add_command(lint)
    cli.add_command(rules)
    cli.add_command(fix)
