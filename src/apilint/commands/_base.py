"""Click command and group classes carrying an ``--examples`` flag.

``--help`` stays short; sample invocations live behind ``--examples``,
which prints them and exits before any argument is validated.
"""

from __future__ import annotations

from typing import Any

import click


class ExamplesOption(click.Option):
    """Eager flag that prints the owning command's examples and exits."""

    def __init__(self, examples: str) -> None:
        super().__init__(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=self._show,
            help="Show usage examples.",
        )
        self.examples = examples

    def _show(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value and not ctx.resilient_parsing:
            click.echo(f"Examples for '{ctx.command_path}':\n")
            click.echo(self.examples)
            ctx.exit(0)


class _ExamplesMixin:
    """Accepts ``examples=`` and adds an :class:`ExamplesOption` when given."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(ExamplesOption(examples))


class LintCommand(_ExamplesMixin, click.Command):
    """An apilint subcommand."""


class LintGroup(_ExamplesMixin, click.Group):
    """The apilint root group; subcommands default to :class:`LintCommand`."""

    command_class = LintCommand
