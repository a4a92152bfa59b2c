"""Rich Console factory and theme for apilint output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LINT_THEME = Theme(
    {
        "lint.ok": "bold green",
        "lint.error": "bold red",
        "lint.warning": "bold yellow",
        "lint.op": "bold cyan",
        "lint.key": "dim",
        "lint.type": "bold blue",
        "lint.member": "bold",
        "lint.rule": "magenta",
        "lint.path": "dim",
        "lint.dry_run": "italic yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=LINT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
