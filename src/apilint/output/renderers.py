"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from apilint.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from apilint.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Lint findings print one ``Type.member: rule`` line each so the output
    can be piped to grep or diffed between runs.
    """
    if not result.ok:
        detail = result.error.detail if result.error else {}
        lines = [
            f"{v['type_name']}.{v['member']}: {v['rule']}" for v in detail.get("violations", [])
        ]
        lines.extend(
            f"{f['type_name']}: {f['rule']} failed: {f['message']}"
            for f in detail.get("failures", [])
        )
        if lines:
            return "\n".join(lines)
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "rules":
        return "\n".join(item["name"] for item in result.data.get("items", []))
    if result.op == "fix":
        return str(result.data.get("message", "OK: fix"))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="lint.ok")
    op = Text(f"  {result.op}", style="lint.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="lint.key")
    v = Text(str(value), style="lint.path" if key in ("path", "source") else "")
    console.print(k, v, sep="", end="")
    console.print()


def _violation_table(violations: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Type", style="lint.type", no_wrap=True)
    table.add_column("Member", style="lint.member")
    table.add_column("Rule", style="lint.rule")
    for v in violations:
        table.add_row(str(v["type_name"]), str(v["member"]), str(v["rule"]))
    return table


def _render_failures(console: Console, failures: list[dict[str, Any]]) -> None:
    for f in failures:
        console.print(
            f"  [lint.error]failed[/lint.error] {escape(f['type_name'])} "
            f"[lint.rule]{escape(f['rule'])}[/lint.rule]: {escape(f['message'])}",
        )


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="lint.error")
    op = Text(f"  {result.op}", style="lint.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    detail = err.detail if err else {}
    violations = detail.get("violations", [])
    failures = detail.get("failures", [])
    if violations:
        console.print()
        console.print(_violation_table(violations))
    if failures:
        console.print()
        _render_failures(console, failures)
    if violations or failures:
        console.print(
            f"\n{len(violations)} violations, {len(failures)} failures "
            f"across {detail.get('types_checked', 0)} types"
        )
        return

    if verbose and detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_lint(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a clean lint run."""
    d = result.data
    rules = ", ".join(d.get("rules", [])) or "none"
    console.print(
        f"[lint.ok]OK[/lint.ok]  No violations in {escape(str(d.get('source', '?')))} "
        f"({d.get('types_checked', 0)} types, rules: {rules})"
    )


def _render_rules(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the registered rules as a table."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Rule", style="lint.rule", no_wrap=True)
    table.add_column("Description")
    for item in items:
        table.add_row(str(item.get("name", "")), str(item.get("description", "")))
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} rules")


def _render_fix(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render fix results: one line per tagged member, then leftovers."""
    d = result.data
    _status_line(console, result)
    style = "" if d.get("strategy", "none") == "none" else "lint.dry_run"
    console.print(Text(f"  {d.get('message', '')}", style=style))
    for edit in d.get("edits", []):
        console.print(
            f"  [lint.type]{escape(edit['type'])}[/lint.type].[lint.member]"
            f"{escape(edit['member'])}[/lint.member]  {escape(edit['tag'])}",
        )
    remaining = d.get("remaining")
    if remaining is not None:
        console.print(f"\n{len(remaining)} violations remain after fix")
        if remaining:
            console.print(_violation_table(remaining))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "lint": _render_lint,
    "rules": _render_rules,
    "fix": _render_fix,
}
