"""Shared service-layer helper functions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from apilint.domain.schema import parse_types

if TYPE_CHECKING:
    from pathlib import Path

    from apilint.domain.types import TypeDef
    from apilint.rules.base import ValidationReport


def load_schema(path: Path) -> tuple[Any, list[TypeDef]]:
    """Read a schema file and build its types.

    Raises:
        DocumentError: The file cannot be read or parsed.
        SchemaError: The document does not describe valid types.
    """
    from apilint.infrastructure.schema_file import read_document

    document = read_document(path)
    return document, parse_types(document, source=str(path))


def report_payload(report: ValidationReport) -> dict[str, Any]:
    """JSON-ready view of a validation report."""
    return {
        "violations": [v.model_dump() for v in report.violations],
        "failures": [f.model_dump() for f in report.failures],
        "count": len(report.violations),
        "failure_count": len(report.failures),
        "types_checked": report.types_checked,
        "rules": list(report.rules),
    }


def plural(count: int, noun: str) -> str:
    """``1 violation`` / ``2 violations``.

    >>> plural(2, "member")
    '2 members'
    """
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"
