"""LintService — run registered rules over a schema and report violations.

Follows the linter pattern: a clean schema is ``ok``; violations, rule
failures and configuration errors are ``ok=False`` so the CLI exits
non-zero and code generation can be blocked on the result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from apilint.domain.schema import SchemaError
from apilint.infrastructure.schema_file import DocumentError
from apilint.rules.registry import UnknownRuleError
from apilint.rules.validator import Validator
from apilint.services._helpers import load_schema, plural, report_payload
from apilint.services.base import BaseService
from apilint.services.result import ServiceResult

if TYPE_CHECKING:
    from pathlib import Path

    from apilint.domain.types import TypeDef

logger = logging.getLogger(__name__)


class LintService(BaseService):
    """Lists rules and validates schemas against them."""

    def list_rules(self) -> ServiceResult:
        """Describe every registered rule, in name order."""
        items = [
            {"name": rule.name, "description": _summary(rule)}
            for rule in self._registry
        ]
        return ServiceResult(
            ok=True,
            op="rules",
            data={"items": items, "count": len(items)},
        )

    def lint_file(
        self,
        path: Path,
        *,
        rules: Iterable[str] | None = None,
        workers: int = 1,
    ) -> ServiceResult:
        """Load *path* and lint every type it declares."""
        try:
            _document, types = load_schema(path)
        except (DocumentError, SchemaError) as exc:
            return ServiceResult.failure(
                "lint", "INVALID_SCHEMA", str(exc), detail={"path": str(path)}
            )
        return self.lint_types(types, rules=rules, workers=workers, source=str(path))

    def lint_types(
        self,
        types: Sequence[TypeDef],
        *,
        rules: Iterable[str] | None = None,
        workers: int = 1,
        source: str = "<types>",
    ) -> ServiceResult:
        """Lint already-built types.

        *rules* of ``None`` (or empty) selects every registered rule.
        """
        selection = list(rules) if rules else None
        try:
            report = Validator(self._registry, workers=workers).run(types, selection)
        except UnknownRuleError as exc:
            return ServiceResult.failure(
                "lint",
                "UNKNOWN_RULE",
                str(exc),
                detail={"rule": exc.name, "available": self._registry.names()},
            )

        logger.debug(
            "Linted %s: %d types, %d violations, %d failures",
            source,
            report.types_checked,
            len(report.violations),
            len(report.failures),
        )

        warnings: list[str] = []
        self._dispatch_event(
            "post_lint",
            {
                "types_checked": report.types_checked,
                "violations_found": len(report.violations),
                "failures_found": len(report.failures),
            },
            warnings,
        )

        data = {"source": source, **report_payload(report)}
        if report.failures:
            return ServiceResult.failure(
                "lint",
                "RULE_FAILED",
                f"{plural(len(report.failures), 'rule failure')} while linting {source}",
                detail=data,
                warnings=warnings,
            )
        if report.violations:
            return ServiceResult.failure(
                "lint",
                "VIOLATIONS",
                f"{plural(len(report.violations), 'violation')} in {source}",
                detail=data,
                warnings=warnings,
            )
        return ServiceResult(ok=True, op="lint", data=data, warnings=warnings)


def _summary(rule: object) -> str:
    doc = type(rule).__doc__ or ""
    return doc.strip().splitlines()[0] if doc.strip() else ""
