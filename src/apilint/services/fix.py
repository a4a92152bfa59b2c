"""FixService — tag untagged slice members with a ``+listType`` comment.

The fix is driven by the ``list_type_missing`` rule: every member it flags
gets ``+listType=<value>`` appended to its ``comments``.  The dry-run
strategy decides what happens to the edited document:

* ``none``   — the schema file is rewritten.
* ``client`` — the planned edits are reported; nothing is written.
* ``server`` — the edited document is re-validated in memory and the
  remaining violations are reported; nothing is written.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, MutableMapping
from typing import TYPE_CHECKING, Any

from apilint.domain.dry_run import DryRunStrategy, dry_run_message
from apilint.domain.schema import SchemaError, parse_types
from apilint.domain.tags import format_tag
from apilint.infrastructure.schema_file import DocumentError, write_document
from apilint.rules.list_type_missing import LIST_TYPE_TAG, LIST_TYPES, ListTypeMissing
from apilint.rules.registry import UnknownRuleError
from apilint.rules.validator import Validator
from apilint.services._helpers import load_schema, plural, report_payload
from apilint.services.base import BaseService
from apilint.services.result import ServiceResult

if TYPE_CHECKING:
    from pathlib import Path

    from apilint.domain.types import TypeDef

logger = logging.getLogger(__name__)


class FixService(BaseService):
    """Repairs missing list-type tags in a schema file."""

    def fix(
        self,
        path: Path,
        *,
        list_type: str = "atomic",
        strategy: DryRunStrategy = DryRunStrategy.NONE,
    ) -> ServiceResult:
        if list_type not in LIST_TYPES:
            return ServiceResult.failure(
                "fix",
                "INVALID_LIST_TYPE",
                f"Unknown list type {list_type!r}; expected one of {', '.join(LIST_TYPES)}",
            )
        try:
            rule = self._registry.get(ListTypeMissing.name)
        except UnknownRuleError as exc:
            return ServiceResult.failure("fix", "UNKNOWN_RULE", str(exc), detail={"rule": exc.name})

        try:
            document, types = load_schema(path)
        except (DocumentError, SchemaError) as exc:
            return ServiceResult.failure(
                "fix", "INVALID_SCHEMA", str(exc), detail={"path": str(path)}
            )

        edits = _apply_tags(document, types, rule.validate, format_tag(LIST_TYPE_TAG, list_type))
        data: dict[str, Any] = {
            "path": str(path),
            "strategy": strategy.value,
            "edits": edits,
            "count": len(edits),
        }

        if strategy.is_server:
            report = Validator(self._registry).run(
                parse_types(document, source=str(path)), [rule.name]
            )
            data["remaining"] = report_payload(report)["violations"]
        elif strategy.is_none and edits:
            write_document(path, document)
            logger.debug("Rewrote %s with %d list-type tags", path, len(edits))

        if edits:
            summary = f"{path.name}: {plural(len(edits), 'member')} tagged"
        else:
            summary = f"{path.name}: nothing to fix"
        data["message"] = dry_run_message(summary, strategy)

        warnings: list[str] = []
        self._dispatch_event(
            "post_fix",
            {"path": str(path), "strategy": strategy.value, "members_tagged": len(edits)},
            warnings,
        )
        return ServiceResult(ok=True, op="fix", data=data, warnings=warnings)


def _apply_tags(
    document: Any,
    types: list[TypeDef],
    validate: Callable[[TypeDef], list[str]],
    tag_line: str,
) -> list[dict[str, str]]:
    """Append *tag_line* to the comments of every flagged member in place."""
    edits: list[dict[str, str]] = []
    entries = (document.get("types") or []) if isinstance(document, Mapping) else []
    for type_def, entry in zip(types, entries, strict=True):
        flagged = set(validate(type_def))
        if not flagged:
            continue
        for member_entry in entry.get("members") or []:
            name = str(member_entry.get("name"))
            if name not in flagged:
                continue
            _append_comment(member_entry, tag_line)
            edits.append({"type": type_def.name, "member": name, "tag": tag_line})
    return edits


def _append_comment(member_entry: MutableMapping[str, Any], line: str) -> None:
    comments = member_entry.get("comments")
    if not comments:
        member_entry["comments"] = [line]
    elif isinstance(comments, str):
        member_entry["comments"] = f"{comments.rstrip()}\n{line}"
    else:
        comments.append(line)
