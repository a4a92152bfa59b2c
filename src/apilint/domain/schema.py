"""Schema front end — builds TypeDef values from a plain schema document.

The document is whatever the YAML/JSON reader produced: a mapping with a
``types`` list.  Each type entry has ``name``, ``kind`` and, for structs,
``members``.  Member entries carry a nested ``type`` entry plus optional
``comments`` (parsed for ``+key=value`` tags) and ``tags``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from apilint.domain.tags import extract_comment_tags, merge_tags
from apilint.domain.types import Kind, Member, TypeDef


class SchemaError(ValueError):
    """Raised when a schema document does not describe a valid type set."""


def parse_types(document: Any, *, source: str = "<schema>") -> list[TypeDef]:
    """Build the top-level types declared by *document*, in document order."""
    if not isinstance(document, Mapping):
        msg = f"{source}: schema document must be a mapping with a 'types' list"
        raise SchemaError(msg)
    entries = document.get("types")
    if entries is None:
        return []
    if not _is_list(entries):
        msg = f"{source}: 'types' must be a list"
        raise SchemaError(msg)

    types: list[TypeDef] = []
    for index, entry in enumerate(entries):
        where = f"{source}: types[{index}]"
        type_def = _parse_type(entry, where)
        if not type_def.name:
            msg = f"{where}: top-level types need a name"
            raise SchemaError(msg)
        types.append(type_def)
    return types


def member_tags(entry: Mapping[str, Any], where: str = "<member>") -> dict[str, list[str]]:
    """Explicit ``tags`` merged with tags extracted from ``comments``."""
    explicit: dict[str, list[str]] = {}
    raw_tags = entry.get("tags") or {}
    if not isinstance(raw_tags, Mapping):
        msg = f"{where}: 'tags' must be a mapping"
        raise SchemaError(msg)
    for key, value in raw_tags.items():
        if value is None:
            explicit[str(key)] = [""]
        elif _is_list(value):
            explicit[str(key)] = [str(v) for v in value]
        else:
            explicit[str(key)] = [str(value)]

    comments = entry.get("comments") or []
    if isinstance(comments, str):
        comments = comments.splitlines()
    if not _is_list(comments):
        msg = f"{where}: 'comments' must be a list of lines"
        raise SchemaError(msg)
    return merge_tags(explicit, extract_comment_tags(str(line) for line in comments))


def _parse_type(entry: Any, where: str) -> TypeDef:
    if isinstance(entry, str):
        # Shorthand: ``type: string`` names a primitive.
        return TypeDef(name=entry, kind=Kind.PRIMITIVE)
    if not isinstance(entry, Mapping):
        msg = f"{where}: type entry must be a mapping"
        raise SchemaError(msg)

    raw_kind = entry.get("kind")
    if raw_kind is None:
        msg = f"{where}: missing 'kind'"
        raise SchemaError(msg)
    if not isinstance(raw_kind, str):
        msg = f"{where}: 'kind' must be a string, got {raw_kind!r}"
        raise SchemaError(msg)
    kind = Kind.parse(raw_kind)

    members: list[Member] = []
    raw_members = entry.get("members") or []
    if not _is_list(raw_members):
        msg = f"{where}: 'members' must be a list"
        raise SchemaError(msg)
    for index, raw_member in enumerate(raw_members):
        members.append(_parse_member(raw_member, f"{where}.members[{index}]"))

    elem = entry.get("elem")
    key = entry.get("key")
    try:
        return TypeDef(
            name=str(entry.get("name") or ""),
            kind=kind,
            members=tuple(members),
            elem=_parse_type(elem, f"{where}.elem") if elem is not None else None,
            key=_parse_type(key, f"{where}.key") if key is not None else None,
        )
    except ValidationError as exc:
        msg = f"{where}: {exc.errors()[0]['msg']}"
        raise SchemaError(msg) from exc


def _parse_member(entry: Any, where: str) -> Member:
    if not isinstance(entry, Mapping):
        msg = f"{where}: member entry must be a mapping"
        raise SchemaError(msg)
    name = entry.get("name")
    if not name:
        msg = f"{where}: member needs a name"
        raise SchemaError(msg)
    if "type" not in entry:
        msg = f"{where}: member {name!r} needs a 'type'"
        raise SchemaError(msg)
    return Member(
        name=str(name),
        type=_parse_type(entry["type"], f"{where}.type"),
        tags=member_tags(entry, where),
    )


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))
