"""Comment tag extraction — ``+key=value`` markers in doc comments."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

TAG_MARKER = "+"


def extract_comment_tags(lines: Iterable[str], marker: str = TAG_MARKER) -> dict[str, list[str]]:
    """Collect marker-prefixed tags from comment lines.

    Each tag line contributes one value; repeated keys accumulate in order.
    A tag without ``=`` is recorded with an empty value.

    Examples:
        >>> extract_comment_tags(["+listType=atomic", "Docs.", "+optional"])
        {'listType': ['atomic'], 'optional': ['']}
        >>> extract_comment_tags(["+k=a", "  +k=b=c"])
        {'k': ['a', 'b=c']}
    """
    out: dict[str, list[str]] = {}
    for raw in lines:
        line = raw.strip()
        if not line.startswith(marker):
            continue
        key, _, value = line[len(marker) :].partition("=")
        out.setdefault(key, []).append(value)
    return out


def merge_tags(*sources: Mapping[str, list[str]]) -> dict[str, list[str]]:
    """Merge tag mappings, concatenating values for keys that repeat."""
    merged: dict[str, list[str]] = {}
    for source in sources:
        for key, values in source.items():
            merged.setdefault(key, []).extend(values)
    return merged


def format_tag(key: str, value: str, marker: str = TAG_MARKER) -> str:
    """Render a tag as a comment line.

    >>> format_tag("listType", "atomic")
    '+listType=atomic'
    """
    return f"{marker}{key}={value}"
