"""Type model — the read-only structural view rules inspect.

A :class:`TypeDef` is one declared data type as seen by the code generator.
Only struct types carry members; slices, maps, and pointers may point at an
element type.  Instances are frozen and built once per run by the schema
front end (:mod:`apilint.domain.schema`).
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, PlainSerializer, model_validator


class Kind(StrEnum):
    """Structural kind of a declared type."""

    STRUCT = "struct"
    SLICE = "slice"
    MAP = "map"
    PRIMITIVE = "primitive"
    POINTER = "pointer"
    OTHER = "other"

    @classmethod
    def parse(cls, raw: str) -> Kind:
        """Map a front-end kind name to a Kind; unrecognised names become OTHER.

        Examples:
            >>> Kind.parse("Slice")
            <Kind.SLICE: 'slice'>
            >>> Kind.parse("interface")
            <Kind.OTHER: 'other'>
        """
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.OTHER


def _freeze_tags(tags: Mapping[str, tuple[str, ...]]) -> Mapping[str, tuple[str, ...]]:
    return MappingProxyType({key: tuple(values) for key, values in tags.items()})


def _dump_tags(tags: Mapping[str, tuple[str, ...]]) -> dict[str, list[str]]:
    return {key: list(values) for key, values in tags.items()}


# Tag values are tuples behind a read-only mapping; dumped back as lists.
TagMap = Annotated[
    Mapping[str, tuple[str, ...]],
    AfterValidator(_freeze_tags),
    PlainSerializer(_dump_tags),
]


class Member(BaseModel):
    """One named field of a struct type."""

    model_config = {"frozen": True}

    name: str
    type: TypeDef
    tags: TagMap = Field(default_factory=dict, validate_default=True)

    def tag(self, key: str) -> tuple[str, ...] | None:
        """Return the values recorded for *key*, or None when the tag is absent.

        A tag written without a value (``+listType``) is present with ``("",)``.
        """
        return self.tags.get(key)

    def has_tag(self, key: str) -> bool:
        return key in self.tags


class TypeDef(BaseModel):
    """One declared data type.

    Attributes:
        name: Type identifier; empty for anonymous member types.
        kind: Structural kind.
        members: Struct members in declaration order (struct kinds only).
        elem: Element type for slices, maps, and pointers.
        key: Key type for maps.
    """

    model_config = {"frozen": True}

    name: str = ""
    kind: Kind
    members: tuple[Member, ...] = ()
    elem: TypeDef | None = None
    key: TypeDef | None = None

    @model_validator(mode="after")
    def check_members(self) -> TypeDef:
        if self.members and self.kind is not Kind.STRUCT:
            msg = f"Type {self.name or '<anonymous>'!r} of kind {self.kind} cannot have members"
            raise ValueError(msg)
        seen: set[str] = set()
        for member in self.members:
            if member.name in seen:
                msg = f"Duplicate member {member.name!r} in type {self.name!r}"
                raise ValueError(msg)
            seen.add(member.name)
        return self

    @property
    def is_struct(self) -> bool:
        return self.kind is Kind.STRUCT

    def member(self, name: str) -> Member | None:
        """Look up a member by name."""
        for m in self.members:
            if m.name == name:
                return m
        return None


Member.model_rebuild()
