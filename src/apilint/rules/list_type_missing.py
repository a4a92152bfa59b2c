"""list_type_missing — slice members must declare their list semantics.

Schema consumers merge and patch list-valued fields according to the
``+listType`` tag (``atomic``, ``set`` or ``map``).  This rule only checks
that the tag is present; whether its value is valid is a separate concern.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apilint.domain.types import Kind

if TYPE_CHECKING:
    from apilint.domain.types import TypeDef

LIST_TYPE_TAG = "listType"
LIST_TYPES = ("atomic", "map", "set")


class ListTypeMissing:
    """Flags slice members of a struct that carry no ``listType`` tag."""

    name = "list_type_missing"

    def validate(self, type_def: TypeDef) -> list[str]:
        fields: list[str] = []
        if type_def.kind is not Kind.STRUCT:
            return fields
        for member in type_def.members:
            if member.type.kind is not Kind.SLICE:
                continue
            if member.tag(LIST_TYPE_TAG) is None:
                fields.append(member.name)
        return fields
