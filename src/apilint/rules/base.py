"""Rule contract and the values a validation run produces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pydantic import BaseModel

if TYPE_CHECKING:
    from apilint.domain.types import TypeDef


@runtime_checkable
class Rule(Protocol):
    """A named, stateless check over one type.

    ``validate`` returns the names of offending members in declaration
    order; an empty list is the clean result.  It raises only for genuine
    internal errors and must not mutate its input.
    """

    name: str

    def validate(self, type_def: TypeDef) -> list[str]: ...


class Violation(BaseModel):
    """A rule failing against one member of one type."""

    model_config = {"frozen": True}

    type_name: str
    rule: str
    member: str


class RuleFailure(BaseModel):
    """A rule that could not finish inspecting a type."""

    model_config = {"frozen": True}

    type_name: str
    rule: str
    message: str


class ValidationReport(BaseModel):
    """Ordered outcome of one validator run.

    Attributes:
        violations: Sorted by type name, rule name, then member order.
        failures: Rule errors, sorted the same way.
        rules: Names of the rules that ran, in run order.
        types_checked: Number of types inspected.
    """

    model_config = {"frozen": True}

    violations: tuple[Violation, ...] = ()
    failures: tuple[RuleFailure, ...] = ()
    rules: tuple[str, ...] = ()
    types_checked: int = 0

    @property
    def ok(self) -> bool:
        """True when every (type, rule) pair ran to completion."""
        return not self.failures

    @property
    def clean(self) -> bool:
        """True when every pair ran and nothing was flagged."""
        return self.ok and not self.violations
