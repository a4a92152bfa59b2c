"""Validator — runs selected rules over a set of types.

Every (type, rule) pair is independent, so pairs may run on a thread pool.
Results are collected per pair and merged on a stable key afterwards,
which keeps the report identical whatever order the pairs finished in.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from apilint.rules.base import RuleFailure, ValidationReport, Violation

if TYPE_CHECKING:
    from apilint.domain.types import TypeDef
    from apilint.rules.base import Rule
    from apilint.rules.registry import RuleRegistry


@dataclass
class _PairResult:
    position: int
    type_name: str
    rule: str
    members: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def sort_key(self) -> tuple[str, int, str]:
        return (self.type_name, self.position, self.rule)


class Validator:
    """Applies rules from a :class:`RuleRegistry` to declared types.

    Args:
        registry: Source of rules; read-only for the validator.
        workers: Thread count for pair evaluation. ``1`` runs inline.
    """

    def __init__(self, registry: RuleRegistry, *, workers: int = 1) -> None:
        if workers < 1:
            msg = f"workers must be >= 1, got {workers}"
            raise ValueError(msg)
        self._registry = registry
        self._workers = workers

    def select(self, rules: Iterable[str] | None = None) -> list[Rule]:
        """Resolve a rule selection in registry order.

        ``None`` selects every registered rule.  Duplicates collapse.

        Raises:
            UnknownRuleError: For the first requested name not registered.
        """
        if rules is None:
            return list(self._registry)
        wanted = set()
        for name in rules:
            self._registry.get(name)
            wanted.add(name)
        return [self._registry.get(name) for name in self._registry.names() if name in wanted]

    def run(
        self,
        types: Sequence[TypeDef],
        rules: Iterable[str] | None = None,
    ) -> ValidationReport:
        """Run the selected rules against every type.

        Unknown rule names fail the whole run before any rule executes.
        A rule raising while inspecting a type becomes a
        :class:`RuleFailure`; every other pair still runs.
        """
        selected = self.select(rules)
        pairs = [(pos, type_def, rule) for pos, type_def in enumerate(types) for rule in selected]

        if self._workers > 1 and len(pairs) > 1:
            with ThreadPoolExecutor(max_workers=self._workers) as pool:
                results = list(pool.map(lambda p: _evaluate(*p), pairs))
        else:
            results = [_evaluate(*p) for p in pairs]

        results.sort(key=lambda r: r.sort_key)
        violations: list[Violation] = []
        failures: list[RuleFailure] = []
        for result in results:
            if result.error is not None:
                failures.append(
                    RuleFailure(type_name=result.type_name, rule=result.rule, message=result.error)
                )
                continue
            violations.extend(
                Violation(type_name=result.type_name, rule=result.rule, member=m)
                for m in result.members
            )

        return ValidationReport(
            violations=tuple(violations),
            failures=tuple(failures),
            rules=tuple(rule.name for rule in selected),
            types_checked=len(types),
        )


def _evaluate(position: int, type_def: TypeDef, rule: Rule) -> _PairResult:
    result = _PairResult(position=position, type_name=type_def.name, rule=rule.name)
    try:
        result.members = _member_names(rule.validate(type_def))
    except Exception as exc:
        result.error = f"{type(exc).__name__}: {exc}"
    return result


def _member_names(found: object) -> list[str]:
    """Check a rule's return value: a list or tuple of member names."""
    if not isinstance(found, (list, tuple)):
        msg = f"rule returned {type(found).__name__}, expected a list of member names"
        raise TypeError(msg)
    for name in found:
        if not isinstance(name, str):
            msg = f"rule returned member name {name!r} of type {type(name).__name__}"
            raise TypeError(msg)
    return list(found)
