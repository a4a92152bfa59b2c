"""RuleRegistry — name-to-rule mapping built once at startup.

The registry is an explicit value: build it with :func:`default_registry`
(plus any plugin rules) and hand it to the :class:`~apilint.rules.Validator`.
Names are unique; the invariant is enforced when a rule is registered.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from apilint.rules.base import Rule
from apilint.rules.list_type_missing import ListTypeMissing


class DuplicateRuleError(ValueError):
    """A rule with the same name is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Rule {name!r} is already registered")
        self.name = name


class UnknownRuleError(LookupError):
    """No rule is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Rule {name!r} not found")
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])


class RuleRegistry:
    """Maps rule names to rule instances.

    Iteration and :meth:`names` follow lexical name order, never
    registration order, so runs are reproducible.
    """

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        self._rules: dict[str, Rule] = {}
        for rule in rules:
            self.register(rule)

    def register(self, rule: Rule) -> None:
        """Add *rule* under its name.

        Raises:
            ValueError: If the rule has no name.
            DuplicateRuleError: If the name is already taken.
        """
        name = getattr(rule, "name", "")
        if not isinstance(name, str) or not name.strip():
            msg = f"Rule {rule!r} must have a non-empty name"
            raise ValueError(msg)
        if name in self._rules:
            raise DuplicateRuleError(name)
        self._rules[name] = rule

    def get(self, name: str) -> Rule:
        """Return the rule registered as *name*.

        Raises:
            UnknownRuleError: If no such rule exists.
        """
        try:
            return self._rules[name]
        except KeyError:
            raise UnknownRuleError(name) from None

    def names(self) -> list[str]:
        """All registered names, sorted."""
        return sorted(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return (self._rules[name] for name in self.names())


def builtin_rules() -> list[Rule]:
    """Fresh instances of every rule shipped with apilint."""
    return [ListTypeMissing()]


def default_registry() -> RuleRegistry:
    """A registry holding the built-in rules."""
    return RuleRegistry(builtin_rules())
