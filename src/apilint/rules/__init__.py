"""Rule engine — named structural checks over the type model.

Rules depend only on the domain layer.  They never log and never swallow
errors: diagnostics belong to the service and CLI layers.
"""

from apilint.rules.base import Rule, RuleFailure, ValidationReport, Violation
from apilint.rules.list_type_missing import ListTypeMissing
from apilint.rules.registry import (
    DuplicateRuleError,
    RuleRegistry,
    UnknownRuleError,
    builtin_rules,
    default_registry,
)
from apilint.rules.validator import Validator

__all__ = [
    "DuplicateRuleError",
    "ListTypeMissing",
    "Rule",
    "RuleFailure",
    "RuleRegistry",
    "UnknownRuleError",
    "ValidationReport",
    "Validator",
    "Violation",
    "builtin_rules",
    "default_registry",
]
