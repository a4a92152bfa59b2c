"""Dry-run strategy for mutating commands.

``--dry-run`` accepts ``none``, ``client`` or ``server``.  Boolean-looking
values are still accepted for backwards compatibility: true means
``client``, false means ``none``.  Leaving the flag unset currently
resolves to ``client``; both legacy forms log a deprecation warning.
"""

from __future__ import annotations

import logging
from enum import StrEnum

logger = logging.getLogger(__name__)

VALID_VALUES_HINT = 'Must be "none", "server", or "client".'

UNSET_DEPRECATION = (
    "The unset value for --dry-run is deprecated and a value will be required "
    f"in a future version. {VALID_VALUES_HINT}"
)
BOOLEAN_DEPRECATION = (
    "Boolean values for --dry-run are deprecated and will be removed in a "
    f"future version. {VALID_VALUES_HINT}"
)

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class DryRunStrategy(StrEnum):
    """How a mutating command should treat its changes."""

    NONE = "none"
    CLIENT = "client"
    SERVER = "server"

    @property
    def is_none(self) -> bool:
        return self is DryRunStrategy.NONE

    @property
    def is_client(self) -> bool:
        return self is DryRunStrategy.CLIENT

    @property
    def is_server(self) -> bool:
        return self is DryRunStrategy.SERVER


def resolve_dry_run(value: str | None, *, explicit: bool = True) -> DryRunStrategy:
    """Resolve a raw ``--dry-run`` value to a strategy.

    Args:
        value: The flag value as given, or None when unset.
        explicit: Whether the user passed the flag on the command line.

    Raises:
        ValueError: If *value* is neither a strategy name nor a boolean.
    """
    if not value and not explicit:
        logger.warning(UNSET_DEPRECATION)
        return DryRunStrategy.CLIENT

    raw = value or ""
    if raw in _TRUE_VALUES:
        logger.warning(BOOLEAN_DEPRECATION)
        return DryRunStrategy.CLIENT
    if raw in _FALSE_VALUES:
        return DryRunStrategy.NONE

    try:
        return DryRunStrategy(raw)
    except ValueError:
        msg = f"Invalid dry-run value ({raw}). {VALID_VALUES_HINT}"
        raise ValueError(msg) from None


def dry_run_message(message: str, strategy: DryRunStrategy) -> str:
    """Decorate a success message with the dry-run mode it ran under.

    >>> dry_run_message("api.yaml fixed", DryRunStrategy.SERVER)
    'api.yaml fixed (server dry run)'
    """
    if strategy.is_client:
        return f"{message} (dry run)"
    if strategy.is_server:
        return f"{message} (server dry run)"
    return message
