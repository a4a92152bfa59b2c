"""BaseService — foundation for apilint services.

Every service receives the :class:`RuleRegistry` built at startup and,
optionally, the :class:`PluginManager` whose observer hooks it notifies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from apilint.plugins.manager import PluginManager
    from apilint.rules.registry import RuleRegistry

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class LintService(BaseService):
            def lint(self, path: Path) -> ServiceResult:
                validator = Validator(self._registry)
                ...
    """

    def __init__(self, registry: RuleRegistry, *, plugins: PluginManager | None = None) -> None:
        self._registry = registry
        self._plugins = plugins

    def _dispatch_event(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Call a plugin observer hook. No-op without a plugin manager.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._plugins is None:
            return
        try:
            getattr(self._plugins.hook, hook_name)(**payload)
        except Exception:
            logger.debug("Plugin hook %s failed", hook_name, exc_info=True)
            warnings.append(f"Plugin hook {hook_name} failed")
