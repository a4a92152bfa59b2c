"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Builds the rule registry (built-in plus plugin
rules) lazily and centralizes result emission (stdout/stderr routing +
exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from apilint.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from apilint.config.settings import ApiLintSettings
    from apilint.plugins.manager import PluginManager
    from apilint.rules.registry import RuleRegistry
    from apilint.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  Plugins and the
    registry are created on first use so ``--help`` and ``--version``
    never import plugin code.
    """

    def __init__(self, settings: ApiLintSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None
        self._registry: RuleRegistry | None = None

        from apilint.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @property
    def plugins(self) -> PluginManager:
        """The plugin manager (discovery runs on first access)."""
        if self._plugins is None:
            from apilint.plugins.manager import PluginManager

            self._plugins = PluginManager()
            if self.settings.plugins.enabled:
                self._plugins.discover_and_load(local_dir=self.settings.plugin_dir)
        return self._plugins

    @property
    def registry(self) -> RuleRegistry:
        """Built-in rules plus any contributed by plugins."""
        if self._registry is None:
            from apilint.rules.registry import default_registry

            registry = default_registry()
            self.plugins.register_rules(registry)
            self._registry = registry
        return self._registry

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
