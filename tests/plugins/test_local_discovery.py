"""Tests for local directory plugin discovery in PluginManager."""

from __future__ import annotations

from pathlib import Path

from apilint.plugins.manager import PluginManager
from apilint.rules.registry import default_registry

# -- Plugin source code used in tests ------------------------------------------

_VALID_PLUGIN_SRC = """\
import pluggy

hookimpl = pluggy.HookimplMarker("apilint")


class LocalTestPlugin:
    \"\"\"A minimal local plugin for testing.\"\"\"

    @hookimpl
    def post_lint(self, types_checked, violations_found, failures_found):
        pass
"""

_RULE_PLUGIN_SRC = """\
import pluggy

hookimpl = pluggy.HookimplMarker("apilint")


class NoMapMembers:
    name = "no_map_members"

    def validate(self, type_def):
        return [m.name for m in type_def.members if m.type.kind == "map"]


class MapRulePlugin:
    @hookimpl
    def register_rules(self):
        return [NoMapMembers()]
"""

_SYNTAX_ERROR_SRC = """\
def broken(
    # missing closing paren and colon
"""

_NO_HOOKS_SRC = """\
class PlainClass:
    \"\"\"A class with no hookimpl-decorated methods.\"\"\"
    def hello(self) -> str:
        return "world"
"""


class TestLocalDiscovery:
    """Tests for PluginManager._discover_local and friends."""

    def test_discovers_local_plugin(self, tmp_path: Path) -> None:
        (tmp_path / "myplugin.py").write_text(_VALID_PLUGIN_SRC, encoding="utf-8")

        pm = PluginManager()
        names = pm.discover_and_load(local_dir=tmp_path)

        assert "apilint_local_plugin_myplugin.LocalTestPlugin" in names

    def test_local_plugin_contributes_rule(self, tmp_path: Path) -> None:
        (tmp_path / "maps.py").write_text(_RULE_PLUGIN_SRC, encoding="utf-8")

        pm = PluginManager()
        pm.discover_and_load(local_dir=tmp_path)
        registry = default_registry()
        pm.register_rules(registry)

        assert "no_map_members" in registry

    def test_skips_bad_plugin_gracefully(self, tmp_path: Path) -> None:
        (tmp_path / "broken.py").write_text(_SYNTAX_ERROR_SRC, encoding="utf-8")

        pm = PluginManager()
        names = pm.discover_and_load(local_dir=tmp_path)

        assert not any("broken" in n for n in names)

    def test_skips_classes_without_hooks(self, tmp_path: Path) -> None:
        (tmp_path / "plain.py").write_text(_NO_HOOKS_SRC, encoding="utf-8")

        pm = PluginManager()
        names = pm.discover_and_load(local_dir=tmp_path)

        assert not any("plain" in n for n in names)

    def test_skips_underscore_files(self, tmp_path: Path) -> None:
        (tmp_path / "_private.py").write_text(_VALID_PLUGIN_SRC, encoding="utf-8")

        pm = PluginManager()
        names = pm.discover_and_load(local_dir=tmp_path)

        assert not any("_private" in n for n in names)

    def test_missing_directory_is_ignored(self, tmp_path: Path) -> None:
        pm = PluginManager()
        names = pm.discover_and_load(local_dir=tmp_path / "nope")
        assert not any(n.startswith("apilint_local_plugin_") for n in names)
