"""Tests for the `apilint rules` command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from apilint.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestRulesCommand:
    def test_lists_builtin_rule(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["rules"])
        assert result.exit_code == 0
        assert "list_type_missing" in result.output
        assert "1 rules" in result.output

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "rules"])
        assert result.output.strip() == "list_type_missing"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "rules"])
        data = json.loads(result.output)
        assert data["op"] == "rules"
        assert data["data"]["count"] == 1
        assert data["data"]["items"][0]["name"] == "list_type_missing"
        assert "listType" in data["data"]["items"][0]["description"]
