"""Tests for --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from apilint.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--examples"], ["apilint rules", "apilint lint"]),
    (["lint", "--examples"], ["--rule list_type_missing", "--workers 4"]),
    (["rules", "--examples"], ["apilint rules"]),
    (["fix", "--examples"], ["--dry-run=client", "--dry-run=server", "--list-type set"]),
]


def _examples_id(item: tuple[list[str], list[str]]) -> str:
    args, _ = item
    return "_".join(a for a in args if a != "--examples") or "root"


@pytest.mark.usefixtures("_isolated_project")
@pytest.mark.parametrize(
    "args,expected_keywords",
    EXAMPLES_COMMANDS,
    ids=[_examples_id(item) for item in EXAMPLES_COMMANDS],
)
def test_examples_flag(
    cli_runner: CliRunner, args: list[str], expected_keywords: list[str]
) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in examples output for {args}"


@pytest.mark.usefixtures("_isolated_project")
class TestExamplesInHelp:
    @pytest.mark.parametrize("args", [["--help"], ["lint", "--help"], ["fix", "--help"]])
    def test_examples_in_help(self, cli_runner: CliRunner, args: list[str]) -> None:
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0
        assert "--examples" in result.output


@pytest.mark.usefixtures("_isolated_project")
class TestExamplesEagerExit:
    """--examples exits before argument validation."""

    def test_lint_without_schema(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["lint", "--examples"])
        assert result.exit_code == 0
        assert "Examples for" in result.output

    def test_fix_without_schema(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["fix", "--examples"])
        assert result.exit_code == 0
        assert "unset value" not in result.output
