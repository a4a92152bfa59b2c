"""Tests for operation-specific Rich renderers."""

from apilint.output.renderers import render_quiet, render_result
from apilint.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


_VIOLATIONS = [
    {"type_name": "Container", "rule": "list_type_missing", "member": "Args"},
    {"type_name": "Pod", "rule": "list_type_missing", "member": "Containers"},
]


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("lint", "INVALID_SCHEMA", "types.yaml: invalid YAML"))
        assert "ERROR" in output
        assert "lint" in output
        assert "invalid YAML" in output

    def test_verbose_shows_detail(self) -> None:
        result = _err("lint", "UNKNOWN_RULE", "Rule 'x' not found", rule="x")
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "rule: x" in output

    def test_no_error_object(self) -> None:
        output = render_result(ServiceResult(ok=False, op="lint"))
        assert "Unknown error" in output

    def test_violation_table(self) -> None:
        result = _err(
            "lint",
            "VIOLATIONS",
            "2 violations in types.yaml",
            violations=_VIOLATIONS,
            failures=[],
            types_checked=3,
        )
        output = render_result(result)
        assert "Container" in output
        assert "Containers" in output
        assert "list_type_missing" in output
        assert "2 violations, 0 failures across 3 types" in output

    def test_failures_listed(self) -> None:
        result = _err(
            "lint",
            "RULE_FAILED",
            "1 rule failure while linting types.yaml",
            violations=[],
            failures=[{"type_name": "Pod", "rule": "custom", "message": "KeyError: 'x'"}],
            types_checked=1,
        )
        output = render_result(result)
        assert "failed Pod custom: KeyError: 'x'" in output


# ── Operation renderers ──────────────────────────────────────────────


class TestLintRenderer:
    def test_clean_run(self) -> None:
        result = _ok("lint", source="clean.yaml", types_checked=1, rules=["list_type_missing"])
        output = render_result(result)
        assert output == "OK  No violations in clean.yaml (1 types, rules: list_type_missing)"

    def test_no_rules(self) -> None:
        output = render_result(_ok("lint", source="x.yaml", types_checked=0, rules=[]))
        assert "rules: none" in output


class TestRulesRenderer:
    def test_table(self) -> None:
        result = _ok(
            "rules",
            items=[{"name": "list_type_missing", "description": "Flags slice members."}],
            count=1,
        )
        output = render_result(result)
        assert "list_type_missing" in output
        assert "Flags slice members." in output
        assert output.endswith("1 rules")


class TestFixRenderer:
    def test_edits_listed(self) -> None:
        result = _ok(
            "fix",
            strategy="client",
            message="types.yaml: 1 member tagged (dry run)",
            edits=[{"type": "Pod", "member": "Containers", "tag": "+listType=atomic"}],
            count=1,
        )
        output = render_result(result)
        assert "(dry run)" in output
        assert "Pod.Containers  +listType=atomic" in output
        assert "remain" not in output

    def test_server_remaining(self) -> None:
        result = _ok(
            "fix",
            strategy="server",
            message="types.yaml: 1 member tagged (server dry run)",
            edits=[],
            remaining=[],
        )
        assert "0 violations remain after fix" in render_result(result)


class TestGenericRenderer:
    def test_unknown_op(self) -> None:
        output = render_result(_ok("custom", path="a.yaml", extra=[1, 2]))
        assert "OK" in output
        assert "path: a.yaml" in output
        assert "extra: [1,2]" in output

    def test_field_layout(self) -> None:
        output = render_result(_ok("custom", path="a.yaml"))
        assert output.splitlines() == ["OK  custom", "  path: a.yaml"]


# ── Quiet mode ───────────────────────────────────────────────────────


class TestRenderQuiet:
    def test_violation_lines(self) -> None:
        result = _err("lint", "VIOLATIONS", "2 violations", violations=_VIOLATIONS)
        assert render_quiet(result) == (
            "Container.Args: list_type_missing\nPod.Containers: list_type_missing"
        )

    def test_plain_error(self) -> None:
        result = _err("lint", "UNKNOWN_RULE", "Rule 'x' not found")
        assert render_quiet(result) == "ERROR: lint — Rule 'x' not found"

    def test_rules_names(self) -> None:
        result = _ok("rules", items=[{"name": "a"}, {"name": "b"}])
        assert render_quiet(result) == "a\nb"

    def test_fix_message(self) -> None:
        result = _ok("fix", message="types.yaml: nothing to fix")
        assert render_quiet(result) == "types.yaml: nothing to fix"

    def test_ok_default(self) -> None:
        assert render_quiet(_ok("lint")) == "OK: lint"
