"""Tests for Rich Console factory and theme."""

from io import StringIO

from apilint.output.console import LINT_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_custom_width(self) -> None:
        console = create_console(width=80)
        assert console.width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120


class TestTheme:
    def test_lint_styles_present(self) -> None:
        for name in ("lint.ok", "lint.error", "lint.type", "lint.member", "lint.rule"):
            assert name in LINT_THEME.styles

    def test_theme_markup_renders(self) -> None:
        console = create_console(no_color=True)
        console.print("[lint.rule]list_type_missing[/lint.rule]")
        assert get_output(console).strip() == "list_type_missing"
