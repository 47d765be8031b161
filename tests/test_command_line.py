"""
Tests for command-line helpers — pass-through split, display quoting,
launch argument assembly.
"""

from ai_switch.core.data.catalog import TOOLS
from ai_switch.core.models import ToolDefinition
from ai_switch.core.services.command_line import (
    build_launch_args,
    format_shell_command,
    passthrough_args,
    quote_arg,
)


class TestPassthroughArgs:
    def test_everything_after_delimiter(self):
        argv = ["ai", "use", "codex", "--", "--version", "--help"]
        assert passthrough_args(argv) == ["--version", "--help"]

    def test_no_delimiter(self):
        assert passthrough_args(["ai", "use", "codex"]) == []
        assert passthrough_args([]) == []

    def test_later_delimiters_kept(self):
        argv = ["ai", "use", "codex", "--", "--flag", "--", "literal"]
        assert passthrough_args(argv) == ["--flag", "--", "literal"]

    def test_trailing_delimiter(self):
        assert passthrough_args(["ai", "--"]) == []

    def test_input_untouched(self):
        argv = ["a", "--", "b"]
        passthrough_args(argv)
        assert argv == ["a", "--", "b"]

    def test_tuple_input(self):
        assert passthrough_args(("a", "--", "b")) == ["b"]


class TestQuoteArg:
    def test_safe_tokens_unquoted(self):
        for token in ["codex", "--model", "a.b", "user@host", "k=v", "/usr/bin", "50%", "a,b:c+d"]:
            assert quote_arg(token) == token

    def test_empty(self):
        assert quote_arg("") == "''"

    def test_unsafe_chars(self):
        assert quote_arg("a b") == "'a b'"
        assert quote_arg("$HOME") == "'$HOME'"
        assert quote_arg("a;b") == "'a;b'"

    def test_embedded_quote(self):
        assert quote_arg("it's") == "'it'\\''s'"


class TestFormatShellCommand:
    def test_safe_args(self):
        assert format_shell_command("codex", ["--version"]) == "codex --version"

    def test_quotes_unsafe_args(self):
        command = format_shell_command("codex", ["--model", "space value", "mix'ed"])
        assert command == "codex --model 'space value' 'mix'\\''ed'"

    def test_empty_arg(self):
        assert format_shell_command("codex", [""]) == "codex ''"

    def test_no_args(self):
        assert format_shell_command("claude", []) == "claude"


class TestBuildLaunchArgs:
    def test_plain(self):
        assert build_launch_args(TOOLS["codex"]) == []

    def test_order(self):
        args = build_launch_args(
            TOOLS["codex"],
            fast_mode=True,
            default_flags=["--model", "o3"],
            passthrough=["--", "x"],
        )
        assert args == ["--yolo", "--model", "o3", "--", "x"]

    def test_fast_mode_without_flag(self):
        tool = ToolDefinition(executable_name="x", display_name="X")
        assert build_launch_args(tool, fast_mode=True, passthrough=["a"]) == ["a"]

    def test_fast_flag_only_when_requested(self):
        assert build_launch_args(TOOLS["claude"], default_flags=["-v"]) == ["-v"]
