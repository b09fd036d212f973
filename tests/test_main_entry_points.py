"""Tests for the CLI entry points.

Validates that parse_or_exit turns parser errors into exit status 2 with
usage on stderr, and that main() echoes parsed parameters.
"""

import json
from unittest.mock import patch

import pytest

from smart_cmdline.cli.main import LogFormat, LogLevel, build_options, format_usage, main, parse_or_exit
from smart_cmdline.core.colors import ConsoleColors
from smart_cmdline.core.config import LogConfig
from smart_cmdline.core.constants import EXIT_FAILURE, EXIT_SUCCESS, EXIT_USAGE
from smart_cmdline.core.version import __version__


@pytest.fixture(autouse=True)
def quiet_environment(monkeypatch):
    """Keep main() away from .env files and the global logging setup"""
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    with patch("smart_cmdline.cli.main.load_dotenv"), patch("smart_cmdline.cli.main.setup_logging") as mock_setup:
        yield mock_setup


class TestParseOrExit:
    """Exit-on-error helper"""

    def test_success_returns_store(self, example_options):
        params = parse_or_exit(example_options, ["-i", "a"])
        assert params["input"] == "a"

    def test_error_exits_with_usage(self, example_options, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_or_exit(example_options, ["-q"], prog="demo")
        assert exc_info.value.code == EXIT_USAGE
        err = capsys.readouterr().err
        assert "ERROR: Unknown switch '-q'." in err
        assert "Usage: demo [options]" in err
        assert "-i, --input" in err

    def test_missing_required_exits(self, example_options, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_or_exit(example_options, [])
        assert exc_info.value.code == EXIT_USAGE
        assert "Required option -i, --input is not specified." in capsys.readouterr().err


class TestBuildOptions:
    """Options of the echo tool"""

    def test_defaults_follow_log_config(self):
        params = build_options(LogConfig(level="debug", log_format="json")).parse([])
        assert params["log_level"] is LogLevel.DEBUG
        assert params["log_format"] is LogFormat.JSON

    def test_bad_log_config_uses_fallbacks(self):
        params = build_options(LogConfig(level="loud", log_format="xml")).parse([])
        assert params["log_level"] is LogLevel.INFO
        assert params["log_format"] is LogFormat.TEXT

    def test_usage_lists_every_option(self):
        usage = format_usage(build_options(), prog="x")
        assert usage.startswith("Usage: x [options]\n\n")
        for label in ("-h, --help", "--version", "--json", "-D, --define", "<args>"):
            assert label in usage


class TestMain:
    """main() dispatch and output"""

    def test_help(self, capsys):
        assert main(["--help"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "Usage: smart-cmdline [options]" in out
        assert "--log-level" in out

    def test_version(self, capsys):
        assert main(["--version"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.strip() == f"smart-cmdline {__version__}"

    def test_json_echo(self, capsys):
        code = main(["--json", "-D", "a=1", "--define=b=2", "one", "--", "-two"])
        assert code == EXIT_SUCCESS
        payload = json.loads(capsys.readouterr().out)
        assert payload["define"] == ["a=1", "b=2"]
        assert payload["args"] == ["one", "-two"]
        assert payload["log_level"] == "INFO"
        assert payload["json"] is True

    def test_text_echo(self, capsys):
        assert main(["--no-color", "hello"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "args" in out
        assert "['hello']" in out

    def test_logging_configured_from_options(self, quiet_environment):
        main(["--log-level", "debug", "--log-format", "JSON", "--version"])
        quiet_environment.assert_called_once_with("DEBUG", "json")

    def test_log_level_from_environment(self, monkeypatch, quiet_environment):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        main(["--version"])
        quiet_environment.assert_called_once_with("WARNING", "text")

    def test_malformed_define(self, capsys):
        assert main(["-D", "novalue"]) == EXIT_FAILURE

    def test_unknown_switch_exits_two(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--bogus"])
        assert exc_info.value.code == EXIT_USAGE
        assert "Unknown switch '--bogus'." in capsys.readouterr().err

    def test_log_defaults_kept_on_parser_config(self):
        log_defaults = LogConfig(level="ERROR")
        assert build_options(log_defaults).config.log is log_defaults


class TestConsoleColors:
    """Color policy used for errors and echo output"""

    @pytest.fixture(autouse=True)
    def restore_colors(self):
        enabled = ConsoleColors._enabled
        yield
        ConsoleColors._enabled = enabled

    def test_no_color_flag_disables(self):
        ConsoleColors.configure(no_color=True)
        assert not ConsoleColors.is_enabled()
        assert ConsoleColors.error("x") == "x"

    def test_no_color_environment_disables(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        ConsoleColors.configure()
        assert not ConsoleColors.is_enabled()

    def test_enabled_wraps_text(self):
        ConsoleColors._enabled = True
        assert ConsoleColors.bold("x") == f"{ConsoleColors.BOLD}x{ConsoleColors.RESET}"
        assert ConsoleColors.info("x").startswith(ConsoleColors.CYAN)
