"""CLI module - Command-line interface components."""

from smart_cmdline.cli.main import build_options, format_usage, main, parse_or_exit

__all__ = [
    "build_options",
    "format_usage",
    "main",
    "parse_or_exit",
]
