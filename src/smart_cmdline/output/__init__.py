"""Output module - help text rendering."""

from smart_cmdline.output.help import render_help

__all__ = ["render_help"]
