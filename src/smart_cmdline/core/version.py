"""Version information for smart-cmdline."""

__version__ = "1.0.0"
