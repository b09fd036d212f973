"""Console colors for smart-cmdline.

Provides ANSI color codes for terminal output with auto-detection
of TTY support and Windows compatibility.
"""

import os
import sys


class ConsoleColors:
    """ANSI color codes for terminal output.

    Auto-detects TTY support and handles Windows compatibility.
    Call ``configure(no_color=True)`` to force plain output.
    """
    RED = '\033[91m'
    CYAN = '\033[96m'
    BOLD = '\033[1m'
    RESET = '\033[0m'

    _enabled = sys.stdout.isatty() and (os.name != 'nt' or bool(os.environ.get('TERM')))

    @classmethod
    def configure(cls, no_color: bool = False) -> None:
        """Apply the color policy. NO_COLOR in the environment also disables colors."""
        if no_color or os.environ.get('NO_COLOR'):
            cls._enabled = False
        else:
            cls._enabled = sys.stdout.isatty() and (os.name != 'nt' or bool(os.environ.get('TERM')))

    @classmethod
    def is_enabled(cls) -> bool:
        """Check if colors are enabled."""
        return cls._enabled

    @classmethod
    def _wrap(cls, code: str, text: str) -> str:
        if cls._enabled:
            return f"{code}{text}{cls.RESET}"
        return text

    @classmethod
    def error(cls, text: str) -> str:
        """Format text as error (red)"""
        return cls._wrap(cls.RED, text)

    @classmethod
    def info(cls, text: str) -> str:
        """Format text as info (cyan)"""
        return cls._wrap(cls.CYAN, text)

    @classmethod
    def bold(cls, text: str) -> str:
        return cls._wrap(cls.BOLD, text)
