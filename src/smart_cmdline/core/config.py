"""Configuration dataclasses for smart-cmdline.

These dataclasses centralize the few tunables of the parser (help layout and
logging) so they can be created from the environment or used directly in code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class HelpConfig:
    """Configuration for help text rendering.

    Attributes:
        prefix: Text written at the start of every help line (default: tab)
        separator: Joins the switches of one option (default: ", ")
        padding: Spaces between the widest label and the help column (default: 1)
    """

    prefix: str = "\t"
    separator: str = ", "
    padding: int = 1


@dataclass
class LogConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level string (default: "INFO")
        log_format: "text" or "json" (default: "text")
    """

    level: str = "INFO"
    log_format: str = "text"

    @classmethod
    def from_env(cls) -> LogConfig:
        """Create configuration from LOG_LEVEL / LOG_FORMAT environment variables."""
        return cls(
            level=os.environ.get("LOG_LEVEL", cls.level),
            log_format=os.environ.get("LOG_FORMAT", cls.log_format),
        )


@dataclass
class ParserConfig:
    """Master configuration for a CommandLineOptions instance.

    Attributes:
        help: Help rendering configuration
        log: Logging configuration (used by the CLI when setting up logging)
    """

    help: HelpConfig = field(default_factory=HelpConfig)
    log: LogConfig = field(default_factory=LogConfig)
