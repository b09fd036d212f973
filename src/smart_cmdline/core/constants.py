"""Constants and default values for smart-cmdline.

This module centralizes the token literals, patterns and default
configuration instances used throughout the package.
"""

import re

from smart_cmdline.core.config import HelpConfig

# ==================== TOKENS ====================

# Everything after this token is positional, even text starting with "-"
PASSTHROUGH_TOKEN: str = "--"

# A lone dash is a value (conventionally stdin/stdout), never a switch
SWITCH_PREFIX: str = "-"
LONE_DASH_TOKEN: str = "-"

# "--name=value" / "-n=value": switch part up to the first "=", non-empty value
SWITCH_VALUE_PATTERN: re.Pattern[str] = re.compile(r"(--?[^=]+)=(.+)", re.DOTALL)

# ==================== HELP DEFAULTS ====================

DEFAULT_HELP_PREFIX: str = "\t"
DEFAULT_SWITCH_SEPARATOR: str = ", "

# ==================== LOGGING DEFAULTS ====================

VALID_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS: tuple[str, ...] = ("text", "json")

# ==================== EXIT CODES ====================

EXIT_SUCCESS: int = 0
EXIT_FAILURE: int = 1
EXIT_USAGE: int = 2  # Bad command line, matches argparse

# ==================== DEFAULT CONFIG INSTANCES ====================

DEFAULT_HELP = HelpConfig(prefix=DEFAULT_HELP_PREFIX, separator=DEFAULT_SWITCH_SEPARATOR)
