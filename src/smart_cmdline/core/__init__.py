"""Core module - Foundation components with no internal dependencies.

This module provides the basic building blocks used throughout the package:
- Version information
- Custom exceptions
- Configuration dataclasses
- Constants and defaults
- Logging and console color helpers
"""

from smart_cmdline.core.version import __version__

from smart_cmdline.core.exceptions import (
    CommandLineParserError,
    DuplicateOptionError,
    UnknownSwitchError,
    UnexpectedArgumentError,
    MissingValueError,
    InvalidValueError,
    MissingRequiredOptionError,
    UndefinedOptionError,
    OptionTypeError,
)

from smart_cmdline.core.config import (
    HelpConfig,
    LogConfig,
    ParserConfig,
)

from smart_cmdline.core.constants import (
    PASSTHROUGH_TOKEN,
    LONE_DASH_TOKEN,
    SWITCH_PREFIX,
    SWITCH_VALUE_PATTERN,
    DEFAULT_HELP_PREFIX,
    DEFAULT_SWITCH_SEPARATOR,
    DEFAULT_HELP,
    EXIT_SUCCESS,
    EXIT_FAILURE,
    EXIT_USAGE,
)

from smart_cmdline.core.colors import ConsoleColors

from smart_cmdline.core.logging import (
    JSONFormatter,
    setup_logging,
    with_log_context,
)

__all__ = [
    # Version
    '__version__',
    # Exceptions
    'CommandLineParserError',
    'DuplicateOptionError',
    'UnknownSwitchError',
    'UnexpectedArgumentError',
    'MissingValueError',
    'InvalidValueError',
    'MissingRequiredOptionError',
    'UndefinedOptionError',
    'OptionTypeError',
    # Config dataclasses
    'HelpConfig',
    'LogConfig',
    'ParserConfig',
    # Constants
    'PASSTHROUGH_TOKEN',
    'LONE_DASH_TOKEN',
    'SWITCH_PREFIX',
    'SWITCH_VALUE_PATTERN',
    'DEFAULT_HELP_PREFIX',
    'DEFAULT_SWITCH_SEPARATOR',
    'DEFAULT_HELP',
    'EXIT_SUCCESS',
    'EXIT_FAILURE',
    'EXIT_USAGE',
    # Colors
    'ConsoleColors',
    # Logging
    'JSONFormatter',
    'setup_logging',
    'with_log_context',
]
