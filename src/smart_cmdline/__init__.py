"""
smart-cmdline - declarative command-line option parsing

Register required, optional and repeatable options with a value type and
switch aliases, then parse an argument list into a typed, name-keyed store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from smart_cmdline.core.lazy import make_getattr

_EXPORTS = {
    "__version__": "smart_cmdline.core.version",
    "CommandLineOptions": "smart_cmdline.parser",
    "Option": "smart_cmdline.options.models",
    "OptionKind": "smart_cmdline.options.models",
    "ParameterStore": "smart_cmdline.parsing.store",
    "render_help": "smart_cmdline.output.help",
    "setup_logging": "smart_cmdline.core.logging",
    "CommandLineParserError": "smart_cmdline.core.exceptions",
    "DuplicateOptionError": "smart_cmdline.core.exceptions",
    "UnknownSwitchError": "smart_cmdline.core.exceptions",
    "UnexpectedArgumentError": "smart_cmdline.core.exceptions",
    "MissingValueError": "smart_cmdline.core.exceptions",
    "InvalidValueError": "smart_cmdline.core.exceptions",
    "MissingRequiredOptionError": "smart_cmdline.core.exceptions",
    "UndefinedOptionError": "smart_cmdline.core.exceptions",
    "OptionTypeError": "smart_cmdline.core.exceptions",
    "main": "smart_cmdline.cli.main",
}

__all__ = list(_EXPORTS)

if TYPE_CHECKING:
    from smart_cmdline.cli.main import main
    from smart_cmdline.core.exceptions import (
        CommandLineParserError,
        DuplicateOptionError,
        InvalidValueError,
        MissingRequiredOptionError,
        MissingValueError,
        OptionTypeError,
        UndefinedOptionError,
        UnexpectedArgumentError,
        UnknownSwitchError,
    )
    from smart_cmdline.core.logging import setup_logging
    from smart_cmdline.core.version import __version__
    from smart_cmdline.options.models import Option, OptionKind
    from smart_cmdline.output.help import render_help
    from smart_cmdline.parser import CommandLineOptions
    from smart_cmdline.parsing.store import ParameterStore

__getattr__ = make_getattr(__name__, __all__, mapping=_EXPORTS)
