"""CLI entry points: the exit-on-error helper and the ``smart-cmdline`` echo tool."""

from __future__ import annotations

import json
import logging
import sys
from enum import Enum
from typing import Any, Iterable, NoReturn, Optional

from dotenv import find_dotenv, load_dotenv

from smart_cmdline.core.colors import ConsoleColors
from smart_cmdline.core.config import LogConfig, ParserConfig
from smart_cmdline.core.constants import EXIT_FAILURE, EXIT_SUCCESS, EXIT_USAGE
from smart_cmdline.core.exceptions import CommandLineParserError
from smart_cmdline.core.logging import setup_logging
from smart_cmdline.core.version import __version__
from smart_cmdline.parser import CommandLineOptions
from smart_cmdline.parsing.store import ParameterStore

PROG = "smart-cmdline"

logger = logging.getLogger(__name__)


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(Enum):
    TEXT = "text"
    JSON = "json"


def _exit_error(msg: str, usage: str | None = None, code: int = EXIT_USAGE) -> NoReturn:
    print(ConsoleColors.error(f"ERROR: {msg}"), file=sys.stderr)
    if usage:
        print(usage, file=sys.stderr, end="")
    sys.exit(code)


def format_usage(options: CommandLineOptions, prog: str = PROG) -> str:
    """Usage header followed by the option help."""
    return f"{ConsoleColors.bold(f'Usage: {prog} [options]')}\n\n{options.render_help()}"


def parse_or_exit(
    options: CommandLineOptions, args: Optional[Iterable[str]] = None, prog: str = PROG
) -> ParameterStore:
    """Parse ``args``; on a command-line error print it with usage and exit with status 2."""
    try:
        return options.parse(args)
    except CommandLineParserError as e:
        logger.debug(f"Command line rejected: {e}")
        _exit_error(str(e), usage=format_usage(options, prog))


def build_options(log_defaults: LogConfig | None = None) -> CommandLineOptions:
    """Options understood by the ``smart-cmdline`` echo tool."""
    log_defaults = log_defaults or LogConfig()
    try:
        default_level = LogLevel[log_defaults.level.upper()]
    except KeyError:
        default_level = LogLevel.INFO
    try:
        default_format = LogFormat[log_defaults.log_format.upper()]
    except KeyError:
        default_format = LogFormat.TEXT

    options = CommandLineOptions(config=ParserConfig(log=log_defaults))
    options.add_optional("help", bool, False, ["-h", "--help"], "Show this help and exit")
    options.add_optional("version", bool, False, "--version", "Show the version and exit")
    options.add_optional("json", bool, False, "--json", "Print the parsed parameters as JSON")
    options.add_optional("no_color", bool, False, "--no-color", "Disable colored output")
    options.add_optional(
        "log_level", LogLevel, default_level, "--log-level",
        "Logging level: DEBUG, INFO, WARNING, ERROR or CRITICAL\n(default: LOG_LEVEL or INFO)",
    )
    options.add_optional(
        "log_format", LogFormat, default_format, "--log-format",
        "Log output format: text or json\n(default: LOG_FORMAT or text)",
    )
    options.add_repeatable("define", str, ["-D", "--define"], "NAME=VALUE pair to echo back, may repeat")
    options.add_repeatable("args", str, None, "Positional arguments to echo back\n(use -- before values starting with '-')")
    return options


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, list):
        return [_to_jsonable(v) for v in value]
    return value


def _render_parameters(params: ParameterStore, as_json: bool) -> str:
    data = {name: _to_jsonable(value) for name, value in params.items()}
    if as_json:
        return json.dumps(data, indent=2)
    width = max((len(name) for name in data), default=0)
    return "\n".join(f"{ConsoleColors.info(name.ljust(width))}  {value!r}" for name, value in data.items())


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the echo tool. Returns the process exit code."""
    load_dotenv(find_dotenv(usecwd=True))
    log_defaults = LogConfig.from_env()
    options = build_options(log_defaults)
    params = parse_or_exit(options, argv)

    ConsoleColors.configure(no_color=params.get("no_color"))
    setup_logging(params.get("log_level").value, params.get("log_format").value)

    if params.get("help"):
        print(format_usage(options), end="")
        return EXIT_SUCCESS
    if params.get("version"):
        print(f"{PROG} {__version__}")
        return EXIT_SUCCESS

    for pair in params.get("define", list):
        if "=" not in pair:
            logger.error(f"Malformed --define '{pair}' (expected NAME=VALUE)")
            return EXIT_FAILURE

    print(_render_parameters(params, as_json=params.get("json")))
    return EXIT_SUCCESS
