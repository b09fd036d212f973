"""
CommandLineOptions - declare options, parse arguments, read typed values.

Example:
    options = CommandLineOptions()
    options.add_required("input", str, ["-i", "--input"], "File to read")
    options.add_optional("verbose", bool, False, "-v", "Chatty output")
    options.add_repeatable("tag", int, "-t", "Tag id, may repeat")
    options.parse(["-i", "a.txt", "-t", "1", "-t", "2", "-v"])
    options.get("tag", list)  # [1, 2]
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Iterable, List, Optional

from smart_cmdline.core.config import ParserConfig
from smart_cmdline.core.exceptions import UndefinedOptionError
from smart_cmdline.options.models import Option
from smart_cmdline.options.registry import OptionRegistry
from smart_cmdline.output.help import render_help
from smart_cmdline.parsing.engine import ParserEngine
from smart_cmdline.parsing.store import ParameterStore


class CommandLineOptions:
    """
    Option registry plus parser.

    Register options first, then call ``parse``; values are read back with
    ``get``. Each ``parse`` starts from a fresh parameter store, so the same
    instance can parse several argument lists in turn. Not thread-safe.
    """

    def __init__(self, config: Optional[ParserConfig] = None, logger: logging.Logger = None):
        self.config = config or ParserConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.registry = OptionRegistry(logger=self.logger)
        self._parameters: Optional[ParameterStore] = None

    @property
    def options(self) -> List[Option]:
        """Registered options in registration order."""
        return self.registry.options

    @property
    def parameters(self) -> Optional[ParameterStore]:
        """Store produced by the last successful parse (None before parsing)."""
        return self._parameters

    def __contains__(self, name: object) -> bool:
        return name in self.registry

    def add_required(
        self, name: str, value_type: type, switches: str | Iterable[str] | None = None, help: str = ""
    ) -> Option:
        return self.registry.add_required(name, value_type, switches, help)

    def add_optional(
        self,
        name: str,
        value_type: type,
        default: Any,
        switches: str | Iterable[str] | None = None,
        help: str = "",
    ) -> Option:
        return self.registry.add_optional(name, value_type, default, switches, help)

    def add_repeatable(
        self, name: str, value_type: type, switches: str | Iterable[str] | None = None, help: str = ""
    ) -> Option:
        return self.registry.add_repeatable(name, value_type, switches, help)

    def parse(self, args: Optional[Iterable[str]] = None) -> ParameterStore:
        """Parse ``args`` (default: ``sys.argv[1:]``) and keep the result for ``get``.

        Raises:
            CommandLineParserError: any of its subclasses, on the first problem found
        """
        if args is None:
            args = sys.argv[1:]
        self._parameters = None
        self._parameters = ParserEngine(self.registry, logger=self.logger).parse(args)
        return self._parameters

    def get(self, name: str, expected_type: Optional[type] = None) -> Any:
        """Return the parsed value of ``name``, optionally checked against ``expected_type``.

        Raises:
            UndefinedOptionError: nothing was parsed yet, or ``name`` holds no value
            OptionTypeError: the value is not an instance of ``expected_type``
        """
        if self._parameters is None:
            raise UndefinedOptionError(name)
        return self._parameters.get(name, expected_type)

    def render_help(self, prefix: str | None = None) -> str:
        """Aligned help for every option; ``prefix`` defaults to the configured one."""
        return render_help(self.registry, prefix=prefix, config=self.config.help)
