"""Ordered registry of declared options."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, List, Optional

from smart_cmdline.core.exceptions import DuplicateOptionError, InvalidValueError
from smart_cmdline.options.coercion import coerce_default
from smart_cmdline.options.models import Option, OptionKind, normalize_switches


class OptionRegistry:
    """
    Holds the declared options in registration order.

    Registration order matters twice: it is the order options appear in
    help text, and the order switch-less options receive positional values.
    """

    def __init__(self, logger: logging.Logger = None):
        self.logger = logger or logging.getLogger(__name__)
        self._options: List[Option] = []

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __getitem__(self, index: int) -> Option:
        return self._options[index]

    def __contains__(self, name: object) -> bool:
        return self.has_option(name)

    @property
    def options(self) -> List[Option]:
        return list(self._options)

    def has_option(self, name: object) -> bool:
        return any(opt.name == name for opt in self._options)

    def find(self, name: str) -> Optional[Option]:
        for opt in self._options:
            if opt.name == name:
                return opt
        return None

    def find_switch(self, token: str) -> Optional[Option]:
        """First option, in registration order, declaring ``token`` as a switch."""
        for opt in self._options:
            if opt.matches(token):
                return opt
        return None

    def add_required(
        self, name: str, value_type: type, switches: str | Iterable[str] | None = None, help: str = ""
    ) -> Option:
        """Register an option that must receive a value."""
        return self._add(name, value_type, None, switches, help, repeatable=False, required=True)

    def add_optional(
        self,
        name: str,
        value_type: type,
        default: Any,
        switches: str | Iterable[str] | None = None,
        help: str = "",
    ) -> Option:
        """Register an option that falls back to ``default`` when absent."""
        return self._add(name, value_type, default, switches, help, repeatable=False, required=False)

    def add_repeatable(
        self, name: str, value_type: type, switches: str | Iterable[str] | None = None, help: str = ""
    ) -> Option:
        """Register an option that collects every occurrence into a list."""
        return self._add(name, value_type, (), switches, help, repeatable=True, required=False)

    def _add(
        self,
        name: str,
        value_type: type,
        default: Any,
        switches: str | Iterable[str] | None,
        help: str,
        repeatable: bool,
        required: bool,
    ) -> Option:
        if self.has_option(name):
            raise DuplicateOptionError(name)

        kind = OptionKind.from_type(value_type)
        normalized = normalize_switches(switches)

        if kind is OptionKind.BOOLEAN and normalized is None:
            raise InvalidValueError(f"Boolean option '{name}' needs at least one switch.", option_name=name)
        if not required and not repeatable:
            default = coerce_default(name, value_type, kind, default)

        option = Option(
            name=name,
            value_type=value_type,
            kind=kind,
            default=default,
            switches=normalized,
            help=help or "",
            repeatable=repeatable,
            required=required,
        )
        self._options.append(option)
        self.logger.debug(
            f"Registered option '{name}' ({kind.value}, "
            f"{'required' if required else 'repeatable' if repeatable else 'optional'}) as {option.label()}"
        )
        return option

    def next_positional(self, start: int) -> tuple[Optional[Option], int]:
        """Find the next switch-less option at or after ``start``.

        Returns the option (or None) and the updated cursor. Non-repeatable
        matches move the cursor past themselves; repeatable ones keep it, so
        they stay eligible for every later positional token.
        """
        for index in range(start, len(self._options)):
            opt = self._options[index]
            if opt.is_positional:
                return opt, (start if opt.repeatable else index + 1)
        return None, start
