from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional, Tuple

from smart_cmdline.core.constants import DEFAULT_SWITCH_SEPARATOR
from smart_cmdline.core.exceptions import InvalidValueError


class OptionKind(Enum):
    """Value kinds an option can hold; decides how tokens are coerced."""
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    STRING = "string"
    ENUM = "enum"

    @classmethod
    def from_type(cls, value_type: Any) -> OptionKind:
        """Resolve the kind for a declared Python type.

        ``bool`` is checked before ``int`` since it subclasses it.
        """
        if value_type is bool:
            return cls.BOOLEAN
        if value_type is int:
            return cls.INTEGER
        if value_type is float:
            return cls.FLOAT
        if value_type is str:
            return cls.STRING
        if isinstance(value_type, type) and issubclass(value_type, Enum):
            return cls.ENUM
        raise InvalidValueError(
            f"Option type '{getattr(value_type, '__name__', value_type)}' not supported.",
            value=value_type,
        )


def normalize_switches(switches: str | Iterable[str] | None) -> Optional[Tuple[str, ...]]:
    """Turn a single switch or an iterable of switches into a tuple.

    ``None`` and empty iterables both mean "positional".
    """
    if switches is None:
        return None
    if isinstance(switches, str):
        return (switches,)
    normalized = tuple(switches)
    return normalized or None


@dataclass(frozen=True)
class Option:
    """A registered option."""
    name: str
    value_type: type
    kind: OptionKind
    default: Any = None
    switches: Optional[Tuple[str, ...]] = None  # None => positional
    help: str = ""
    repeatable: bool = False
    required: bool = False

    @property
    def is_positional(self) -> bool:
        return self.switches is None

    def label(self, separator: str = DEFAULT_SWITCH_SEPARATOR) -> str:
        """Joined switch list, or ``<name>`` for positional options."""
        if self.switches:
            return separator.join(self.switches)
        return f"<{self.name}>"

    def matches(self, token: str) -> bool:
        return self.switches is not None and token in self.switches
