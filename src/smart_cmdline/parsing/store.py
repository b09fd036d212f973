"""Per-parse parameter store."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

from smart_cmdline.core.exceptions import OptionTypeError, UndefinedOptionError
from smart_cmdline.options.models import Option


class ParameterStore(Mapping):
    """
    Name to value mapping produced by one parse call.

    Read-only for callers; the parser writes through ``set`` and ``append``.
    Repeatable options hold lists in supply order.
    """

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(values or {})

    @classmethod
    def seeded(cls, options) -> ParameterStore:
        """Create a store holding the default of every non-required option."""
        store = cls()
        for opt in options:
            if opt.required:
                continue
            store._values[opt.name] = list(opt.default) if opt.repeatable else opt.default
        return store

    def __getitem__(self, name: str) -> Any:
        if name not in self._values:
            raise UndefinedOptionError(name)
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ParameterStore({self._values!r})"

    def get(self, name: str, expected_type: Optional[type] = None) -> Any:
        """Return the value stored under ``name``.

        Unlike ``Mapping.get`` there is no fallback: a missing name raises
        ``UndefinedOptionError``. With ``expected_type`` the value is checked,
        never converted; ``None`` defaults pass the check. A ``bool`` only
        satisfies ``bool`` (or ``object``), never ``int``.
        """
        value = self[name]
        if expected_type is None:
            return value
        if not isinstance(expected_type, type):
            raise TypeError(
                f"expected_type must be a type, not {type(expected_type).__name__} "
                f"(ParameterStore.get takes no fallback value)"
            )
        if value is None:
            return value
        if not isinstance(value, expected_type) or (
            isinstance(value, bool) and expected_type not in (bool, object)
        ):
            raise OptionTypeError(name, expected_type, value)
        return value

    def set(self, option: Option, value: Any) -> None:
        self._values[option.name] = value

    def append(self, option: Option, value: Any) -> None:
        current = self._values.get(option.name)
        if not isinstance(current, list):
            current = []
            self._values[option.name] = current
        current.append(value)

    def to_dict(self) -> Dict[str, Any]:
        """Shallow copy of the stored values (lists are copied too)."""
        return {k: list(v) if isinstance(v, list) else v for k, v in self._values.items()}
