"""Token to value coercion, one branch per OptionKind."""

from __future__ import annotations

from typing import Any

from smart_cmdline.core.exceptions import InvalidValueError
from smart_cmdline.options.models import Option, OptionKind


def coerce_enum(enum_type: Any, text: str) -> Any:
    """Return the member of ``enum_type`` whose name matches ``text`` ignoring case."""
    wanted = text.strip().casefold()
    for member in enum_type:
        if member.name.casefold() == wanted:
            return member
    raise InvalidValueError(
        f"Value '{text}' is not one of {', '.join(m.name for m in enum_type)}.",
        value=text,
    )


def _check_numeric_text(text: str) -> None:
    # int() and float() also take "1_000" and non-ASCII digits
    if "_" in text or not text.isascii():
        raise ValueError("digit separators and non-ASCII characters are not allowed")


def coerce_value(option: Option, text: str) -> Any:
    """Convert a raw token into the value stored for ``option``.

    Raises:
        InvalidValueError: if the text does not parse as the option's kind
    """
    kind = option.kind
    try:
        if kind in (OptionKind.INTEGER, OptionKind.FLOAT):
            _check_numeric_text(text)
        if kind is OptionKind.INTEGER:
            return int(text)
        if kind is OptionKind.FLOAT:
            return float(text)
        if kind is OptionKind.STRING:
            return text
        if kind is OptionKind.ENUM:
            return coerce_enum(option.value_type, text)
    except ValueError as e:
        raise InvalidValueError(
            f"Invalid value '{text}' for option '{option.name}'",
            option_name=option.name,
            value=text,
            details=str(e),
        ) from e
    except InvalidValueError as e:
        raise InvalidValueError(
            f"Invalid value '{text}' for option '{option.name}'",
            option_name=option.name,
            value=text,
            details=e.message,
        ) from e
    # BOOLEAN never consumes a token
    raise InvalidValueError(
        f"Option '{option.name}' of kind {kind.value} does not take a value.",
        option_name=option.name,
        value=text,
    )


def coerce_default(name: str, value_type: type, kind: OptionKind, default: Any) -> Any:
    """Check the default of an optional option against its kind.

    ``None`` is accepted for every kind except BOOLEAN. An ``int`` default of
    a FLOAT option is widened to ``float`` so the stored type does not depend
    on whether the switch was given.

    Raises:
        InvalidValueError: if the default does not fit the kind
    """
    if kind is OptionKind.BOOLEAN:
        if not isinstance(default, bool):
            raise InvalidValueError(
                f"Default of boolean option '{name}' must be True or False.",
                option_name=name,
                value=default,
            )
        return default
    if default is None:
        return None
    if kind is OptionKind.FLOAT and isinstance(default, int) and not isinstance(default, bool):
        return float(default)
    if isinstance(default, bool) or not isinstance(default, value_type):
        raise InvalidValueError(
            f"Default of option '{name}' must be {value_type.__name__}, not {type(default).__name__}.",
            option_name=name,
            value=default,
        )
    return default
