"""Options module - option model, coercion and the ordered registry."""

from smart_cmdline.options.models import Option, OptionKind, normalize_switches
from smart_cmdline.options.coercion import coerce_enum, coerce_value
from smart_cmdline.options.registry import OptionRegistry

__all__ = [
    "Option",
    "OptionKind",
    "OptionRegistry",
    "coerce_enum",
    "coerce_value",
    "normalize_switches",
]
