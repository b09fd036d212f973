"""Parsing module - token stream, parameter store and the parser engine."""

from smart_cmdline.parsing.tokens import TokenStream
from smart_cmdline.parsing.store import ParameterStore
from smart_cmdline.parsing.engine import ParserEngine, is_switch_token

__all__ = [
    "ParameterStore",
    "ParserEngine",
    "TokenStream",
    "is_switch_token",
]
