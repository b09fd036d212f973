"""Token consumption: turns raw arguments into a ParameterStore."""

from __future__ import annotations

import logging
from typing import Iterable

from smart_cmdline.core.constants import (
    LONE_DASH_TOKEN,
    PASSTHROUGH_TOKEN,
    SWITCH_PREFIX,
    SWITCH_VALUE_PATTERN,
)
from smart_cmdline.core.exceptions import (
    MissingRequiredOptionError,
    MissingValueError,
    UnexpectedArgumentError,
    UnknownSwitchError,
)
from smart_cmdline.core.logging import with_log_context
from smart_cmdline.options.coercion import coerce_value
from smart_cmdline.options.models import Option, OptionKind
from smart_cmdline.options.registry import OptionRegistry
from smart_cmdline.parsing.store import ParameterStore
from smart_cmdline.parsing.tokens import TokenStream


def is_switch_token(token: str) -> bool:
    """True for tokens that look like a switch. A lone ``-`` is a value."""
    return token.startswith(SWITCH_PREFIX) and token != LONE_DASH_TOKEN


class ParserEngine:
    """
    Walks argument tokens left to right against an OptionRegistry.

    One engine handles one parse call: it owns the token stream, the
    positional cursor and the store being filled. Any error aborts the parse.
    """

    def __init__(self, registry: OptionRegistry, logger: logging.Logger = None):
        self.registry = registry
        self.logger = logger or logging.getLogger(__name__)
        self.tokens = TokenStream()
        self.next_positional_index = 0
        self.store = ParameterStore()

    def parse(self, args: Iterable[str]) -> ParameterStore:
        self.tokens = TokenStream(args)
        self.next_positional_index = 0
        self.store = ParameterStore.seeded(self.registry)

        log = with_log_context(self.logger, token_count=len(self.tokens))
        log.debug(f"Parsing {len(self.tokens)} argument(s) against {len(self.registry)} option(s)")

        while self.tokens:
            self._parse_element()

        self._validate_required()
        log.debug(f"Parsed parameters: {sorted(self.store)}")
        return self.store

    def _parse_element(self) -> None:
        token = self.tokens.pop()

        if token == PASSTHROUGH_TOKEN:
            while self.tokens:
                self._consume(self._next_positional_option(), self.tokens.peek())
            return

        if is_switch_token(token):
            match = SWITCH_VALUE_PATTERN.fullmatch(token)
            if match:
                self.tokens.push_front(match.group(2))
                token = match.group(1)

            option = self.registry.find_switch(token)
            if option is None:
                raise UnknownSwitchError(token)
            self._consume(option, token)
            return

        self.tokens.push_front(token)
        self._consume(self._next_positional_option(), token)

    def _next_positional_option(self) -> Option:
        option, self.next_positional_index = self.registry.next_positional(self.next_positional_index)
        if option is None:
            raise UnexpectedArgumentError(self.tokens.peek())
        return option

    def _consume(self, option: Option, context: str) -> None:
        """Store a value for ``option``; ``context`` names the trigger in errors."""
        if option.kind is OptionKind.BOOLEAN:
            value = not option.default if isinstance(option.default, bool) else True
        else:
            if not self.tokens:
                raise MissingValueError(context, option_name=option.name)
            value = coerce_value(option, self.tokens.pop())

        if option.repeatable:
            self.store.append(option, value)
        else:
            self.store.set(option, value)

    def _validate_required(self) -> None:
        for option in self.registry:
            if option.required and option.name not in self.store:
                label = f"option {option.label()}" if option.switches else option.label()
                raise MissingRequiredOptionError(option.name, label)
