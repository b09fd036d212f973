"""Token stream with one-token push-back."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Optional


class TokenStream:
    """Remaining raw argument tokens, consumed from the front.

    ``push_front`` puts a token back so it is the next one popped; the parser
    uses it to re-dispatch positional tokens and to split ``--switch=value``.
    """

    def __init__(self, tokens: Iterable[str] = ()):
        self._tokens: deque[str] = deque(tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __bool__(self) -> bool:
        return bool(self._tokens)

    def __repr__(self) -> str:
        return f"TokenStream({list(self._tokens)!r})"

    def peek(self) -> Optional[str]:
        return self._tokens[0] if self._tokens else None

    def pop(self) -> str:
        """Remove and return the front token. Raises IndexError when empty."""
        return self._tokens.popleft()

    def push_front(self, token: str) -> None:
        self._tokens.appendleft(token)
