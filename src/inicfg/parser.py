from typing import Iterator

from .token import Token


class Parser:
    """One-shot cursor over a token stream.

    Tokens are pulled lazily, one line at a time, so the line being parsed
    is always the last one read from the input. Do not share an instance
    between parses.
    """

    def __init__(self, tokens: Iterator[Token]) -> None:
        self._tokens = tokens
        self._current: Token | None = None

        self.advance()

    @property
    def current(self) -> Token | None:
        return self._current

    def advance(self) -> None:
        try:
            self._current = next(self._tokens)
        except StopIteration:
            self._current = None
