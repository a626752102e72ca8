from .errors import EmptyKeyError, InvalidFormatError
from .parser import Parser
from .token import TokenKind


class Entry:
    """Represents a key/value pair of a `Section`."""

    def __init__(self, key: str, value: str) -> None:
        self.key = key
        self.value = value

    @classmethod
    def parse(cls, p: Parser, /) -> "Entry":
        assert p.current is not None, "called parse after end of input"

        if p.current.kind != TokenKind.ASSIGN:
            raise InvalidFormatError(p.current.lineno)

        # Only the first `=` separates; the value may contain more of them.
        key, _, value = p.current.literal.partition("=")
        key = key.strip().lower()

        if not key:
            raise EmptyKeyError(p.current.lineno)

        p.advance()
        return cls(key=key, value=value.strip())

    def __repr__(self) -> str:
        return f"Entry(key={self.key!r}, value={self.value!r})"
