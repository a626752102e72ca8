import dataclasses
import enum


class TokenKind(enum.IntEnum):
    ILLEGAL = enum.auto()

    SECTION = enum.auto()
    ASSIGN = enum.auto()


@dataclasses.dataclass(frozen=True)
class Token:
    literal: str
    kind: TokenKind
    lineno: int
