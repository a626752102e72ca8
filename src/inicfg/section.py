import logging

from .entry import Entry
from .errors import InvalidSectionError
from .parser import Parser
from .token import TokenKind

logger = logging.getLogger(__name__)


class Section:
    def __init__(self, name: str, entries: list[Entry]) -> None:
        self.name = name
        self.entries = entries

    @classmethod
    def parse(cls, p: Parser) -> "Section":
        assert p.current is not None, "called parse after end of input"
        assert p.current.kind == TokenKind.SECTION, p.current.kind.name

        header = p.current.literal

        if len(header) <= 2 or not header.endswith("]"):
            raise InvalidSectionError(p.current.lineno)

        name = header[1:-1].strip().lower()

        if not name:
            # `[   ]` passes the length check but names nothing.
            raise InvalidSectionError(p.current.lineno)

        logger.debug("section %r at line %d", name, p.current.lineno)
        p.advance()

        entries: list[Entry] = []

        while p.current is not None and p.current.kind != TokenKind.SECTION:
            entries.append(Entry.parse(p))

        return cls(name=name, entries=entries)

    def as_dict(self) -> dict[str, str]:
        d: dict[str, str] = {}

        for entry in self.entries:
            if entry.key in d:
                logger.debug(
                    "key %r in section %r redefined", entry.key, self.name
                )

            d[entry.key] = entry.value

        return d
