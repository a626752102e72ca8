import codecs
import logging
from typing import Iterable, Iterator

from .token import Token, TokenKind

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


class Lexer:
    """Turns raw lines into one `Token` per significant line.

    Comments are cut off, the remainder is trimmed and blank lines are
    dropped. Line numbers still count every physical line so that errors
    point back at the source.
    """

    def __init__(
        self,
        input: Iterable[str | bytes],
        *,
        comment_chars: str = "#;",
        encoding: str = "utf-8",
    ) -> None:
        self.input = input
        self.comment_chars = comment_chars
        self.encoding = encoding

    def __iter__(self) -> "LexerIterator":
        return LexerIterator(
            decode_lines(self.input, self.encoding),
            comment_chars=self.comment_chars,
        )


def decode_lines(
    chunks: Iterable[str | bytes], encoding: str
) -> Iterator[str]:
    """Yield text lines from `chunks`.

    Each `str` item is taken as one line. `bytes` items are run through an
    incremental decoder and re-split on the decoded `\\n`, since a binary
    stream splits on byte 0x0A, which need not end a character in codecs
    such as UTF-16.
    """
    decoder = codecs.getincrementaldecoder(encoding)()
    pending = ""

    for chunk in chunks:
        if isinstance(chunk, str):
            yield chunk
            continue

        pending += decoder.decode(chunk)
        *lines, pending = pending.split("\n")
        yield from lines

    pending += decoder.decode(b"", final=True)

    if pending:
        yield pending


class LexerIterator:
    def __init__(
        self,
        lines: Iterator[str],
        *,
        comment_chars: str,
    ) -> None:
        self.lines = lines
        self.comment_chars = comment_chars
        self.lineno = 0

    def __iter__(self) -> "LexerIterator":
        return self

    def __next__(self) -> Token:
        while True:
            # Propagates StopIteration at end of input, and any I/O error
            # from the underlying stream as is.
            raw = next(self.lines)
            self.lineno += 1

            if self.lineno == 1:
                raw = raw.removeprefix(_BOM)

            line = self.strip_comment(raw).strip()

            if line:
                return self.classify(line)

    def strip_comment(self, line: str) -> str:
        for i, c in enumerate(line):
            if c in self.comment_chars:
                return line[:i]

        return line

    def classify(self, line: str) -> Token:
        if line.startswith("["):
            kind = TokenKind.SECTION
        elif "=" in line:
            kind = TokenKind.ASSIGN
        else:
            kind = TokenKind.ILLEGAL

        logger.debug("line %d: %s %r", self.lineno, kind.name, line)
        return Token(literal=line, kind=kind, lineno=self.lineno)
