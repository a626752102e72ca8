import io
import logging
import os
from typing import IO, Iterable

from .document import Document
from .errors import (
    EmptyKeyError,
    InvalidFormatError,
    InvalidSectionError,
    KeyWithoutSectionError,
    ParseError,
)
from .lexer import Lexer
from .parser import Parser

__all__ = (
    "Document",
    "EmptyKeyError",
    "InvalidFormatError",
    "InvalidSectionError",
    "KeyWithoutSectionError",
    "ParseError",
    "load",
    "load_file",
    "load_stream",
)

logger = logging.getLogger(__name__)


def load(data: str) -> Document:
    """Deserialize INI-encoded `data`.

    Parameters
    ----------
    data
        Text to deserialize.

    Returns
    -------
    Document
        Read-only view of the sections and their keys. Section and key
        names are lowercased; values are kept as written, minus surrounding
        whitespace.

    Raises
    ------
    ParseError
        On the first malformed line. The subclass names what was wrong and
        `lineno` says where.
    """
    return load_stream(io.StringIO(data))


def load_stream(
    stream: IO[str] | IO[bytes] | Iterable[str | bytes],
    *,
    encoding: str = "utf-8",
) -> Document:
    """Deserialize INI from an open text or binary stream.

    The stream is read line by line until exhausted and is left open.
    Errors raised while reading propagate unchanged. `encoding` is used
    only for binary streams.
    """
    if isinstance(stream, (str, bytes)):
        # Iterating these would yield characters, not lines.
        raise TypeError(
            f"expected a stream of lines, got {type(stream).__name__}; "
            "use load() to parse text held in memory"
        )

    lexer = Lexer(input=stream, encoding=encoding)
    tokens = iter(lexer)
    parser = Parser(tokens)
    return Document.parse(parser)


def load_file(
    path: str | os.PathLike[str],
    *,
    encoding: str = "utf-8",
) -> Document:
    """Open `path` and deserialize its contents; see `load_stream`.

    The file is closed whether or not parsing succeeds.
    """
    logger.debug("loading %s", os.fspath(path))

    with open(path, encoding=encoding, newline="\n") as f:
        return load_stream(f, encoding=encoding)


del IO, Iterable
