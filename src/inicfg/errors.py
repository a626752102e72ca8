__all__ = (
    "ParseError",
    "InvalidSectionError",
    "InvalidFormatError",
    "KeyWithoutSectionError",
    "EmptyKeyError",
)


class ParseError(RuntimeError):
    """Base class for malformed input. `lineno` is 1-based."""

    description = "parse error"

    def __init__(self, lineno: int) -> None:
        super().__init__(f"{self.description} at line {lineno}")
        self.lineno = lineno


class InvalidSectionError(ParseError):
    """A line starting with `[` that is too short, unterminated or unnamed."""

    description = "invalid section"


class InvalidFormatError(ParseError):
    """A line that is neither a section header nor contains `=`."""

    description = "invalid format"


class KeyWithoutSectionError(ParseError):
    description = "key without section"


class EmptyKeyError(ParseError):
    description = "empty key"
