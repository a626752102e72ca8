import logging
import types
from typing import Mapping

from .errors import InvalidFormatError, KeyWithoutSectionError
from .parser import Parser
from .section import Section
from .token import TokenKind

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, str] = types.MappingProxyType({})


class Document:
    """The result of one successful parse.

    Section and key names are stored lowercase; every lookup lowercases its
    arguments too, so queries are case-insensitive. A `Document` never
    changes after construction and may be read from several threads.
    """

    def __init__(self, sections: Mapping[str, Mapping[str, str]]) -> None:
        # Names are normalized here as well, so documents built by hand
        # answer the same lookups as parsed ones.
        normalized: dict[str, Mapping[str, str]] = {}

        for name, keys in sections.items():
            normalized[_checked_name(name, "section")] = (
                types.MappingProxyType(
                    {_checked_name(k, "key"): v for k, v in keys.items()}
                )
            )

        self._sections = types.MappingProxyType(normalized)

    @classmethod
    def parse(cls, p: Parser) -> "Document":
        sections: dict[str, dict[str, str]] = {}

        while p.current is not None:
            match p.current.kind:
                case TokenKind.SECTION:
                    section = Section.parse(p)

                    if section.name in sections:
                        # Replaced, not merged.
                        logger.debug("section %r redefined", section.name)

                    sections[section.name] = section.as_dict()
                case TokenKind.ASSIGN:
                    raise KeyWithoutSectionError(p.current.lineno)
                case _:
                    raise InvalidFormatError(p.current.lineno)

        return cls(sections=sections)

    @property
    def sections(self) -> Mapping[str, Mapping[str, str]]:
        return self._sections

    def section(self, name: str) -> Mapping[str, str]:
        """Return the keys of section `name`, or an empty mapping."""
        return self._sections.get(_normalize(name), _EMPTY)

    def read(self, section: str, key: str) -> str:
        """Return the value of `key` in `section`.

        Returns an empty string if either the section or the key does not
        exist, so a missing key and an empty value look the same here. Use
        `key_exists` to tell them apart.
        """
        return self.section(section).get(_normalize(key), "")

    def section_exists(self, section: str) -> bool:
        return _normalize(section) in self._sections

    def key_exists(self, section: str, key: str) -> bool:
        return _normalize(key) in self.section(section)

    def section_list(self) -> list[str]:
        return list(self._sections)

    def key_list(self, section: str) -> list[str]:
        return list(self.section(section))

    def as_dict(self) -> dict[str, dict[str, str]]:
        return {name: dict(keys) for name, keys in self._sections.items()}

    def __contains__(self, section: object) -> bool:
        return isinstance(section, str) and self.section_exists(section)

    def __repr__(self) -> str:
        return f"Document(sections={self.section_list()!r})"


def _normalize(name: str) -> str:
    return name.strip().lower()


def _checked_name(name: str, what: str) -> str:
    normalized = _normalize(name)

    if not normalized:
        raise ValueError(f"{what} name must not be empty, got {name!r}")

    return normalized
