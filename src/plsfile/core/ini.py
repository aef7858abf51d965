"""Minimal INI section reader backing the PLS parser.

Only what the playlist format needs: named sections holding ``key=value``
pairs, read in one pass from a text or byte stream.
"""

from __future__ import annotations

import configparser
import io
import itertools
import logging
from typing import IO, Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

# Keys found before the first header land here. Neither name can be reached
# through ``IniDocument.section``.
_PREAMBLE_SECTION = "\x00preamble"
_DEFAULT_SECTION = "\x00defaults"


class IniSyntaxError(Exception):
    """Structural INI failure with 1-based ``line`` and 0-based ``column``."""

    def __init__(self, line: int, column: int, message: str) -> None:
        super().__init__(f"line {line}, column {column}: {message}")
        self.line = line
        self.column = column
        self.message = message

    def __repr__(self) -> str:
        return f"IniSyntaxError(line={self.line}, column={self.column}, message={self.message!r})"


class IniDocument:
    """Sections of a parsed INI document, each an ordered key/value mapping."""

    def __init__(self, sections: Dict[str, Dict[str, str]]) -> None:
        self._sections = sections

    @classmethod
    def read_from(
        cls,
        stream: IO[Any],
        *,
        encoding: str = "utf-8-sig",
        errors: str = "strict",
    ) -> "IniDocument":
        text = _read_text(stream, encoding, errors)
        parser = _make_parser()
        # configparser reads indented lines as value continuations; PLS has none
        body = (line.lstrip() for line in io.StringIO(text, newline=None))
        lines = itertools.chain([f"[{_PREAMBLE_SECTION}]\n"], body)
        try:
            parser.read_file(lines, source="<stream>")
        except configparser.ParsingError as exc:
            lineno = exc.errors[0][0]
            # the injected preamble header shifts every line by one
            raise IniSyntaxError(lineno - 1, 0, "Expected a [section] header or a key=value pair") from exc

        sections = {
            name: dict(parser.items(name, raw=True))
            for name in parser.sections()
            if name != _PREAMBLE_SECTION
        }
        logger.debug("Read INI document with sections %s", list(sections))
        return cls(sections)

    def section(self, name: str) -> Optional[Mapping[str, str]]:
        return self._sections.get(name)

    def sections(self) -> list[str]:
        return list(self._sections)


def _make_parser() -> configparser.RawConfigParser:
    parser = configparser.RawConfigParser(
        delimiters=("=",),
        comment_prefixes=("#", ";"),
        inline_comment_prefixes=None,
        strict=False,
        empty_lines_in_values=False,
        interpolation=None,
        default_section=_DEFAULT_SECTION,
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    return parser


def _read_text(stream: IO[Any], encoding: str, errors: str) -> str:
    data = stream.read()
    if isinstance(data, str):
        return data
    raw = bytes(data)
    try:
        return raw.decode(encoding, errors)
    except UnicodeDecodeError as exc:
        line = raw.count(b"\n", 0, exc.start) + 1
        column = exc.start - (raw.rfind(b"\n", 0, exc.start) + 1)
        raise IniSyntaxError(line, column, f"Cannot decode as {encoding}: {exc.reason}") from exc
