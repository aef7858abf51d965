"""Parser and writer for the PLS playlist format (version 2).

Reading::

    with open("Unknown Artist.pls", "rb") as file:
        elements = plsfile.parse(file)

Writing::

    with open("Unknown Artist.pls", "w", encoding="utf-8") as file:
        plsfile.write(elements, file)

Opening and closing files is left to the caller.
"""

from __future__ import annotations

from plsfile.core.config import CodecSettings
from plsfile.core.element import ElementLength, PlaylistElement
from plsfile.core.errors import (
    InvalidInteger,
    InvalidVersion,
    MalformedIni,
    MissingKey,
    MissingPlaylistSection,
    ParseError,
)
from plsfile.core.ini import IniDocument, IniSyntaxError
from plsfile.core.parser import parse, parse_length, parse_pls_text, parse_section, parse_unsigned
from plsfile.core.writer import serialize_pls, write

__all__ = [
    "CodecSettings",
    "ElementLength",
    "IniDocument",
    "IniSyntaxError",
    "InvalidInteger",
    "InvalidVersion",
    "MalformedIni",
    "MissingKey",
    "MissingPlaylistSection",
    "ParseError",
    "PlaylistElement",
    "parse",
    "parse_length",
    "parse_pls_text",
    "parse_section",
    "parse_unsigned",
    "serialize_pls",
    "write",
]
