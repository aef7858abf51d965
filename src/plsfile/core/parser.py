"""PLS playlist parsing."""

from __future__ import annotations

import io
import logging
from typing import IO, Any, List, Mapping, Optional

from plsfile.core.config import CodecSettings
from plsfile.core.element import U64_MAX, ElementLength, PlaylistElement
from plsfile.core.errors import (
    InvalidInteger,
    InvalidVersion,
    MalformedIni,
    MissingKey,
    MissingPlaylistSection,
)
from plsfile.core.ini import IniDocument, IniSyntaxError

logger = logging.getLogger(__name__)

PLAYLIST_SECTION = "playlist"
SUPPORTED_VERSION = 2
UNKNOWN_LENGTH = "-1"

# Some major radio stations publish malformed playlists, so the lowercase and
# "Events" spellings are accepted too. First match wins, in this order.
ENTRY_COUNT_KEYS = ("NumberOfEntries", "numberofentries", "NumberOfEvents")


def parse_unsigned(value: str) -> int:
    """Parse ``value`` as an unsigned 64-bit decimal integer.

    An optional leading ``+`` is allowed; signs, whitespace, separators and
    non-ASCII digits are not. Raises ``ValueError`` instead of clamping.
    """

    if not value:
        raise ValueError("cannot parse an unsigned integer from an empty string")
    digits = value[1:] if value.startswith("+") else value
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"invalid digit in unsigned integer {value!r}")
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(U64_MAX)) or int(significant) > U64_MAX:
        raise ValueError(f"unsigned integer {value!r} is too large")
    return int(significant)


def _parse_integer(value: str) -> int:
    try:
        return parse_unsigned(value)
    except ValueError as exc:
        raise InvalidInteger(exc) from exc


def parse_length(value: Optional[str]) -> ElementLength:
    """Resolve a ``Length#`` value; missing or ``-1`` means unknown."""

    if value is None or value == UNKNOWN_LENGTH:
        return ElementLength.UNKNOWN
    return ElementLength.of_seconds(_parse_integer(value))


def parse(stream: IO[Any], *, settings: Optional[CodecSettings] = None) -> List[PlaylistElement]:
    """Parse a PLS playlist from a text or byte stream.

    The parser is lenient about what else the document holds but every required
    key has to be there. Raises a :class:`~plsfile.core.errors.ParseError`
    subclass on the first problem; nothing is returned partially.
    """

    settings = settings or CodecSettings.defaults()
    try:
        document = IniDocument.read_from(
            stream,
            encoding=settings.get_encoding(),
            errors=settings.get_errors(),
        )
    except IniSyntaxError as exc:
        raise MalformedIni(exc) from exc
    return parse_section(document.section(PLAYLIST_SECTION))


def parse_section(section: Optional[Mapping[str, str]]) -> List[PlaylistElement]:
    """Build elements from the key/value pairs of a ``[playlist]`` section."""

    if section is None:
        raise MissingPlaylistSection()

    version = section.get("Version")
    if version is not None:
        number = _parse_integer(version)
        if number != SUPPORTED_VERSION:
            raise InvalidVersion(number)

    count_key = next((key for key in ENTRY_COUNT_KEYS if key in section), None)
    if count_key is None:
        raise MissingKey("|".join(ENTRY_COUNT_KEYS))
    count = _parse_integer(section[count_key])
    logger.debug("Playlist declares %d entries via %s", count, count_key)

    elements: List[PlaylistElement] = []
    for index in range(1, count + 1):
        file_key = f"File{index}"
        path = section.get(file_key)
        if path is None:
            raise MissingKey(file_key)
        elements.append(
            PlaylistElement(
                path=path,
                title=section.get(f"Title{index}"),
                length=parse_length(section.get(f"Length{index}")),
            )
        )
    return elements


def parse_pls_text(text: str, *, settings: Optional[CodecSettings] = None) -> List[PlaylistElement]:
    return parse(io.StringIO(text), settings=settings)
