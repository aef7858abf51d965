"""PLS playlist serialization."""

from __future__ import annotations

import codecs
import io
import logging
from typing import IO, Any, Callable, Iterable, Optional

from plsfile.core.config import CodecSettings
from plsfile.core.element import PlaylistElement
from plsfile.core.parser import PLAYLIST_SECTION, SUPPORTED_VERSION

logger = logging.getLogger(__name__)


def _line_writer(stream: IO[Any], settings: CodecSettings) -> Callable[[str], None]:
    if isinstance(stream, (io.TextIOBase, codecs.StreamWriter, codecs.StreamReaderWriter)):
        def emit_text(line: str) -> None:
            stream.write(line + "\n")

        return emit_text

    # one encoder for the whole document so a BOM is only written once
    encoder = codecs.getincrementalencoder(settings.get_write_encoding())(settings.get_errors())

    def emit_bytes(line: str) -> None:
        stream.write(encoder.encode(line + "\n"))

    return emit_bytes


def write(
    elements: Iterable[PlaylistElement],
    stream: IO[Any],
    *,
    settings: Optional[CodecSettings] = None,
) -> None:
    """Write ``elements`` to ``stream`` in canonical PLS version 2 form.

    Every line is a separate write; an ``OSError`` from the stream propagates as
    is and leaves whatever was already written in place. Paths and titles are
    written verbatim since the format has no escaping. Text streams
    (``io.TextIOBase`` and ``codecs`` stream writers) receive ``str``; anything
    else receives bytes in the configured write encoding.
    """

    emit = _line_writer(stream, settings or CodecSettings.defaults())
    emit(f"[{PLAYLIST_SECTION}]")

    count = 0
    for index, element in enumerate(elements, start=1):
        emit(f"File{index}={element.path}")
        if element.title is not None:
            emit(f"Title{index}={element.title}")
        if not element.length.is_unknown:
            emit(f"Length{index}={element.length.seconds}")
        emit("")
        count = index

    emit(f"NumberOfEntries={count}")
    emit(f"Version={SUPPORTED_VERSION}")
    logger.debug("Wrote %d playlist entries", count)


def serialize_pls(elements: Iterable[PlaylistElement]) -> str:
    buffer = io.StringIO()
    write(elements, buffer)
    return buffer.getvalue()
