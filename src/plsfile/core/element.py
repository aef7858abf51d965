"""Playlist element data models."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar, Optional, Tuple

U64_MAX = 2**64 - 1


@total_ordering
@dataclass(frozen=True)
class ElementLength:
    """Length of a playlist element: whole seconds, or unknown when ``seconds`` is None.

    ``Length#=-1`` and a missing ``Length#`` key both map to :attr:`UNKNOWN`.
    Known lengths sort before unknown ones.
    """

    seconds: Optional[int] = None

    UNKNOWN: ClassVar["ElementLength"]

    def __post_init__(self) -> None:
        if self.seconds is None:
            return
        if isinstance(self.seconds, bool) or not isinstance(self.seconds, int):
            raise TypeError("Length must be a whole number of seconds")
        if self.seconds < 0 or self.seconds > U64_MAX:
            raise ValueError(f"Length out of range: {self.seconds}")

    @classmethod
    def of_seconds(cls, seconds: int) -> "ElementLength":
        return cls(seconds)

    @property
    def is_unknown(self) -> bool:
        return self.seconds is None

    @property
    def duration_display(self) -> str:
        if self.seconds is None:
            return "--:--"
        minutes, seconds = divmod(self.seconds, 60)
        return f"{minutes:02d}:{seconds:02d}"

    def _sort_key(self) -> Tuple[bool, int]:
        return (self.seconds is None, self.seconds or 0)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ElementLength):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __repr__(self) -> str:
        if self.seconds is None:
            return "ElementLength.UNKNOWN"
        return f"ElementLength.of_seconds({self.seconds})"


ElementLength.UNKNOWN = ElementLength()


@total_ordering
@dataclass(frozen=True)
class PlaylistElement:
    """A single playlist entry.

    ``path`` comes from ``File#`` and is not validated (file path or URL),
    ``title`` from ``Title#`` (None when omitted) and ``length`` from ``Length#``.
    """

    path: str
    title: Optional[str] = None
    length: ElementLength = ElementLength.UNKNOWN

    def _sort_key(self) -> Tuple[str, bool, str, ElementLength]:
        # an absent title sorts before any present one
        return (self.path, self.title is not None, self.title or "", self.length)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PlaylistElement):
            return NotImplemented
        return self._sort_key() < other._sort_key()
