"""Errors raised while parsing PLS playlists."""

from __future__ import annotations

from typing import Any, Optional, Tuple

from plsfile.core.ini import IniSyntaxError


class ParseError(Exception):
    """Base class for every way parsing a playlist can fail.

    Two errors are equal when they are the same variant with equal payloads.
    """

    cause: Optional[BaseException] = None

    def _payload(self) -> Tuple[Any, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._payload() == other._payload()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._payload()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(value) for value in self._payload())})"


class InvalidVersion(ParseError):
    """``Version`` was an integer other than 2."""

    def __init__(self, version: int) -> None:
        super().__init__(f"Invalid version {version} specified")
        self.version = version

    def _payload(self) -> Tuple[Any, ...]:
        return (self.version,)


class MissingPlaylistSection(ParseError):
    """The whole ``[playlist]`` section is missing."""

    def __init__(self) -> None:
        super().__init__("Missing [playlist] section")


class MissingKey(ParseError):
    """A required key is missing."""

    def __init__(self, key: str) -> None:
        super().__init__(f'Key "{key}" missing')
        self.key = key

    def _payload(self) -> Tuple[Any, ...]:
        return (self.key,)


class InvalidInteger(ParseError):
    """A value that must be an unsigned integer was not one."""

    cause: ValueError

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    def _payload(self) -> Tuple[Any, ...]:
        return (type(self.cause), self.cause.args)

    def __repr__(self) -> str:
        return f"InvalidInteger({self.cause!r})"


class MalformedIni(ParseError):
    """The document is not structurally valid INI."""

    cause: IniSyntaxError

    def __init__(self, cause: IniSyntaxError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    @property
    def line(self) -> int:
        return self.cause.line

    @property
    def column(self) -> int:
        return self.cause.column

    def _payload(self) -> Tuple[Any, ...]:
        return (self.cause.line, self.cause.column, self.cause.message)

    def __repr__(self) -> str:
        return f"MalformedIni({self.cause!r})"


__all__ = [
    "InvalidInteger",
    "InvalidVersion",
    "MalformedIni",
    "MissingKey",
    "MissingPlaylistSection",
    "ParseError",
]
