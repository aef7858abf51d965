"""Codec configuration package.

The public API is available as `plsfile.core.config` while implementation is
split into focused modules.
"""

from __future__ import annotations

from .defaults import DEFAULT_CONFIG
from .settings import CodecSettings

__all__ = [
    "DEFAULT_CONFIG",
    "CodecSettings",
]
