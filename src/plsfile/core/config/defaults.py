"""Default configuration values."""

from __future__ import annotations

from typing import Any, Dict

DEFAULT_CONFIG: Dict[str, Any] = {
    "io": {
        # utf-8-sig also accepts documents without a BOM
        "encoding": "utf-8-sig",
        "write_encoding": "utf-8",
        "errors": "strict",
    },
}
