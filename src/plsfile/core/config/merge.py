"""Merge helpers for configuration dictionaries."""

from __future__ import annotations

import copy
from typing import Any, Dict, Mapping


def merge_config(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Overlay ``override`` on ``base`` section by section; neither input is mutated."""

    merged: Dict[str, Any] = copy.deepcopy(dict(base))
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            merged[key] = merge_config(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged
