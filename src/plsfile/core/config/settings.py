"""Codec settings backed by an optional YAML file."""

from __future__ import annotations

import codecs
import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from .defaults import DEFAULT_CONFIG
from .merge import merge_config
from plsfile.core.env import CONFIG_FILENAME, resolve_config_path

logger = logging.getLogger(__name__)


@dataclass
class CodecSettings:
    """YAML configuration with built-in defaults.

    With ``autoload`` the path is resolved against environment overrides and the
    file is read right away; without it the instance holds the defaults only.
    """

    config_path: Path = Path("config") / CONFIG_FILENAME
    autoload: bool = True

    def __post_init__(self) -> None:
        self._data: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        if self.autoload:
            self.config_path = resolve_config_path(self.config_path)
            self.load()

    @classmethod
    def defaults(cls) -> "CodecSettings":
        return cls(autoload=False)

    def load(self) -> None:
        if self.config_path.exists():
            with self.config_path.open("r", encoding="utf-8") as file:
                user_config = yaml.safe_load(file) or {}
            if not isinstance(user_config, dict):
                logger.debug("Ignoring non-mapping settings in %s", self.config_path)
                user_config = {}
            self._data = merge_config(DEFAULT_CONFIG, user_config)
            logger.debug("Loaded settings from %s", self.config_path)
        else:
            self._data = copy.deepcopy(DEFAULT_CONFIG)
            logger.debug("No settings at %s, using defaults", self.config_path)

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with self.config_path.open("w", encoding="utf-8") as file:
            yaml.safe_dump(self._data, file, allow_unicode=False, sort_keys=True)

    def get_raw(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)

    def _io_value(self, key: str) -> Any:
        io_cfg = self._data.get("io", {})
        if not isinstance(io_cfg, dict):
            return DEFAULT_CONFIG["io"][key]
        return io_cfg.get(key, DEFAULT_CONFIG["io"][key])

    def _codec_name(self, key: str) -> str:
        value = str(self._io_value(key))
        try:
            codecs.lookup(value)
        except LookupError:
            return DEFAULT_CONFIG["io"][key]
        return value

    def get_encoding(self) -> str:
        """Encoding used to decode byte input when parsing."""

        return self._codec_name("encoding")

    def set_encoding(self, encoding: str) -> None:
        io_cfg = self._data.setdefault("io", {})
        io_cfg["encoding"] = str(encoding)

    def get_write_encoding(self) -> str:
        """Encoding used when writing to byte streams."""

        return self._codec_name("write_encoding")

    def set_write_encoding(self, encoding: str) -> None:
        io_cfg = self._data.setdefault("io", {})
        io_cfg["write_encoding"] = str(encoding)

    def get_errors(self) -> str:
        value = str(self._io_value("errors"))
        try:
            codecs.lookup_error(value)
        except LookupError:
            return DEFAULT_CONFIG["io"]["errors"]
        return value

    def set_errors(self, errors: str) -> None:
        io_cfg = self._data.setdefault("io", {})
        io_cfg["errors"] = str(errors)
