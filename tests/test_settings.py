from __future__ import annotations

import io
from pathlib import Path

import pytest
import yaml

from plsfile.core.config import DEFAULT_CONFIG, CodecSettings
from plsfile.core.element import PlaylistElement
from plsfile.core.parser import parse
from plsfile.core.writer import write


@pytest.fixture(autouse=True)
def _clear_config_env(monkeypatch):
    monkeypatch.delenv("PLSFILE_CONFIG_PATH", raising=False)
    monkeypatch.delenv("PLSFILE_CONFIG_DIR", raising=False)


def test_defaults_without_config_file(tmp_path: Path) -> None:
    settings = CodecSettings(config_path=tmp_path / "missing.yaml")

    assert settings.get_encoding() == "utf-8-sig"
    assert settings.get_write_encoding() == "utf-8"
    assert settings.get_errors() == "strict"
    assert settings.get_raw() == DEFAULT_CONFIG


def test_defaults_never_touch_the_filesystem(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("PLSFILE_CONFIG_PATH", str(tmp_path / "settings.yaml"))
    (tmp_path / "settings.yaml").write_text("io:\n  encoding: latin-1\n", encoding="utf-8")

    settings = CodecSettings.defaults()

    assert settings.get_encoding() == "utf-8-sig"


def test_save_and_reload_roundtrip(tmp_path: Path) -> None:
    config_path = tmp_path / "nested" / "plsfile.yaml"
    settings = CodecSettings(config_path=config_path)
    settings.set_encoding("cp1250")
    settings.set_write_encoding("latin-1")
    settings.set_errors("replace")
    settings.save()

    reloaded = CodecSettings(config_path=config_path)

    assert reloaded.get_encoding() == "cp1250"
    assert reloaded.get_write_encoding() == "latin-1"
    assert reloaded.get_errors() == "replace"


def test_partial_config_is_merged_with_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "plsfile.yaml"
    config_path.write_text(yaml.safe_dump({"io": {"encoding": "latin-1"}}), encoding="utf-8")

    settings = CodecSettings(config_path=config_path)

    assert settings.get_encoding() == "latin-1"
    assert settings.get_write_encoding() == "utf-8"


def test_invalid_values_fall_back_to_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "plsfile.yaml"
    config_path.write_text("io:\n  encoding: no-such-codec\n  errors: shrug\n", encoding="utf-8")

    settings = CodecSettings(config_path=config_path)

    assert settings.get_encoding() == "utf-8-sig"
    assert settings.get_errors() == "strict"


def test_non_mapping_config_is_ignored(tmp_path: Path) -> None:
    config_path = tmp_path / "plsfile.yaml"
    config_path.write_text("- just\n- a list\n", encoding="utf-8")

    assert CodecSettings(config_path=config_path).get_raw() == DEFAULT_CONFIG


def test_environment_overrides_config_location(tmp_path: Path, monkeypatch) -> None:
    config_dir = tmp_path / "conf"
    config_dir.mkdir()
    (config_dir / "plsfile.yaml").write_text("io:\n  encoding: latin-1\n", encoding="utf-8")
    monkeypatch.setenv("PLSFILE_CONFIG_DIR", str(config_dir))

    settings = CodecSettings(config_path=tmp_path / "ignored.yaml")

    assert settings.config_path == config_dir / "plsfile.yaml"
    assert settings.get_encoding() == "latin-1"

    explicit = tmp_path / "explicit.yaml"
    monkeypatch.setenv("PLSFILE_CONFIG_PATH", str(explicit))

    assert CodecSettings().config_path == explicit


def test_settings_drive_parse_and_write_encodings(tmp_path: Path) -> None:
    config_path = tmp_path / "plsfile.yaml"
    config_path.write_text("io:\n  encoding: cp1250\n  write_encoding: cp1250\n", encoding="utf-8")
    settings = CodecSettings(config_path=config_path)
    data = "[playlist]\nFile1=Łódź.mp3\nNumberOfEntries=1\n".encode("cp1250")

    elements = parse(io.BytesIO(data), settings=settings)
    buffer = io.BytesIO()
    write(elements, buffer, settings=settings)

    assert elements == [PlaylistElement("Łódź.mp3")]
    assert buffer.getvalue().decode("cp1250").startswith("[playlist]\nFile1=Łódź.mp3\n")


def test_parse_ignores_config_environment_without_explicit_settings(tmp_path: Path, monkeypatch) -> None:
    config_path = tmp_path / "plsfile.yaml"
    config_path.write_text("io:\n  encoding: latin-1\n", encoding="utf-8")
    monkeypatch.setenv("PLSFILE_CONFIG_PATH", str(config_path))
    data = "[playlist]\nFile1=Żółw.mp3\nNumberOfEntries=1\n".encode("utf-8")

    assert parse(io.BytesIO(data)) == [PlaylistElement("Żółw.mp3")]
