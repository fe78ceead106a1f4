from __future__ import annotations

import json
from pathlib import Path

from docsite.services.config_path import get_config_dir
from docsite.services.settings_service import DEFAULT_SETTINGS, SettingsService


def test_config_dir_from_env(isolated_config: Path) -> None:
    assert get_config_dir() == isolated_config


def test_config_dir_default(monkeypatch) -> None:
    monkeypatch.delenv("DOCSITE_CONFIG_DIR")
    assert get_config_dir() == Path.home() / ".config" / "docsite"


def test_defaults_without_file() -> None:
    settings = SettingsService.get_instance()
    assert settings.get("content.dir") == "public/content"
    assert settings.get("highlighter.theme") == "github-dark"
    assert settings.get("missing.key", "fallback") == "fallback"


def test_saved_values_merge_over_defaults(isolated_config: Path) -> None:
    isolated_config.mkdir(parents=True)
    (isolated_config / "settings.json").write_text(
        json.dumps({"highlighter": {"theme": "monokai"}, "extra": 1}), encoding="utf-8"
    )
    settings = SettingsService.get_instance()
    assert settings.get("highlighter.theme") == "monokai"
    assert settings.get("content.dir") == "public/content"
    assert settings.get("extra") == 1


def test_corrupt_file_falls_back_to_defaults(isolated_config: Path) -> None:
    isolated_config.mkdir(parents=True)
    (isolated_config / "settings.json").write_text("{not json", encoding="utf-8")
    assert SettingsService.get_instance().get_all() == DEFAULT_SETTINGS


def test_set_persists(isolated_config: Path) -> None:
    SettingsService.get_instance().set("content.dir", "/srv/docs")

    saved = json.loads((isolated_config / "settings.json").read_text(encoding="utf-8"))
    assert saved["content"]["dir"] == "/srv/docs"

    SettingsService.reset_instance()
    assert SettingsService.get_instance().get("content.dir") == "/srv/docs"


def test_reset_key_and_all() -> None:
    settings = SettingsService.get_instance()
    settings.set("content.dir", "/srv/docs")
    settings.set("highlighter.theme", "monokai")

    settings.reset("content.dir")
    assert settings.get("content.dir") == "public/content"
    assert settings.get("highlighter.theme") == "monokai"

    settings.reset()
    assert settings.get_all() == DEFAULT_SETTINGS


def test_get_all_is_a_copy() -> None:
    settings = SettingsService.get_instance()
    settings.get_all()["content"]["dir"] = "changed"
    assert settings.get("content.dir") == "public/content"
    assert DEFAULT_SETTINGS["content"]["dir"] == "public/content"
