from __future__ import annotations

from culturematch.config import (
    DEFAULT_SETTINGS,
    clear_preferences,
    load_preferences,
    load_settings,
    save_preferences,
)


def test_missing_settings_file_gives_defaults(tmp_path):
    settings = load_settings(tmp_path / "settings.yaml")
    assert settings == DEFAULT_SETTINGS
    settings["analysis"]["seed"] = 1
    assert DEFAULT_SETTINGS["analysis"]["seed"] is None


def test_settings_file_is_merged_over_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("analysis:\n  seed: 3\n  use_search: false\nserver:\n  port: 8080\n", encoding="utf-8")
    settings = load_settings(path)
    assert settings["analysis"]["seed"] == 3
    assert settings["analysis"]["use_search"] is False
    assert settings["analysis"]["request_timeout"] == 10
    assert settings["server"] == {"host": "127.0.0.1", "port": 8080, "debug": False}


def test_non_mapping_settings_file_is_ignored(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_preferences_round_trip(tmp_path):
    path = tmp_path / "data" / "preferences.yaml"
    assert load_preferences(path) is None

    prefs = {"flexibility": {"workFromHome": 3, "flexibleHours": 0}, "inclusion": {"womenLeadership": 2}}
    save_preferences(prefs, path)
    assert load_preferences(path) == prefs

    assert clear_preferences(path) is True
    assert load_preferences(path) is None
    assert clear_preferences(path) is False


def test_corrupt_preferences_file(tmp_path):
    path = tmp_path / "preferences.yaml"
    path.write_text("flexibility: [unclosed\n", encoding="utf-8")
    assert load_preferences(path) is None


def test_empty_section_keeps_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("analysis:\nserver:\n  port: 8080\n", encoding="utf-8")
    settings = load_settings(path)
    assert settings["analysis"] == DEFAULT_SETTINGS["analysis"]
    assert settings["server"]["port"] == 8080
