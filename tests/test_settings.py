"""
Tests for lunitool.config.settings module.

This test suite covers:
- Settings loading and saving
- Default settings initialization
- Error handling for corrupted settings files
- Environment variable overrides
"""

import json

from lunitool.config import settings


class TestLoadSettings:
    """Tests for load_settings() function."""

    def test_load_defaults_when_no_file(self, isolated_settings):
        settings.settings_store.values = {}
        settings.load_settings()

        assert settings.get_setting("language") == "de"
        assert settings.get_setting("keyboard") == "de"
        assert settings.get_setting("backtitle") == "LUNITOOL"
        assert settings.get_bool("auto_install_dialog") is True
        assert settings.get_setting("task_modules") == {}
        assert settings.get_setting("theme") == "terminal_spirit"

    def test_load_from_existing_file(self, isolated_settings):
        isolated_settings.parent.mkdir(parents=True)
        isolated_settings.write_text(
            json.dumps({"language": "en", "debug_mode": True}), encoding="utf-8"
        )

        settings.load_settings()

        assert settings.get_setting("language") == "en"
        assert settings.get_bool("debug_mode") is True
        assert settings.get_setting("keyboard") == "de"

    def test_corrupted_file_falls_back_to_defaults(self, isolated_settings):
        isolated_settings.parent.mkdir(parents=True)
        isolated_settings.write_text("{not json", encoding="utf-8")

        settings.load_settings()

        assert settings.settings_store.values == settings.DEFAULT_SETTINGS

    def test_non_object_file_is_ignored(self, isolated_settings):
        isolated_settings.parent.mkdir(parents=True)
        isolated_settings.write_text("[1, 2, 3]", encoding="utf-8")

        settings.load_settings()

        assert settings.get_setting("language") == "de"

    def test_environment_overrides_stored_values(self, isolated_settings, monkeypatch):
        isolated_settings.parent.mkdir(parents=True)
        isolated_settings.write_text(json.dumps({"language": "de"}), encoding="utf-8")
        monkeypatch.setenv("LUNITOOL_LANG", "en")
        monkeypatch.setenv("LUNITOOL_KEYBOARD", "us")

        settings.load_settings()

        assert settings.get_setting("language") == "en"
        assert settings.get_setting("keyboard") == "us"


class TestSaveSettings:
    """Tests for save_settings() and set_setting()."""

    def test_set_setting_persists(self, isolated_settings):
        settings.set_setting("language", "en")

        stored = json.loads(isolated_settings.read_text(encoding="utf-8"))
        assert stored["language"] == "en"

    def test_saved_values_round_trip(self, isolated_settings):
        settings.set_setting("keyboard", "us")
        settings.settings_store.values = {}

        settings.load_settings()

        assert settings.get_setting("keyboard") == "us"

    def test_unwritable_path_keeps_running(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        settings.save_settings(blocker / "settings.json")

        assert not (blocker / "settings.json").exists()

    def test_get_setting_default(self):
        assert settings.get_setting("missing", "fallback") == "fallback"
        assert settings.get_bool("missing") is False
