"""Tests for JSON-backed settings."""

import logging

from soloquest.settings import Settings, load_settings, save_settings


class TestSettings:

    def test_defaults(self):
        s = Settings()
        assert s.new_quest_experience == 50
        assert s.fallback_on_corrupt is True

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_settings(tmp_path / "nope.json") == Settings()

    def test_round_trip(self, tmp_path):
        path = tmp_path / "sub" / "settings.json"
        save_settings(Settings(new_quest_experience=75, fallback_on_corrupt=False), path)
        assert load_settings(path) == Settings(
            new_quest_experience=75, fallback_on_corrupt=False,
        )

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text('{"new_quest_experience": 60, "theme": "dark"}', encoding="utf-8")
        assert load_settings(path).new_quest_experience == 60

    def test_unreadable_file_falls_back(self, tmp_path, caplog):
        path = tmp_path / "settings.json"
        path.write_text("{broken", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="soloquest.settings"):
            assert load_settings(path) == Settings()
        assert "Could not read settings" in caplog.text
