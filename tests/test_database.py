"""Tests for engine configuration, transactions and on-disk locations."""

import pytest
from sqlalchemy import inspect

from soloquest import paths, settings
from soloquest.database import db
from soloquest.database.db import configure_engine, get_session, init_db
from soloquest.database.models import KeyValue


class TestEngine:

    def test_init_db_with_url_creates_table(self):
        engine = init_db("sqlite:///:memory:")
        assert "kv_store" in inspect(engine).get_table_names()

    def test_init_db_reuses_configured_engine(self):
        engine = configure_engine("sqlite:///:memory:")
        assert init_db() is engine
        assert "kv_store" in inspect(engine).get_table_names()

    def test_file_database(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'player.db'}"
        init_db(url)
        with get_session() as s:
            s.add(KeyValue(key="@player", value="{}"))
        assert (tmp_path / "player.db").exists()


class TestSessions:

    def test_commit_on_success(self):
        with get_session() as s:
            s.add(KeyValue(key="@a", value="1"))
        with get_session() as s:
            assert s.get(KeyValue, "@a").value == "1"

    def test_rollback_on_error(self):
        with pytest.raises(RuntimeError):
            with get_session() as s:
                s.add(KeyValue(key="@a", value="1"))
                s.flush()
                raise RuntimeError("boom")
        with get_session() as s:
            assert s.get(KeyValue, "@a") is None

    def test_default_engine_built_lazily(self, monkeypatch, tmp_path):
        monkeypatch.setattr(db, "DB_PATH", tmp_path / "nested" / "soloquest.db")
        monkeypatch.setattr(db, "_engine", None)
        monkeypatch.setattr(db, "_sessions", None)
        init_db()
        assert (tmp_path / "nested").is_dir()


class TestPaths:

    def test_settings_and_db_share_directory(self):
        assert settings.SETTINGS_PATH.parent == paths.DB_PATH.parent
        assert db.DB_PATH == paths.DB_PATH

    def test_linux_uses_xdg(self, monkeypatch, tmp_path):
        monkeypatch.setattr(paths.sys, "platform", "linux")
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
        assert paths.app_support_dir() == tmp_path / "soloquest"

    def test_macos_uses_application_support(self, monkeypatch):
        monkeypatch.setattr(paths.sys, "platform", "darwin")
        assert paths.app_support_dir().parts[-3:] == (
            "Library", "Application Support", "SoloQuest",
        )
