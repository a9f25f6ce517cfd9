"""Tests for environment configuration and the default session wiring."""

import pytest
from fastapi.testclient import TestClient

from fieldbook.config import load_settings, normalize_database_url, require_database_url
from fieldbook.db.session import dispose_engines, get_engine, init_db
from fieldbook.errors import StoreNotConfiguredError


class TestNormalizeDatabaseUrl:
    """Hosted Postgres URLs are rewritten for SQLAlchemy."""

    def test_legacy_postgres_scheme(self):
        url = "postgres://user:pw@db.example.com/app?sslmode=require"

        assert normalize_database_url(url) == "postgresql://user:pw@db.example.com/app?sslmode=require"

    def test_postgresql_scheme_unchanged(self):
        url = "postgresql+psycopg2://user:pw@localhost/app"

        assert normalize_database_url(url) == url

    def test_sqlite_unchanged(self):
        assert normalize_database_url("sqlite:///data.db") == "sqlite:///data.db"


class TestLoadSettings:
    """Settings are read from the environment on demand."""

    def test_reads_database_url(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgres://u@h/db")

        assert load_settings().database_url == "postgresql://u@h/db"

    def test_missing_database_url(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        assert load_settings().database_url is None

    def test_log_level(self, monkeypatch):
        monkeypatch.setenv("FIELDBOOK_LOG_LEVEL", "debug")

        assert load_settings().log_level == "DEBUG"

    def test_require_raises_when_missing(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        with pytest.raises(StoreNotConfiguredError, match="DATABASE_URL not set"):
            require_database_url()


class TestConfiguredStore:
    """With DATABASE_URL set, requests use the configured store."""

    @pytest.fixture
    def configured_client(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'fieldbook.db'}")
        init_db()

        from fieldbook.api.app import create_app

        yield TestClient(create_app())
        dispose_engines()

    def test_engine_is_cached(self, configured_client):
        assert get_engine() is get_engine()

    def test_round_trip(self, configured_client):
        response = configured_client.post("/api/businesses", json={"name": "Acme", "icon": "a.png"})
        assert response.status_code == 200

        response = configured_client.post(
            "/api/customers", json={"id": "c-1", "name": "Nimal", "business": "Acme"}
        )
        assert response.status_code == 200

        init_data = configured_client.get("/api/init").json()
        assert init_data["icons"] == {"Acme": "a.png"}

        [customer] = configured_client.get("/api/customers", params={"business": "Acme"}).json()
        assert customer["name"] == "Nimal"
        assert customer["visit_completed"] == "No"
