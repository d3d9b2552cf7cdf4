from __future__ import annotations

from datetime import datetime

import pytest

from attendance_tracker import create_app, get_container
from attendance_tracker.database.bootstrap import apply_schema
from attendance_tracker.database.connection import DBConfig, DatabaseConnection


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 8, 30, 0)


@pytest.fixture
def db(tmp_path):
    conn = DatabaseConnection(DBConfig(path=str(tmp_path / "asistencia.db"))).open()
    apply_schema(conn)
    yield conn
    conn.close()


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(
        {
            "DATABASE_PATH": str(tmp_path / "api.db"),
            "AUTO_INIT_DB": True,
            "LOG_LEVEL": "WARNING",
        }
    )
    yield app
    get_container(app).close()


@pytest.fixture
def client(app):
    return app.test_client()
