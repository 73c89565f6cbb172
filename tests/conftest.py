from __future__ import annotations

from datetime import datetime

import pytest

from src.attendance_tracker.attendance_tracker.container import build_container
from src.attendance_tracker.attendance_tracker.database.connection import StoreConfig
from src.attendance_tracker.attendance_tracker.database.store import LocalStore


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 9, 30, 0)


@pytest.fixture
def store_path(tmp_path) -> str:
    return str(tmp_path / "attendance_store.db")


@pytest.fixture
def store(store_path):
    local_store = LocalStore(StoreConfig(path=store_path))
    local_store.open()
    yield local_store
    local_store.close()


@pytest.fixture
def container(store_path, fixed_now):
    c = build_container(store_config=StoreConfig(path=store_path), clock=lambda: fixed_now)
    yield c
    c.close()


@pytest.fixture
def app(tmp_path, monkeypatch):
    from src.attendance_tracker.attendance_tracker.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    flask_app = create_app(store_path=str(tmp_path / "api_store.db"))
    yield flask_app
    flask_app.extensions["attendance_tracker"].close()


@pytest.fixture
def client(app):
    return app.test_client()
