from __future__ import annotations

import base64

import pytest

from src.class_attendance.class_attendance.database.memory_store import MemoryStore
from src.class_attendance.class_attendance.main import create_app


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers():
    token = base64.b64encode(b"admin:password123").decode()
    return {"Authorization": f"Basic {token}"}
