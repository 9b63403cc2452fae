from __future__ import annotations

import base64

from flask import Flask

from scripts import run_server

DOTENV_KEYS = ("APP_ENV", "AUTH_USERNAME", "AUTH_PASSWORD", "SEED_DEMO_DATA", "LOG_LEVEL", "HOST", "PORT")


def _clear_env(monkeypatch):
    # setenv first so teardown removes whatever load_dotenv writes
    for key in DOTENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


def _auth(username: str, password: str) -> dict:
    token = base64.b64encode(f"{username}:{password}".encode()).decode()
    return {"Authorization": f"Basic {token}"}


def test_run_server_applies_dotenv_settings(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    (tmp_path / ".env").write_text(
        "APP_ENV=development\nAUTH_PASSWORD=from-dotenv\nSEED_DEMO_DATA=0\nPORT=5077\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)

    started: dict = {}

    def fake_run(self, host=None, port=None, **kwargs):
        started.update(app=self, host=host, port=port)

    monkeypatch.setattr(Flask, "run", fake_run)

    run_server.main()

    assert started["port"] == 5077
    client = started["app"].test_client()
    assert client.get("/api/sections", headers=_auth("admin", "from-dotenv")).status_code == 200
    assert client.get("/api/sections", headers=_auth("admin", "password123")).status_code == 401


def test_real_environment_wins_over_dotenv(tmp_path, monkeypatch):
    _clear_env(monkeypatch)
    (tmp_path / ".env").write_text("APP_ENV=development\nAUTH_PASSWORD=from-dotenv\nSEED_DEMO_DATA=0\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("AUTH_PASSWORD", "from-shell")

    started: dict = {}
    monkeypatch.setattr(Flask, "run", lambda self, **kwargs: started.update(app=self))

    run_server.main()

    client = started["app"].test_client()
    assert client.get("/api/sections", headers=_auth("admin", "from-shell")).status_code == 200
