# tests/test_static.py

"""
Tests for serving the HTML front end next to the API.
"""

from fastapi.testclient import TestClient

from core.config import settings
from core.database import get_database
from main import create_app


def test_static_pages_served_after_api_routes(monkeypatch, tmp_path, db):
    (tmp_path / "signup.html").write_text("<h1>Sign up</h1>")
    monkeypatch.setattr(settings, "STATIC_DIR", str(tmp_path))

    application = create_app()
    application.dependency_overrides[get_database] = lambda: db

    with TestClient(application) as client:
        page = client.get("/signup.html")
        api = client.get("/requests")

    assert page.status_code == 200
    assert "Sign up" in page.text
    assert api.status_code == 200
    assert api.json() == []


def test_missing_static_dir_is_skipped(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "STATIC_DIR", str(tmp_path / "missing"))

    application = create_app()

    with TestClient(application) as client:
        assert client.get("/health/app").status_code == 200
        assert client.get("/signup.html").status_code == 404
