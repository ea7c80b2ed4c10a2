import importlib
import pytest
from fastapi.testclient import TestClient

import src.main
from src.main import app

client = TestClient(app)


# Rebuild the app with a small default limit, then restore the configured one
@pytest.fixture
def limited_app(monkeypatch):
    monkeypatch.setenv("RATE_LIMIT_REQUESTS", "2")
    monkeypatch.setenv("RATE_LIMIT_WINDOW", "60")
    module = importlib.reload(src.main)
    yield module.app
    monkeypatch.undo()
    importlib.reload(src.main)


def test_app_serves_search():
    resp = client.post("/api/v1/emojis/search", json={"include": ["cat"]})
    assert resp.status_code == 200
    assert [item["glyph"] for item in resp.json()] == ["🐱"]


def test_app_maps_decoding_errors_to_bad_request():
    resp = client.post("/api/v1/emojis/search", json={"exclude": [1, 2]})
    assert resp.status_code == 400


def test_requests_over_the_limit_are_rejected(limited_app):
    limited_client = TestClient(limited_app)
    codes = [
        limited_client.post("/api/v1/emojis/search", json={"include": ["cat"]}).status_code
        for _ in range(4)
    ]
    assert codes == [200, 200, 429, 429]
