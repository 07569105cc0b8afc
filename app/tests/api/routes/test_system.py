from fastapi.testclient import TestClient

from api.routes.system import router as system_router
from infrastructure.configuration import Settings
from infrastructure.services import get_settings
from utils.tests import create_test_app

app = create_test_app(system_router)
client = TestClient(app)


def test_get_version_unknown(monkeypatch):
    monkeypatch.delenv("GIT_SHA", raising=False)
    app.dependency_overrides[get_settings] = lambda: Settings()
    try:
        response = client.get("/version")
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 200
    assert response.json() == {"version": "Unknown"}


def test_get_version_known():
    app.dependency_overrides[get_settings] = lambda: Settings(GIT_SHA="foo")
    try:
        response = client.get("/version")
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 200
    assert response.json() == {"version": "foo"}


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
