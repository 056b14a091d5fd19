import pytest
from fastapi.testclient import TestClient

from timesheet.core.config import ServerConfig
from timesheet.main import app


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Fresh SQLite file per test"""
    path = tmp_path / "timesheet.db"
    monkeypatch.setattr(ServerConfig, "DATABASE_PATH", str(path))
    monkeypatch.setattr(ServerConfig, "ADMIN_PASSWORD", "admin")
    monkeypatch.setattr(ServerConfig, "SEED_TEST_DATA", False)
    return path


@pytest.fixture
def client(db_path):
    """Anonymous client; entering the context runs startup (schema creation)"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_client(db_path):
    """Separate client whose session went through /admin-login"""
    with TestClient(app) as test_client:
        response = test_client.post("/admin-login", json={"password": "admin"})
        assert response.status_code == 200
        yield test_client


@pytest.fixture
def log_entry(client):
    """Post to /log-hours with sensible defaults"""
    def _log_entry(**overrides):
        payload = {
            "name": "Anna",
            "date": "2024-06-03",
            "startTime": "08:00",
            "endTime": "17:00",
            "comment": "",
            "breakTime": 30,
        }
        payload.update(overrides)
        return client.post("/log-hours", json=payload)
    return _log_entry
