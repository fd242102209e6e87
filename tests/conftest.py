import pytest
from fastapi.testclient import TestClient

from typing_exam.core.config import Settings, get_settings
from typing_exam.core.deps import get_backend
from typing_exam.main import create_app
from typing_exam.models.users import Role
from typing_exam.services.backend import ExamBackend

ADMIN_MOBILE = "8055926965"


@pytest.fixture
def settings(monkeypatch):
    """
    Settings de test (env forcé + cache vidé pour prendre en compte les env).
    """
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("APP_NAME", "TYPING EXAM API (tests)")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost")
    monkeypatch.setenv("CREDENTIAL_SCHEME", "shift")
    monkeypatch.setenv("ADMIN_MOBILE", ADMIN_MOBILE)
    monkeypatch.setenv("ADMIN_PASSWORD", "admin@123")

    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def backend(settings: Settings) -> ExamBackend:
    """Backend neuf (stores vides) pour chaque test."""
    return ExamBackend(settings)


@pytest.fixture
def admin_backend(backend: ExamBackend) -> ExamBackend:
    """Backend avec une identité "root" déjà admin (auto-amorçage)."""
    backend.assign_caller_user_role("root", "root", Role.admin)
    return backend


@pytest.fixture
def test_client(backend: ExamBackend):
    """
    TestClient branché sur le backend du test (override de la dépendance).
    """
    app = create_app()
    app.dependency_overrides[get_backend] = lambda: backend
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
