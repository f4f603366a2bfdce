import pytest
from fastapi.testclient import TestClient

from app.core.firebase import FirebaseClients, get_firebase
from app.services.auth import credential_service
from app.services.notifications import notification_service
from tests.fakes import FakeAuth, FakeFirestore, FakeMessaging


@pytest.fixture
def db():
    return FakeFirestore()


@pytest.fixture
def fake_auth(monkeypatch):
    fake = FakeAuth()
    monkeypatch.setattr(credential_service.auth, "get_user", fake.get_user)
    monkeypatch.setattr(credential_service.auth, "create_user", fake.create_user)
    monkeypatch.setattr(credential_service.auth, "update_user", fake.update_user)
    return fake


@pytest.fixture
def fake_messaging(monkeypatch):
    fake = FakeMessaging()
    monkeypatch.setattr(notification_service.messaging, "send", fake.send)
    return fake


@pytest.fixture
def client(db, fake_auth, fake_messaging):
    from app.main import app

    # Lifespan is not entered, so no real Firebase app is created
    app.dependency_overrides[get_firebase] = lambda: FirebaseClients(app=None, db=db)
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()
