"""
Shared fixtures: an in-memory Redis standing in for the hosted store
"""

from datetime import datetime, timezone

import fakeredis
import pytest
from fastapi.testclient import TestClient

from suitehub.core.config import settings
from suitehub.schemas.event import EventCreate
from suitehub.services.store_client import get_store

@pytest.fixture
def fake_server():
    """Backing data shared by every client built on it"""
    return fakeredis.FakeServer()

@pytest.fixture
def store(fake_server):
    """Async store client used by the services"""
    return fakeredis.FakeAsyncRedis(server=fake_server, decode_responses=True)

@pytest.fixture
def sync_store(fake_server):
    """Sync view of the same data, for seeding and inspecting from tests"""
    return fakeredis.FakeRedis(server=fake_server, decode_responses=True)

@pytest.fixture
def broken_store():
    """Store whose every command fails with a connection error"""
    server = fakeredis.FakeServer()
    server.connected = False
    return fakeredis.FakeAsyncRedis(server=server, decode_responses=True)

@pytest.fixture
def admin_secret(monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", "open-sesame")
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)
    return "open-sesame"

@pytest.fixture
def client(store, monkeypatch):
    """Test client wired to the in-memory store"""
    import main

    monkeypatch.setattr(main, "get_store_client", lambda: None)
    main.app.dependency_overrides[get_store] = lambda: store
    with TestClient(main.app) as test_client:
        yield test_client
    main.app.dependency_overrides.clear()

@pytest.fixture
def admin_client(client, admin_secret):
    """Test client holding a valid admin session cookie"""
    response = client.post("/admin/login", data={"password": admin_secret}, follow_redirects=False)
    assert response.status_code == 303
    return client

def make_event(title="Movie Night", date=None, location="Common Room", vibe_tag="Chill", **extra):
    """Build an EventCreate payload"""
    return EventCreate(
        title=title,
        date=date or datetime(2026, 10, 20, 20, 0, tzinfo=timezone.utc),
        location=location,
        vibe_tag=vibe_tag,
        **extra
    )
