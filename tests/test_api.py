"""
Tests for the HTTP surface: public reads, RSVPs, login and admin-only CRUD
"""

from datetime import timedelta

import pytest

from suitehub.core.config import settings
from suitehub.utils.time_windows import utc_now

def event_payload(**overrides):
    payload = {
        "title": "Game Night",
        "date": (utc_now() + timedelta(days=1)).isoformat(),
        "location": "Suite Lounge",
        "vibeTag": "Game",
        "description": "Mario Kart tournament",
    }
    payload.update(overrides)
    return payload

def create_event(client, **overrides):
    response = client.post("/admin/api/events", json=event_payload(**overrides))
    assert response.status_code == 201, response.json()
    return response.json()["data"]

def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["store"] is True

def test_list_events_empty(client):
    response = client.get("/api/events")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"] == {"upcoming": [], "past": []}

def test_members_roster(client):
    response = client.get("/api/members")
    members = response.json()["data"]
    assert len(members) == 8
    assert members[0]["name"] == "Alex"
    assert members[0]["oneLiner"] == "The night owl"

def test_login_sets_http_only_cookie(client, admin_secret):
    response = client.post("/admin/login", data={"password": admin_secret}, follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/admin"
    cookie = response.headers["set-cookie"]
    assert cookie.startswith(f"{settings.SESSION_COOKIE_NAME}=")
    assert "HttpOnly" in cookie
    assert "Max-Age=604800" in cookie
    assert "samesite=lax" in cookie.lower()

def test_login_wrong_password(client, admin_secret):
    response = client.post("/admin/login", data={"password": "wrong"}, follow_redirects=False)
    assert response.status_code == 401
    assert "Invalid password" in response.text
    assert settings.SESSION_COOKIE_NAME not in response.headers.get("set-cookie", "")

def test_login_accepts_json_body(client, admin_secret):
    response = client.post("/admin/login", json={"password": admin_secret}, follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["set-cookie"].startswith(f"{settings.SESSION_COOKIE_NAME}=")

@pytest.mark.parametrize("body", [{"password": "wrong"}, {"password": 123}, ["open-sesame"]])
def test_login_json_body_rejected(client, admin_secret, body):
    response = client.post("/admin/login", json=body, follow_redirects=False)
    assert response.status_code == 401
    assert settings.SESSION_COOKIE_NAME not in response.headers.get("set-cookie", "")

def test_admin_page_redirects_without_session(client):
    response = client.get("/admin", follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/admin/login"

def test_admin_page_renders_with_session(admin_client):
    create_event(admin_client)
    response = admin_client.get("/admin")
    assert response.status_code == 200
    assert "Game Night" in response.text

@pytest.mark.parametrize("method, path", [
    ("get", "/admin/api/events"),
    ("post", "/admin/api/events"),
    ("patch", "/admin/api/events/some-id"),
    ("delete", "/admin/api/events/some-id"),
])
def test_admin_routes_require_session(client, method, path):
    kwargs = {"json": event_payload()} if method in ("post", "patch") else {}
    response = getattr(client, method)(path, **kwargs)

    assert response.status_code == 401
    body = response.json()
    assert body["success"] is False
    assert body["error_code"] == "UNAUTHORIZED"

def test_create_event_then_listed_as_upcoming(admin_client):
    created = create_event(admin_client)
    assert created["id"]
    assert created["vibeTag"] == "Game"

    upcoming = admin_client.get("/api/events").json()["data"]["upcoming"]
    assert [e["id"] for e in upcoming] == [created["id"]]

def test_create_event_rejects_missing_fields(admin_client):
    response = admin_client.post("/admin/api/events", json=event_payload(title="   "))
    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert "title" in body["message"]

def test_create_event_rejects_unknown_vibe(admin_client):
    response = admin_client.post("/admin/api/events", json=event_payload(vibeTag="Rave"))
    assert response.status_code == 422

def test_update_event(admin_client):
    created = create_event(admin_client)
    response = admin_client.patch(f"/admin/api/events/{created['id']}", json={"location": "Rooftop"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["location"] == "Rooftop"
    assert data["title"] == "Game Night"
    assert data["createdAt"] == created["createdAt"]

def test_update_missing_event_is_not_found(admin_client):
    response = admin_client.patch("/admin/api/events/missing", json={"title": "New"})
    assert response.status_code == 404
    assert response.json()["message"] == "Event not found"

def test_delete_event_cascades_rsvps(admin_client):
    created = create_event(admin_client)
    admin_client.post(f"/api/events/{created['id']}/rsvp", json={"name": "Jordan", "status": "going"})

    response = admin_client.delete(f"/admin/api/events/{created['id']}")
    assert response.json()["data"]["deleted"] is True

    assert admin_client.get(f"/api/events/{created['id']}").status_code == 404
    assert admin_client.get(f"/api/events/{created['id']}/rsvps").json()["data"]["rsvps"] == []

    again = admin_client.delete(f"/admin/api/events/{created['id']}")
    assert again.json()["data"]["deleted"] is False

def test_rsvp_flow(admin_client):
    created = create_event(admin_client)
    url = f"/api/events/{created['id']}/rsvp"

    assert admin_client.post(url, json={"name": " Jordan ", "status": "going"}).status_code == 200
    assert admin_client.post(url, json={"name": "Jordan", "status": "maybe"}).status_code == 200
    assert admin_client.post(url, json={"name": "Sam", "status": "not_going"}).status_code == 200

    detail = admin_client.get(f"/api/events/{created['id']}").json()["data"]
    assert detail["event"]["title"] == "Game Night"
    assert detail["rsvps"]["going"] == 0
    assert detail["rsvps"]["maybe"] == 1
    assert detail["rsvps"]["notGoing"] == 1

@pytest.mark.parametrize("name, message", [
    ("   ", "Name is required"),
    ("x" * 51, "Name too long"),
])
def test_rsvp_validation(client, name, message):
    response = client.post("/api/events/evt-1/rsvp", json={"name": name, "status": "going"})
    assert response.status_code == 422
    assert response.json()["message"] == message

def test_rsvp_rejects_unknown_status(client):
    response = client.post("/api/events/evt-1/rsvp", json={"name": "Sam", "status": "perhaps"})
    assert response.status_code == 422

def test_logout_invalidates_replayed_cookie(admin_client):
    token = admin_client.cookies.get(settings.SESSION_COOKIE_NAME)
    assert admin_client.get("/admin/api/events").status_code == 200

    response = admin_client.post("/admin/logout", follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/admin/login"

    replayed = {"Cookie": f"{settings.SESSION_COOKIE_NAME}={token}"}
    assert admin_client.get("/admin/api/events", headers=replayed).status_code == 401

def test_tonight_falls_back_to_next_event(admin_client):
    created = create_event(admin_client, date=(utc_now() + timedelta(days=3)).isoformat())
    data = admin_client.get("/api/events/tonight").json()["data"]

    assert data["event"]["id"] == created["id"]
    assert data["isTonight"] is False
    assert data["rsvps"]["going"] == 0

def test_tonight_with_no_events(client):
    data = client.get("/api/events/tonight").json()["data"]
    assert data["event"] is None
    assert data["isTonight"] is False

def test_pages_render(admin_client):
    create_event(admin_client)
    home = admin_client.get("/")
    assert home.status_code == 200
    assert "The Crew" in home.text
    assert "Game Night" in home.text

    events = admin_client.get("/events")
    assert events.status_code == 200
    assert "Game Night" in events.text

def test_events_page_shows_counts_for_each_event(admin_client):
    crowded = create_event(admin_client, title="Pizza Night")
    quiet = create_event(admin_client, title="Study Hall", date=(utc_now() + timedelta(days=2)).isoformat())
    for name in ("Jordan", "Sam"):
        admin_client.post(f"/api/events/{crowded['id']}/rsvp", json={"name": name, "status": "going"})
    admin_client.post(f"/api/events/{quiet['id']}/rsvp", json={"name": "Casey", "status": "maybe"})

    page = admin_client.get("/events").text
    assert "2 going" in page
    assert "0 going" in page
    assert "1 maybe" in page

def test_pages_render_with_store_down(client, broken_store):
    import main
    from suitehub.services.store_client import get_store

    main.app.dependency_overrides[get_store] = lambda: broken_store
    assert client.get("/events").status_code == 200
    assert "No upcoming events" in client.get("/events").text
    assert client.get("/api/events").json()["data"] == {"upcoming": [], "past": []}
    assert client.get("/health").json()["store"] is False

def test_view_socket_receives_revalidate(admin_client):
    with admin_client.websocket_connect("/ws/views/events") as socket:
        assert socket.receive_json()["type"] == "connection"
        create_event(admin_client)
        message = socket.receive_json()
        assert message["type"] == "revalidate"
        assert message["path"] == "/events"

def test_view_socket_rejects_unknown_view(client):
    from starlette.websockets import WebSocketDisconnect

    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect("/ws/views/nope") as socket:
            socket.receive_json()

def test_view_socket_ignores_non_object_messages(client):
    with client.websocket_connect("/ws/views/home") as socket:
        assert socket.receive_json()["type"] == "connection"
        socket.send_text("[1]")
        socket.send_text('"x"')
        socket.send_json({"type": "ping", "timestamp": 42})
        assert socket.receive_json() == {"type": "pong", "timestamp": 42}
