"""
Key-value store key naming.

event:{id}               -> Event record (JSON)
events:list              -> set of event ids
rsvp:{event_id}:{name}   -> RSVP record (JSON)
rsvps:{event_id}         -> set of RSVP keys for one event
session:{token}          -> SessionRecord (JSON), TTL = session lifetime
admin:password           -> bcrypt hash string
"""

EVENT_KEY = "event:{event_id}"
EVENTS_LIST_KEY = "events:list"
RSVP_KEY = "rsvp:{event_id}:{name}"
RSVPS_BY_EVENT_KEY = "rsvps:{event_id}"
SESSION_KEY = "session:{token}"
ADMIN_PASSWORD_KEY = "admin:password"


def event_key(event_id: str) -> str:
    return EVENT_KEY.format(event_id=event_id)


def events_list_key() -> str:
    return EVENTS_LIST_KEY


def rsvp_key(event_id: str, name: str) -> str:
    return RSVP_KEY.format(event_id=event_id, name=name)


def rsvps_by_event_key(event_id: str) -> str:
    return RSVPS_BY_EVENT_KEY.format(event_id=event_id)


def session_key(token: str) -> str:
    return SESSION_KEY.format(token=token)


def admin_password_key() -> str:
    return ADMIN_PASSWORD_KEY
