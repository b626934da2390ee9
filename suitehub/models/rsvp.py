"""
RSVP model
"""

from datetime import datetime
from enum import Enum

from .base import StoredRecord

class RSVPStatus(str, Enum):
    GOING = "going"
    MAYBE = "maybe"
    NOT_GOING = "not_going"

class RSVP(StoredRecord):
    """One respondent's answer for one event, keyed by (event_id, name)"""
    event_id: str
    name: str
    status: RSVPStatus
    created_at: datetime
