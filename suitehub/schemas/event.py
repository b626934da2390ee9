"""
Event-related Pydantic schemas
"""

from datetime import datetime
from typing import Optional, List

from suitehub.models.base import CamelModel
from suitehub.models.event import Event, RequiredText, VibeTag
from suitehub.schemas.rsvp import RSVPSummary

class EventCreate(CamelModel):
    """Schema for creating an event"""
    title: RequiredText
    date: datetime
    location: RequiredText
    vibe_tag: VibeTag
    description: Optional[str] = None
    bring_notes: Optional[str] = None

class EventUpdate(CamelModel):
    """Partial update; unset fields keep their stored value"""
    title: Optional[RequiredText] = None
    date: Optional[datetime] = None
    location: Optional[RequiredText] = None
    vibe_tag: Optional[VibeTag] = None
    description: Optional[str] = None
    bring_notes: Optional[str] = None

class EventListing(CamelModel):
    """Public calendar: upcoming ascending, past most recent first"""
    upcoming: List[Event]
    past: List[Event]

class EventDetail(CamelModel):
    """Event with its RSVP summary"""
    event: Event
    rsvps: RSVPSummary

class TonightResponse(CamelModel):
    """Tonight's event, or the next one when nothing is on tonight"""
    event: Optional[Event] = None
    is_tonight: bool = False
    rsvps: Optional[RSVPSummary] = None
