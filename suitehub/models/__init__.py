"""
Stored record models package
"""

from .event import Event, VibeTag
from .rsvp import RSVP, RSVPStatus
from .session import SessionRecord
from .member import Member

__all__ = ["Event", "VibeTag", "RSVP", "RSVPStatus", "SessionRecord", "Member"]
