"""
Pydantic schemas package
"""

from .common import *
from .rsvp import *
from .event import *
from .auth import *

__all__ = [
    "StandardResponse",
    "ErrorResponse",
    "EventCreate",
    "EventUpdate",
    "EventListing",
    "EventDetail",
    "TonightResponse",
    "RSVPRequest",
    "RSVPSummary",
    "LoginRequest",
]
