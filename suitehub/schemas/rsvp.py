"""
RSVP-related Pydantic schemas
"""

from typing import List

from suitehub.models.base import CamelModel
from suitehub.models.rsvp import RSVP, RSVPStatus

class RSVPRequest(CamelModel):
    """RSVP submission; the name is validated by RSVPService"""
    name: str
    status: RSVPStatus

class RSVPSummary(CamelModel):
    """All RSVPs for an event with per-status counts"""
    rsvps: List[RSVP] = []
    going: int = 0
    maybe: int = 0
    not_going: int = 0

    @classmethod
    def from_rsvps(cls, rsvps: List[RSVP]) -> "RSVPSummary":
        return cls(
            rsvps=rsvps,
            going=sum(1 for r in rsvps if r.status == RSVPStatus.GOING),
            maybe=sum(1 for r in rsvps if r.status == RSVPStatus.MAYBE),
            not_going=sum(1 for r in rsvps if r.status == RSVPStatus.NOT_GOING),
        )
