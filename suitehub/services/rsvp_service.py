"""
RSVP collection service
"""

import logging
from typing import Optional

import redis.asyncio as redis

from suitehub.core.config import settings
from suitehub.core.errors import RSVPValidationError, StoreUnavailableError
from suitehub.models import RSVP, RSVPStatus
from suitehub.schemas.rsvp import RSVPSummary
from suitehub.services.repositories import RSVPRepo

logger = logging.getLogger(__name__)


class RSVPService:
    """Service for reading and recording RSVPs"""

    @staticmethod
    async def list_for_event(store: Optional[redis.Redis], event_id: str) -> RSVPSummary:
        """RSVPs with going/maybe/not_going counts; all zeros when the store fails"""
        try:
            rsvps = await RSVPRepo.list_for_event(store, event_id)
        except StoreUnavailableError as e:
            logger.error(f"Failed to fetch RSVPs for event {event_id}: {e}")
            return RSVPSummary()
        return RSVPSummary.from_rsvps(rsvps)

    @staticmethod
    def clean_name(name: str) -> str:
        """Trim the respondent name, rejecting empty or overlong names"""
        cleaned = (name or "").strip()
        if not cleaned:
            raise RSVPValidationError("Name is required")
        if len(cleaned) > settings.RSVP_NAME_MAX_LENGTH:
            raise RSVPValidationError("Name too long")
        return cleaned

    @staticmethod
    async def upsert(store: Optional[redis.Redis], event_id: str, name: str, status: RSVPStatus) -> RSVP:
        """Record an RSVP; a repeat from the same name replaces the earlier one.

        Names are compared exactly after trimming, so "Alex" and "alex" are
        two different respondents.
        """
        cleaned = RSVPService.clean_name(name)
        rsvp = await RSVPRepo.upsert(store, event_id, cleaned, RSVPStatus(status))
        logger.info(f"RSVP {rsvp.status.value} for event {event_id}")
        return rsvp
