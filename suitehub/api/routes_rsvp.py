"""
RSVP routes - open to anyone with the link
"""

import logging
from typing import Optional

import redis.asyncio as redis
from fastapi import APIRouter, Depends

from suitehub.api.ws import revalidate_path
from suitehub.core.errors import RSVPValidationError, StoreUnavailableError
from suitehub.schemas.rsvp import RSVPRequest
from suitehub.services.rsvp_service import RSVPService
from suitehub.services.store_client import get_store
from suitehub.utils.responses import success_response, error_response, domain_error_response

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/events/{event_id}/rsvp")
async def submit_rsvp(
    event_id: str,
    rsvp_data: RSVPRequest,
    store: Optional[redis.Redis] = Depends(get_store)
):
    """Record or replace an RSVP for this event"""
    try:
        rsvp = await RSVPService.upsert(store, event_id, rsvp_data.name, rsvp_data.status)
    except RSVPValidationError as e:
        return domain_error_response(e)
    except StoreUnavailableError as e:
        logger.error(f"RSVP error: {e}")
        return error_response(
            message="Failed to save RSVP",
            error_code=e.code.value,
            status_code=500
        )

    await revalidate_path("/events", "/")

    return success_response(
        message="RSVP saved",
        data=rsvp
    )
