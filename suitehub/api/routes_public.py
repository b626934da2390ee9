"""
Public API routes - no authentication required
"""

from typing import Optional

import redis.asyncio as redis
from fastapi import APIRouter, Depends

from suitehub.core.roster import MEMBERS
from suitehub.schemas.event import EventDetail, EventListing, TonightResponse
from suitehub.services.event_service import EventService
from suitehub.services.rsvp_service import RSVPService
from suitehub.services.store_client import get_store, ping
from suitehub.utils.responses import success_response, error_response
from suitehub.utils.time_windows import utc_now

router = APIRouter()

@router.get("/health")
async def health_check(store: Optional[redis.Redis] = Depends(get_store)):
    """Health check endpoint"""
    return {"status": "ok", "store": await ping(store)}

@router.get("/api/events")
async def list_events(store: Optional[redis.Redis] = Depends(get_store)):
    """Upcoming events (soonest first) and past events (most recent first)"""
    now = utc_now()
    listing = EventListing(
        upcoming=await EventService.list_upcoming(store, now),
        past=await EventService.list_past(store, now),
    )
    return success_response(
        message="Events retrieved successfully",
        data=listing
    )

@router.get("/api/events/tonight")
async def tonight_event(store: Optional[redis.Redis] = Depends(get_store)):
    """Tonight's event, falling back to the next upcoming one"""
    now = utc_now()
    event = await EventService.tonight(store, now)
    is_tonight = event is not None
    if event is None:
        event = await EventService.next_event(store, now)

    result = TonightResponse(
        event=event,
        is_tonight=is_tonight,
        rsvps=await RSVPService.list_for_event(store, event.id) if event else None,
    )
    return success_response(
        message="Tonight's event retrieved" if is_tonight else "Next event retrieved",
        data=result
    )

@router.get("/api/events/{event_id}")
async def get_event(event_id: str, store: Optional[redis.Redis] = Depends(get_store)):
    event = await EventService.get(store, event_id)
    if not event:
        return error_response(
            message="Event not found",
            error_code="EVENT_NOT_FOUND",
            status_code=404
        )

    return success_response(
        message="Event retrieved successfully",
        data=EventDetail(event=event, rsvps=await RSVPService.list_for_event(store, event_id))
    )

@router.get("/api/events/{event_id}/rsvps")
async def get_event_rsvps(event_id: str, store: Optional[redis.Redis] = Depends(get_store)):
    """RSVPs for an event with going/maybe/not going counts"""
    return success_response(
        message="RSVPs retrieved successfully",
        data=await RSVPService.list_for_event(store, event_id)
    )

@router.get("/api/members")
async def list_members():
    return success_response(
        message="Members retrieved successfully",
        data=MEMBERS
    )
