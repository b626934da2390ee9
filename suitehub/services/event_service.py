"""
Event queries and admin CRUD
"""

import logging
from datetime import datetime
from typing import List, Optional
from zoneinfo import ZoneInfo

import pydantic
import redis.asyncio as redis

from suitehub.core.errors import EventNotFoundError, StoreUnavailableError, ValidationError
from suitehub.models import Event
from suitehub.schemas.event import EventCreate, EventUpdate
from suitehub.services.repositories import EventRepo
from suitehub.utils.time_windows import ensure_aware, in_window, tonight_window, utc_now

logger = logging.getLogger(__name__)


def _validation_message(error: pydantic.ValidationError) -> str:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ()))
    return f"{field}: {first['msg']}" if field else first["msg"]


class EventService:
    """Service for calendar queries and event management"""

    @staticmethod
    async def list_all(store: Optional[redis.Redis]) -> List[Event]:
        """Every event by date ascending; empty when the store fails"""
        try:
            return await EventRepo.list_all(store)
        except StoreUnavailableError as e:
            logger.error(f"Failed to fetch events: {e}")
            return []

    @staticmethod
    async def list_upcoming(store: Optional[redis.Redis], now: Optional[datetime] = None) -> List[Event]:
        now = ensure_aware(now or utc_now())
        events = await EventService.list_all(store)
        return [e for e in events if e.date >= now]

    @staticmethod
    async def list_past(store: Optional[redis.Redis], now: Optional[datetime] = None) -> List[Event]:
        """Past events, most recent first"""
        now = ensure_aware(now or utc_now())
        events = await EventService.list_all(store)
        return sorted((e for e in events if e.date < now), key=lambda e: e.date, reverse=True)

    @staticmethod
    async def tonight(
        store: Optional[redis.Redis],
        now: Optional[datetime] = None,
        tz: Optional[ZoneInfo] = None,
    ) -> Optional[Event]:
        """Soonest event inside tonight's 18:00-04:00 window"""
        window = tonight_window(now or utc_now(), tz)
        events = await EventService.list_all(store)
        return next((e for e in events if in_window(e.date, window)), None)

    @staticmethod
    async def next_event(store: Optional[redis.Redis], now: Optional[datetime] = None) -> Optional[Event]:
        upcoming = await EventService.list_upcoming(store, now)
        return upcoming[0] if upcoming else None

    @staticmethod
    async def get(store: Optional[redis.Redis], event_id: str) -> Optional[Event]:
        try:
            return await EventRepo.get(store, event_id)
        except StoreUnavailableError as e:
            logger.error(f"Failed to fetch event {event_id}: {e}")
            return None

    @staticmethod
    async def create(store: Optional[redis.Redis], data: EventCreate) -> Event:
        try:
            event = await EventRepo.create(store, data.model_dump())
        except pydantic.ValidationError as e:
            raise ValidationError(_validation_message(e)) from e
        logger.info(f"Created event {event.id} ({event.title})")
        return event

    @staticmethod
    async def update(store: Optional[redis.Redis], event_id: str, data: EventUpdate) -> Event:
        try:
            event = await EventRepo.update(store, event_id, data.model_dump(exclude_unset=True))
        except pydantic.ValidationError as e:
            raise ValidationError(_validation_message(e)) from e
        if event is None:
            raise EventNotFoundError(event_id)
        logger.info(f"Updated event {event_id}")
        return event

    @staticmethod
    async def delete(store: Optional[redis.Redis], event_id: str) -> bool:
        removed = await EventRepo.delete(store, event_id)
        if removed:
            logger.info(f"Deleted event {event_id} and its RSVPs")
        else:
            logger.info(f"Delete requested for unknown event {event_id}")
        return removed
