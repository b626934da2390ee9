"""
Repository layer over the key-value store.

Repos talk to Redis directly and raise StoreUnavailableError on any store
failure; fail-soft behaviour lives in the services above them.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Any, Dict, List, Optional, Type, TypeVar

import pydantic
import redis.asyncio as redis
from redis.exceptions import RedisError

from suitehub.models import Event, RSVP, RSVPStatus
from suitehub.models.base import StoredRecord
from suitehub.services import keys
from suitehub.services.store_client import require_store
from suitehub.core.errors import StoreUnavailableError
from suitehub.utils.time_windows import utc_now

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=StoredRecord)


async def _fetch_many(store: redis.Redis, record_keys: List[str], model: Type[R]) -> List[R]:
    """Read several records concurrently, skipping missing or unreadable ones."""
    raws = await asyncio.gather(*(store.get(key) for key in record_keys))
    records: List[R] = []
    for key, raw in zip(record_keys, raws):
        if raw is None:
            continue
        try:
            records.append(model.from_json(raw))
        except pydantic.ValidationError as e:
            logger.warning(f"Skipping unreadable record {key}: {e}")
    return records


# -------- Event repository --------

class EventRepo:
    @staticmethod
    async def list_all(store: Optional[redis.Redis]) -> List[Event]:
        """All events ordered by date ascending"""
        store = require_store(store)
        try:
            event_ids = await store.smembers(keys.events_list_key())
            if not event_ids:
                return []
            events = await _fetch_many(store, [keys.event_key(i) for i in event_ids], Event)
        except RedisError as e:
            raise StoreUnavailableError(str(e)) from e
        return sorted(events, key=lambda e: e.date)

    @staticmethod
    async def get(store: Optional[redis.Redis], event_id: str) -> Optional[Event]:
        store = require_store(store)
        try:
            raw = await store.get(keys.event_key(event_id))
        except RedisError as e:
            raise StoreUnavailableError(str(e)) from e
        return Event.from_json(raw) if raw else None

    @staticmethod
    async def create(store: Optional[redis.Redis], data: Dict[str, Any]) -> Event:
        store = require_store(store)
        event = Event.model_validate({
            **data,
            "id": str(uuid.uuid4()),
            "created_at": utc_now(),
        })
        try:
            async with store.pipeline(transaction=True) as pipe:
                pipe.set(keys.event_key(event.id), event.to_json())
                pipe.sadd(keys.events_list_key(), event.id)
                await pipe.execute()
        except RedisError as e:
            raise StoreUnavailableError(str(e)) from e
        return event

    @staticmethod
    async def update(store: Optional[redis.Redis], event_id: str, changes: Dict[str, Any]) -> Optional[Event]:
        """Merge changes over the stored record; None when the event is absent"""
        store = require_store(store)
        existing = await EventRepo.get(store, event_id)
        if existing is None:
            return None

        updated = Event.model_validate({
            **existing.model_dump(),
            **changes,
            "id": existing.id,
            "created_at": existing.created_at,
        })
        try:
            await store.set(keys.event_key(event_id), updated.to_json())
        except RedisError as e:
            raise StoreUnavailableError(str(e)) from e
        return updated

    @staticmethod
    async def delete(store: Optional[redis.Redis], event_id: str) -> bool:
        """Remove the event, its index entry and all of its RSVPs"""
        store = require_store(store)
        rsvps_key = keys.rsvps_by_event_key(event_id)
        try:
            rsvp_keys = await store.smembers(rsvps_key)
            async with store.pipeline(transaction=True) as pipe:
                pipe.srem(keys.events_list_key(), event_id)
                pipe.delete(keys.event_key(event_id))
                pipe.delete(rsvps_key, *rsvp_keys)
                unindexed, dropped, _ = await pipe.execute()
        except RedisError as e:
            raise StoreUnavailableError(str(e)) from e
        # either half may be missing if an earlier write was interrupted
        return unindexed > 0 or dropped > 0


# -------- RSVP repository --------

class RSVPRepo:
    @staticmethod
    async def list_for_event(store: Optional[redis.Redis], event_id: str) -> List[RSVP]:
        store = require_store(store)
        try:
            rsvp_keys = await store.smembers(keys.rsvps_by_event_key(event_id))
            if not rsvp_keys:
                return []
            return await _fetch_many(store, sorted(rsvp_keys), RSVP)
        except RedisError as e:
            raise StoreUnavailableError(str(e)) from e

    @staticmethod
    async def upsert(store: Optional[redis.Redis], event_id: str, name: str, status: RSVPStatus) -> RSVP:
        """Write or overwrite the RSVP for (event_id, name)"""
        store = require_store(store)
        rsvp = RSVP(event_id=event_id, name=name, status=status, created_at=utc_now())
        key = keys.rsvp_key(event_id, name)
        try:
            async with store.pipeline(transaction=True) as pipe:
                pipe.set(key, rsvp.to_json())
                pipe.sadd(keys.rsvps_by_event_key(event_id), key)
                await pipe.execute()
        except RedisError as e:
            raise StoreUnavailableError(str(e)) from e
        return rsvp
