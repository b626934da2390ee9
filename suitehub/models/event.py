"""
Event model
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Optional

from pydantic import StringConstraints, field_validator

from suitehub.utils.time_windows import ensure_aware
from .base import StoredRecord

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

class VibeTag(str, Enum):
    """Mood label shown on event cards"""
    CHILL = "Chill"
    PARTY = "Party"
    STUDY = "Study"
    MOVIE = "Movie"
    FOOD = "Food"
    GAME = "Game"

class Event(StoredRecord):
    id: str
    title: RequiredText
    date: datetime
    location: RequiredText
    vibe_tag: VibeTag
    description: Optional[str] = None
    bring_notes: Optional[str] = None
    created_at: datetime

    @field_validator("date", "created_at")
    @classmethod
    def _normalize_timestamps(cls, value: datetime) -> datetime:
        return ensure_aware(value)
