"""
Clock helpers and the "tonight" window.

The tonight window runs from 18:00 local time to 04:00 local time the next
day. Before 04:00 the window still belongs to the previous evening, so at
02:00 it is yesterday 18:00 through today 04:00.
"""

from datetime import datetime, time, timedelta, timezone
from typing import Optional, Tuple
from zoneinfo import ZoneInfo

from suitehub.core.config import settings

TONIGHT_START = time(18, 0)
TONIGHT_END = time(4, 0)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_aware(value: datetime, tz: Optional[ZoneInfo] = None) -> datetime:
    """Interpret naive datetimes in local time and normalize to UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=tz or settings.local_tz)
    return value.astimezone(timezone.utc)


def tonight_window(now: datetime, tz: Optional[ZoneInfo] = None) -> Tuple[datetime, datetime]:
    """Return the inclusive (start, end) of the tonight window containing `now`."""
    tz = tz or settings.local_tz
    local_now = ensure_aware(now, tz).astimezone(tz)

    base_day = local_now.date()
    if local_now.time() < TONIGHT_END:
        base_day -= timedelta(days=1)

    start = datetime.combine(base_day, TONIGHT_START, tzinfo=tz)
    end = datetime.combine(base_day + timedelta(days=1), TONIGHT_END, tzinfo=tz)
    return start, end


def in_window(moment: datetime, window: Tuple[datetime, datetime]) -> bool:
    start, end = window
    return start <= moment <= end
