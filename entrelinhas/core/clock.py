"""Server-local time helpers."""
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from entrelinhas.core.config import settings


def local_now() -> datetime:
    """Current time in ``settings.TIMEZONE``, or the host's zone when unset.

    The host fallback carries a fixed offset; set ``TIMEZONE`` where daylight
    saving applies so ``start_of_day`` lands on the real local midnight.
    """
    if settings.TIMEZONE:
        return datetime.now(ZoneInfo(settings.TIMEZONE))
    return datetime.now().astimezone()


def start_of_day(now: datetime) -> datetime:
    """Midnight of the calendar day ``now`` falls on, in ``now``'s own timezone."""
    # A ZoneInfo tzinfo recomputes the offset for midnight itself.
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def to_storage(value: datetime) -> datetime:
    """Naive UTC, the form BSON dates round-trip as."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
