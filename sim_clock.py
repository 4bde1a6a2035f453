# sim_clock.py
from datetime import datetime, timezone
from typing import Optional

from config import config


def as_utc(instant: datetime) -> datetime:
    """Returns an aware UTC datetime. Naive datetimes are taken to be UTC already."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def days_since_epoch(instant: datetime) -> float:
    """Days (fractional) elapsed between the J2000.0 epoch and `instant`. Negative before the epoch."""
    delta = as_utc(instant) - config.Time.REFERENCE_EPOCH_UTC
    return delta.total_seconds() / config.Time.SECONDS_PER_DAY


def julian_date(instant: datetime) -> float:
    """Julian Date of `instant`, anchored at JD 2451545.0 = 2000-01-01 12:00 UTC."""
    return config.Time.REFERENCE_EPOCH_JD + days_since_epoch(instant)


class SystemClock:
    """Wall-clock time source. The only place the engine reads the current time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Time source frozen at a given instant, for tests and replays."""

    def __init__(self, instant: Optional[datetime] = None):
        self.instant = as_utc(instant) if instant is not None else config.Time.REFERENCE_EPOCH_UTC

    def now(self) -> datetime:
        return self.instant
