"""Wall clock and ISO-8601 time codec used by resource items.

Time attributes are held as milliseconds since the Unix epoch and presented
as ``YYYY-MM-DDTHH:MM:SS`` without fraction or zone suffix. A ``zone`` of
``None`` means the local zone of the process.
"""

import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional

ISO_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"

_ISO_TIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}$")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MSEC = timedelta(milliseconds=1)


class Clock:
    """Source of "now" and of the zone local times are rendered in."""

    def __init__(self, zone: Optional[tzinfo] = None):
        self.zone = zone

    def now(self) -> datetime:
        if self.zone is None:
            return datetime.now().astimezone()
        return datetime.now(self.zone)


default_clock = Clock()


def _localize(dt: datetime, zone: Optional[tzinfo]) -> datetime:
    if dt.tzinfo is not None:
        return dt
    if zone is None:
        return dt.astimezone()
    return dt.replace(tzinfo=zone)


def datetime_to_msecs(dt: datetime, zone: Optional[tzinfo] = None) -> int:
    """Milliseconds since epoch; naive datetimes are taken to be in ``zone``."""
    return (_localize(dt, zone) - _EPOCH) // _MSEC


def msecs_to_datetime(msecs: int, zone: Optional[tzinfo] = None) -> datetime:
    dt = _EPOCH + timedelta(milliseconds=msecs)
    if zone is None:
        return dt.astimezone()
    return dt.astimezone(zone)


def parse_iso_time(text: str, zone: Optional[tzinfo] = None) -> Optional[int]:
    """Parse ``YYYY-MM-DDTHH:MM:SS`` in ``zone``; None if it does not parse."""
    if not _ISO_TIME_RE.match(text):
        return None
    try:
        dt = datetime.strptime(text, ISO_TIME_FORMAT)
    except ValueError:
        return None
    try:
        return datetime_to_msecs(dt, zone)
    except (OverflowError, OSError):
        return None


def format_iso_time(msecs: int, zone: Optional[tzinfo] = None) -> str:
    try:
        return msecs_to_datetime(msecs, zone).strftime(ISO_TIME_FORMAT)
    except (OverflowError, OSError):
        return ""


def format_timestamp(dt: Optional[datetime]) -> Optional[str]:
    """Render a last-set/last-changed timestamp in UTC, None when invalid."""
    if dt is None:
        return None
    return dt.astimezone(timezone.utc).strftime(ISO_TIME_FORMAT)
