"""
@file_name: timezone.py
@author: NetMind.AI
@date: 2026-01-20
@description: Timezone utility module

Provides unified time handling functions to ensure:
- Internal storage: all times use UTC
- API: ISO 8601 with Z suffix
- Display: human-readable date/time for summaries

Core functions:
- utc_now(): Get UTC time (replaces all datetime.now() calls)
- parse_iso_datetime(value): Strict ISO 8601 UTC parser
- format_for_api(dt): Format as API ISO 8601 UTC format
- format_date_for_display(dt) / format_time_for_display(dt): Summary formatting
- is_in_future(dt) / is_date_in_range(dt, from, to): Comparisons used by validation and queries
"""

import re
from datetime import date, datetime, time, timezone
from typing import Optional

from loguru import logger


# ===== ISO 8601 format accepted by the API =====

# YYYY-MM-DDTHH:mm:ssZ or YYYY-MM-DDTHH:mm:ss.sssZ
ISO_DATETIME_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{3})?Z$")
CALENDAR_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


# ===== Core Time Functions =====

def utc_now() -> datetime:
    """
    Get the current UTC time (with timezone info)

    Returns:
        A datetime object with UTC timezone info
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """Attach UTC to naive datetimes, convert aware ones to UTC"""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_iso_datetime(value: str) -> datetime:
    """
    Parse a strict ISO 8601 UTC timestamp

    Args:
        value: String such as "2026-09-01T10:00:00Z" or "2026-09-01T10:00:00.000Z"

    Returns:
        Aware UTC datetime

    Raises:
        ValueError: If the string does not match the accepted format or is not a real date
    """
    if not ISO_DATETIME_PATTERN.match(value):
        raise ValueError(f"Not an ISO 8601 UTC datetime: {value!r}")

    fmt = "%Y-%m-%dT%H:%M:%S.%fZ" if "." in value else "%Y-%m-%dT%H:%M:%SZ"
    return datetime.strptime(value, fmt).replace(tzinfo=timezone.utc)


def parse_calendar_date(value: str) -> date:
    """Parse a YYYY-MM-DD calendar date"""
    if not CALENDAR_DATE_PATTERN.match(value):
        raise ValueError(f"Not a YYYY-MM-DD date: {value!r}")
    return date.fromisoformat(value)


# ===== Formatting Functions =====

def format_for_api(dt: Optional[datetime]) -> Optional[str]:
    """
    Format as ISO 8601 UTC format for API responses

    Format: YYYY-MM-DDTHH:MM:SSZ, or YYYY-MM-DDTHH:MM:SS.sssZ when the
    datetime carries sub-second precision (millisecond resolution)

    Args:
        dt: datetime object (UTC or naive; naive will be assumed to be UTC)

    Returns:
        ISO 8601 format string (with Z suffix), or None if input is None
    """
    if dt is None:
        return None

    utc_dt = ensure_utc(dt)
    base = utc_dt.strftime("%Y-%m-%dT%H:%M:%S")
    if utc_dt.microsecond:
        return f"{base}.{utc_dt.microsecond // 1000:03d}Z"
    return f"{base}Z"


def format_date_for_display(dt: datetime) -> str:
    """
    Format a date for human-readable text

    Returns:
        e.g., "Tuesday, September 1, 2026"
    """
    utc_dt = ensure_utc(dt)
    return f"{utc_dt:%A}, {utc_dt:%B} {utc_dt.day}, {utc_dt.year}"


def format_time_for_display(dt: datetime) -> str:
    """
    Format a time of day for human-readable text

    Returns:
        e.g., "10:00 AM"
    """
    utc_dt = ensure_utc(dt)
    period = "AM" if utc_dt.hour < 12 else "PM"
    display_hour = utc_dt.hour % 12 or 12
    return f"{display_hour:02d}:{utc_dt.minute:02d} {period}"


# ===== Comparisons =====

def is_in_future(dt: datetime, now: Optional[datetime] = None) -> bool:
    """Check whether dt is strictly after now"""
    return ensure_utc(dt) > (now or utc_now())


def is_date_in_range(
    dt: datetime,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
) -> bool:
    """
    Check whether an instant falls within an inclusive calendar-day range

    The lower bound starts at date_from 00:00:00.000 UTC, the upper bound ends
    at date_to 23:59:59.999 UTC. Either bound may be omitted.
    """
    utc_dt = ensure_utc(dt)

    if date_from is not None:
        lower = datetime.combine(date_from, time.min, tzinfo=timezone.utc)
        if utc_dt < lower:
            return False

    if date_to is not None:
        upper = datetime.combine(date_to, time(23, 59, 59, 999000), tzinfo=timezone.utc)
        if utc_dt > upper:
            return False

    return True


def seconds_since(start: datetime) -> float:
    """Elapsed seconds between start and now, used for uptime reporting"""
    elapsed = (utc_now() - ensure_utc(start)).total_seconds()
    if elapsed < 0:
        logger.warning(f"Clock went backwards by {-elapsed:.3f}s")
        return 0.0
    return elapsed
