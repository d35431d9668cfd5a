"""Timestamp parsing and time window filters for listen events."""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Iterable

import pandas as pd

from tracker.models import ListenEvent

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

FRIDAY = 4
SATURDAY = 5
FRIDAY_NIGHT_START_HOUR = 19
SATURDAY_MORNING_END_HOUR = 4


def parse_timestamp(
    value: str | dt.datetime | pd.Timestamp | None,
    tz: str | dt.tzinfo | None = None,
) -> pd.Timestamp | None:
    """Parse an ISO-8601 timestamp, keeping its wall-clock fields.

    Args:
        value: ISO-8601 string (a trailing 'Z' is accepted) or datetime.
        tz: Optional zone to read the wall clock in. Aware timestamps are
            converted into it; naive timestamps are taken as already local
            to it. Without a zone the fields are used exactly as written.

    Returns:
        pd.Timestamp | None: Parsed timestamp, or None if it cannot be parsed.

    Note:
        Timestamps pandas cannot represent (before 1677 or after 2262 with
        nanosecond resolution) are treated as unparseable, so they are never
        inside a time window.
    """
    if value is None:
        return None
    try:
        ts = pd.to_datetime(value, errors="coerce")
    except (TypeError, ValueError):
        ts = pd.NaT
    if pd.isna(ts):
        logger.debug("Could not parse timestamp %r", value)
        return None
    if tz is not None and ts.tzinfo is not None:
        ts = ts.tz_convert(tz)
    return ts


def is_friday_night(
    timestamp: str | dt.datetime | pd.Timestamp | None,
    tz: str | dt.tzinfo | None = None,
) -> bool:
    """Check whether a timestamp falls on a Friday night.

    The window runs from Friday 19:00:00 through Saturday 03:59:59, both ends
    inclusive. Unparseable timestamps are outside the window.
    """
    ts = parse_timestamp(timestamp, tz=tz)
    if ts is None:
        return False
    if ts.dayofweek == FRIDAY:
        return ts.hour >= FRIDAY_NIGHT_START_HOUR
    if ts.dayofweek == SATURDAY:
        return ts.hour < SATURDAY_MORNING_END_HOUR
    return False


def filter_friday_night(
    events: Iterable[ListenEvent] | None,
    tz: str | dt.tzinfo | None = None,
) -> list[ListenEvent]:
    """Keep only the events played on a Friday night, in input order."""
    if not events:
        return []
    return [event for event in events if is_friday_night(event.timestamp, tz=tz)]
