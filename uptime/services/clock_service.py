"""Clock reading: one local timestamp per run, fixed width."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pendulum

if TYPE_CHECKING:
    from datetime import datetime

# Local time with numeric UTC offset: YYYY-MM-DDTHH:MM:SS±HHMM
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
TIMESTAMP_WIDTH = 24


def now_local() -> datetime:
    """Return the current time in the machine's local timezone."""
    return pendulum.now(pendulum.local_timezone())


def format_timestamp(dt: datetime) -> str:
    """Format a timezone-aware datetime for the uptime logs.

    Output: 2026-10-17T09:41:07+0200

    Naive datetimes are assumed to be UTC so the offset field is never
    empty and the width stays constant.
    """
    if dt.tzinfo is None:
        dt = pendulum.instance(dt, tz="UTC")
    return dt.strftime(TIMESTAMP_FORMAT)


def current_timestamp() -> str:
    """Read the clock once and return the formatted timestamp."""
    return format_timestamp(now_local())
