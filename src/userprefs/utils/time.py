# src/userprefs/utils/time.py
"""Time and date handling utilities."""

from __future__ import annotations

import re
from datetime import UTC, datetime, time, timedelta, timezone, tzinfo
from typing import Final, Union

# "HH:MM" on a 24-hour clock
HHMM_PATTERN: Final = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")

# "UTC", "GMT", "UTC+05:30", "GMT-3", "UTC+0530"
_OFFSET_LABEL: Final = re.compile(
    r"^(?:UTC|GMT)(?:(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?)?$",
    re.IGNORECASE,
)

TimeOfDay = Union[datetime, time, str]

SECONDS_PER_DAY: Final = 24 * 3600


class TimeUtils:
    """Time-related utility functions.

    Centralized utilities for working with times of day and fixed-offset
    zones:
    - "HH:MM" parsing and normalization
    - UTC-offset label parsing
    - Current time retrieval with proper timezone handling
    """

    @staticmethod
    def parse_hhmm(value: str) -> time:
        """Parse a 24-hour "HH:MM" string.

        Args:
            value: Time string such as "22:00"

        Returns:
            Naive time object

        Raises:
            ValueError: If the string is not in HH:MM form
        """
        match = HHMM_PATTERN.match(value)
        if not match:
            raise ValueError(f"Expected HH:MM time of day, got {value!r}")
        return time(int(match.group(1)), int(match.group(2)))

    @staticmethod
    def to_time_of_day(value: TimeOfDay) -> time:
        """Normalize a datetime, time or "HH:MM" string to a naive time.

        Seconds and microseconds are kept for datetime/time input so that
        boundary comparisons stay exact.
        """
        if isinstance(value, datetime):
            return value.time()
        if isinstance(value, time):
            return value.replace(tzinfo=None)
        return TimeUtils.parse_hhmm(value)

    @staticmethod
    def seconds_since_midnight(value: time) -> int:
        """Return whole seconds elapsed since 00:00."""
        return value.hour * 3600 + value.minute * 60 + value.second

    @staticmethod
    def parse_utc_offset(label: str) -> tzinfo | None:
        """Convert a "UTC±HH:MM" label to a fixed-offset tzinfo.

        Offsets are fixed; no daylight-saving rules are applied.

        Args:
            label: Offset label, e.g. "UTC-05:00" or plain "UTC"

        Returns:
            A ``datetime.timezone`` or None if the label is not recognized
        """
        match = _OFFSET_LABEL.match(label.strip())
        if not match:
            return None
        if not match.group("sign"):
            return UTC

        hours = int(match.group("hours"))
        minutes = int(match.group("minutes") or 0)
        if hours > 14 or minutes >= 60:
            return None

        offset = timedelta(hours=hours, minutes=minutes)
        if match.group("sign") == "-":
            offset = -offset
        if not offset:
            return UTC
        return timezone(offset, label.strip().upper())

    @staticmethod
    def now_localized() -> datetime:
        """Get current datetime with local timezone.

        Returns:
            Current datetime with local timezone
        """
        return datetime.now(UTC).astimezone()

    @staticmethod
    def now_utc() -> datetime:
        """Get current timezone-aware UTC datetime."""
        return datetime.now(UTC)
