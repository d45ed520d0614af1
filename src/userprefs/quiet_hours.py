"""Quiet-hours (do-not-disturb) evaluation and volume clamping."""

from __future__ import annotations

import logging
from datetime import time
from typing import Final

from userprefs.constants import SOUND_VOLUME_MAX, SOUND_VOLUME_MIN
from userprefs.utils.time import SECONDS_PER_DAY, TimeOfDay, TimeUtils

logger: Final = logging.getLogger(__name__)


def _as_time(value: TimeOfDay) -> time:
    return TimeUtils.to_time_of_day(value)


def in_window(start: TimeOfDay, end: TimeOfDay, current: TimeOfDay) -> bool:
    """Return True if *current* falls inside the half-open window [start, end).

    A window whose start is later than its end wraps past midnight. A
    window whose bounds are equal covers the whole day.
    """
    start_t, end_t, now_t = _as_time(start), _as_time(end), _as_time(current)

    if start_t == end_t:
        return True

    if start_t < end_t:
        # Simple case: window within same day
        return start_t <= now_t < end_t

    # Window spans midnight
    return now_t >= start_t or now_t < end_t


def quiet_hours_active(
    do_not_disturb: bool,
    start: TimeOfDay,
    end: TimeOfDay,
    current: TimeOfDay,
) -> bool:
    """Check whether notifications should currently be suppressed.

    Args:
        do_not_disturb: Master do-not-disturb switch
        start: Window start as "HH:MM", time or datetime
        end: Window end (exclusive)
        current: Time of day to test

    Returns:
        True if do-not-disturb is on and *current* is inside the window
    """
    if not do_not_disturb:
        return False
    return in_window(start, end, current)


def seconds_until_quiet_end(
    do_not_disturb: bool,
    start: TimeOfDay,
    end: TimeOfDay,
    current: TimeOfDay,
) -> int:
    """Calculate seconds until the quiet-hours window ends.

    Returns 0 when quiet hours are not active. For a whole-day window
    (start == end) the next occurrence of the boundary is used.
    """
    if not quiet_hours_active(do_not_disturb, start, end, current):
        return 0

    now_s = TimeUtils.seconds_since_midnight(_as_time(current))
    end_s = TimeUtils.seconds_since_midnight(_as_time(end))
    remaining = (end_s - now_s) % SECONDS_PER_DAY
    return remaining or SECONDS_PER_DAY


def clamp_volume(value: int) -> int:
    """Clamp a sound volume into the 0-100 range."""
    clamped = max(SOUND_VOLUME_MIN, min(SOUND_VOLUME_MAX, int(value)))
    if clamped != value:
        logger.debug("Sound volume %s clamped to %d", value, clamped)
    return clamped
