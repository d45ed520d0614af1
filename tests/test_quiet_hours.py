from datetime import datetime, time

import pytest

from userprefs.quiet_hours import (
    clamp_volume,
    in_window,
    quiet_hours_active,
    seconds_until_quiet_end,
)


# ── wrapping‑midnight window (22:00→08:00) ─────────────────────────────────
def test_quiet_hours_wrap_midnight():
    assert quiet_hours_active(True, "22:00", "08:00", "23:30") is True
    assert quiet_hours_active(True, "22:00", "08:00", "03:00") is True
    assert quiet_hours_active(True, "22:00", "08:00", "09:00") is False
    assert quiet_hours_active(True, "22:00", "08:00", "08:00") is False  # end exclusive
    assert quiet_hours_active(True, "22:00", "08:00", "22:00") is True  # start inclusive


# ── same‑day window (09:00→17:00) ──────────────────────────────────────────
def test_quiet_hours_same_day():
    assert quiet_hours_active(True, "09:00", "17:00", "12:00") is True
    assert quiet_hours_active(True, "09:00", "17:00", "08:59") is False
    assert quiet_hours_active(True, "09:00", "17:00", "17:00") is False


@pytest.mark.parametrize("now", ["00:00", "10:00", "12:00", "23:59"])
def test_do_not_disturb_off_is_never_quiet(now: str) -> None:
    assert quiet_hours_active(False, "22:00", "08:00", now) is False
    assert quiet_hours_active(False, "10:00", "10:00", now) is False


@pytest.mark.parametrize("now", ["03:00", "10:00", "09:59", "23:59"])
def test_equal_bounds_cover_whole_day(now: str) -> None:
    assert quiet_hours_active(True, "10:00", "10:00", now) is True


def test_accepts_datetime_and_time() -> None:
    assert in_window("22:00", "08:00", datetime(2025, 1, 1, 23, 30)) is True
    assert in_window(time(22, 0), time(8, 0), time(7, 59, 59)) is True
    assert in_window("09:00", "17:00", time(16, 59, 59)) is True


def test_rejects_malformed_time() -> None:
    with pytest.raises(ValueError):
        quiet_hours_active(True, "25:00", "08:00", "12:00")


@pytest.mark.parametrize(
    ("now", "start", "end", "expected"),
    [
        ("02:00", "01:00", "05:00", 3 * 3600),  # same‑day span
        ("23:00", "22:00", "06:00", 7 * 3600),  # wrap: 23→next 06
        ("07:00", "22:00", "06:00", 0),  # outside window
        ("03:00", "10:00", "10:00", 7 * 3600),  # whole day: next boundary
        ("10:00", "10:00", "10:00", 24 * 3600),
    ],
)
def test_seconds_until_quiet_end(now: str, start: str, end: str, expected: int) -> None:
    assert seconds_until_quiet_end(True, start, end, now) == expected


def test_seconds_until_quiet_end_disabled() -> None:
    assert seconds_until_quiet_end(False, "22:00", "06:00", "23:00") == 0


@pytest.mark.parametrize("value, expected", [(-5, 0), (150, 100), (42, 42), (0, 0), (100, 100)])
def test_clamp_volume(value: int, expected: int) -> None:
    assert clamp_volume(value) == expected
