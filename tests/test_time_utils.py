from datetime import datetime, time, timedelta

import pytest

from userprefs.utils.time import TimeUtils


@pytest.mark.parametrize("value, expected", [("00:00", time(0, 0)), ("23:59", time(23, 59))])
def test_parse_hhmm(value: str, expected: time) -> None:
    assert TimeUtils.parse_hhmm(value) == expected


@pytest.mark.parametrize("value", ["24:00", "7:30", "12:60", "", "noon"])
def test_parse_hhmm_rejects(value: str) -> None:
    with pytest.raises(ValueError):
        TimeUtils.parse_hhmm(value)


def test_to_time_of_day() -> None:
    assert TimeUtils.to_time_of_day(datetime(2025, 1, 1, 6, 7, 8)) == time(6, 7, 8)
    assert TimeUtils.to_time_of_day("06:07") == time(6, 7)


@pytest.mark.parametrize(
    "label, expected",
    [
        ("UTC", timedelta(0)),
        ("UTC+00:00", timedelta(0)),
        ("UTC-12:00", timedelta(hours=-12)),
        ("UTC+12:00", timedelta(hours=12)),
        ("GMT+5:30", timedelta(hours=5, minutes=30)),
    ],
)
def test_parse_utc_offset(label: str, expected: timedelta) -> None:
    tz = TimeUtils.parse_utc_offset(label)
    assert tz is not None
    assert tz.utcoffset(None) == expected


@pytest.mark.parametrize("label", ["America/New_York", "UTC+25:00", "UTC+05:75", ""])
def test_parse_utc_offset_unrecognized(label: str) -> None:
    assert TimeUtils.parse_utc_offset(label) is None


def test_now_localized_is_aware() -> None:
    assert TimeUtils.now_localized().tzinfo is not None
