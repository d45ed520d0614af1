"""Locale and timezone aware preview of the current instant.

The preview reflects in-progress general settings: the timezone label is
mapped to a fixed offset, and Babel renders year, month, day, hour and
minute for the chosen language.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime, tzinfo
from typing import Final, Optional

from babel import Locale, UnknownLocaleError
from babel.dates import (
    format_datetime,
    get_datetime_format,
    match_skeleton,
    tokenize_pattern,
    untokenize_pattern,
)

from userprefs.constants import FALLBACK_LOCALE
from userprefs.settings.general import GeneralSettings
from userprefs.utils.time import TimeUtils

logger: Final = logging.getLogger(__name__)

# Fields widened to two digits when a locale pattern uses a single one
_TWO_DIGIT_FIELDS: Final = frozenset({"d", "h", "H", "K", "k"})

# Used only if a locale has no usable skeleton
_FALLBACK_PATTERNS: Final = {
    "yMMdd": "MM/dd/y",
    "yMMMdd": "dd MMM y",
    "hhmm": "hh:mm a",
    "HHmm": "HH:mm",
}


def resolve_locale(language: str) -> Locale:
    """Parse a language code, falling back to English for unknown codes."""
    try:
        return Locale.parse(language.replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError) as exc:
        logger.warning("Unknown preview locale %r (%s); using %s", language, exc, FALLBACK_LOCALE)
        return Locale.parse(FALLBACK_LOCALE)


def resolve_timezone(label: str) -> tzinfo:
    """Map a ``UTC±HH:MM`` label to a fixed-offset zone, defaulting to UTC."""
    tz = TimeUtils.parse_utc_offset(label)
    if tz is None:
        logger.warning("Unrecognized timezone label %r; using UTC", label)
        return UTC
    return tz


def date_skeleton(settings: GeneralSettings) -> str:
    """CLDR skeleton for the date part: numeric or abbreviated month."""
    return "yMMdd" if settings.numeric_month else "yMMMdd"


def time_skeleton(settings: GeneralSettings) -> str:
    """CLDR skeleton for the time part: 12-hour with marker, or 24-hour."""
    return "hhmm" if settings.hour12 else "HHmm"


def _widen(pattern: str, numeric_month: bool) -> str:
    """Pad single-width numeric fields to two digits."""
    tokens = []
    for kind, value in tokenize_pattern(pattern):
        if kind == "field":
            field, width = value
            if width == 1 and (field in _TWO_DIGIT_FIELDS or (field in "ML" and numeric_month)):
                value = (field, 2)
        tokens.append((kind, value))
    return untokenize_pattern(tokens)


def unquote_pattern(pattern: str) -> str:
    """Resolve CLDR quoting: drop quotes around literals, keep escaped ''."""
    parts = []
    for kind, value in tokenize_pattern(pattern):
        if kind == "field":
            field, width = value
            parts.append(field * width)
        else:
            parts.append(value)
    return "".join(parts)


def localized_pattern(skeleton: str, locale: Locale, numeric_month: bool = True) -> str:
    """Resolve a skeleton to a concrete pattern for *locale*."""
    skeletons = locale.datetime_skeletons
    key = skeleton if skeleton in skeletons else match_skeleton(skeleton, skeletons)
    if key is None:
        return _FALLBACK_PATTERNS[skeleton]
    return _widen(str(skeletons[key]), numeric_month)


def format_preview(settings: GeneralSettings, now: datetime | None = None) -> str:
    """Render *now* according to the given general settings.

    Args:
        settings: Current (possibly unsaved) general settings
        now: Instant to render (default: current time). Naive values are
            taken as UTC.

    Returns:
        Localized date and time string; never raises for unknown language
        or timezone values
    """
    instant = now or TimeUtils.now_utc()
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)

    locale = resolve_locale(settings.language)
    tz = resolve_timezone(settings.timezone)
    local = instant.astimezone(tz)

    date_pattern = localized_pattern(date_skeleton(settings), locale, settings.numeric_month)
    time_pattern = localized_pattern(time_skeleton(settings), locale)

    date_part = format_datetime(local, date_pattern, tzinfo=tz, locale=locale)
    time_part = format_datetime(local, time_pattern, tzinfo=tz, locale=locale)

    # Locale's own glue between date and time, e.g. "{1}, {0}"
    glue = unquote_pattern(str(get_datetime_format("medium", locale=locale)))
    return glue.replace("{1}", date_part).replace("{0}", time_part)


Clock = Callable[[], datetime]


def utc_clock() -> datetime:
    """Default clock: current timezone-aware UTC instant."""
    return TimeUtils.now_utc()


class PreviewFormatter:
    """Formats the preview string against an injectable clock."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock: Clock = clock or utc_clock

    def now(self) -> datetime:
        return self._clock()

    def format(self, settings: GeneralSettings) -> str:
        return format_preview(settings, self.now())
