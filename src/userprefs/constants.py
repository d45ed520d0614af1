"""Default values and fixed tables for the preference domains."""

from __future__ import annotations

from typing import Any, Final

# Key under which every domain lives inside the host's snapshot
PREFERENCES_KEY: Final = "preferences"

# Key of the notification sub-record inside ``preferences``
NOTIFICATIONS_KEY: Final = "notifications"

DEFAULT_GENERAL: Final[dict[str, Any]] = {
    "language": "en",
    "timezone": "UTC",
    "dateFormat": "MM/DD/YYYY",
    "timeFormat": "12h",
    "country": "",
    "currency": "USD",
}

DEFAULT_NOTIFICATIONS: Final[dict[str, Any]] = {
    "email": True,
    "push": True,
    "sound": True,
    "desktop": True,
    "marketing": False,
    "security": True,
    "friends": True,
    "messages": True,
    "calls": True,
    "doNotDisturb": False,
    "quietHoursStart": "22:00",
    "quietHoursEnd": "08:00",
    "soundVolume": 50,
}

NOTIFICATION_CHANNELS: Final = ("email", "push", "sound", "desktop")
NOTIFICATION_CATEGORIES: Final = ("messages", "calls", "friends", "security", "marketing")

# Categories still delivered while quiet hours are active
QUIET_HOURS_EXEMPT: Final = frozenset({"security"})

SOUND_VOLUME_MIN: Final = 0
SOUND_VOLUME_MAX: Final = 100

# Live preview refresh cadence (seconds)
PREVIEW_TICK_SECONDS: Final = 1.0

FALLBACK_LOCALE: Final = "en"
