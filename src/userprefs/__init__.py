"""User preference configuration core.

Holds a user's general (regional/display) and notification settings,
applies partial edits, derives a live preview and the quiet-hours state,
and emits a mergeable change record after every edit.
"""

from __future__ import annotations

import logging

from userprefs.errors import (
    InvalidSettingValueError,
    PreferenceError,
    ReferenceDataError,
    SessionClosedError,
    UnknownSettingError,
)
from userprefs.merge import build_change, emit, merge_domain, update
from userprefs.preview import format_preview
from userprefs.quiet_hours import clamp_volume, quiet_hours_active
from userprefs.reference import ReferenceData
from userprefs.session import GeneralPreferences, NotificationPreferences
from userprefs.settings import GeneralSettings, NotificationSettings

__version__ = "0.1.0"

__all__ = [
    "GeneralPreferences",
    "GeneralSettings",
    "InvalidSettingValueError",
    "NotificationPreferences",
    "NotificationSettings",
    "PreferenceError",
    "ReferenceData",
    "ReferenceDataError",
    "SessionClosedError",
    "UnknownSettingError",
    "build_change",
    "clamp_volume",
    "configure_logging",
    "emit",
    "format_preview",
    "merge_domain",
    "quiet_hours_active",
    "update",
]


def configure_logging(debug: bool = False) -> None:
    """Configure root logging for hosts and scripts."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
