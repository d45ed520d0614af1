"""Settings domain schemas.

This package provides:
- GeneralSettings: regional and display preferences
- NotificationSettings: notification toggles and the quiet-hours window
"""

from userprefs.settings.base import SettingsModel
from userprefs.settings.general import GeneralSettings
from userprefs.settings.notifications import NotificationSettings

__all__ = [
    "GeneralSettings",
    "NotificationSettings",
    "SettingsModel",
]
