"""Notification channel and category toggles plus the quiet-hours window."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field, field_validator

from userprefs.constants import (
    DEFAULT_NOTIFICATIONS,
    NOTIFICATION_CATEGORIES,
    NOTIFICATION_CHANNELS,
    NOTIFICATIONS_KEY,
    QUIET_HOURS_EXEMPT,
)
from userprefs.errors import UnknownSettingError
from userprefs.quiet_hours import clamp_volume, quiet_hours_active, seconds_until_quiet_end
from userprefs.settings.base import SettingsModel
from userprefs.utils.time import TimeOfDay, TimeUtils


class NotificationSettings(SettingsModel):
    """Notification preferences stored under ``preferences.notifications``.

    Quiet hours are a 24-hour ``HH:MM`` window during which notifications
    are suppressed while ``do_not_disturb`` is on. The window may span
    midnight; equal bounds mean the whole day.
    """

    DOMAIN: ClassVar[str] = "notifications"
    DOMAIN_KEY: ClassVar[str | None] = NOTIFICATIONS_KEY

    # Channels
    email: bool = Field(DEFAULT_NOTIFICATIONS["email"], description="Email notifications")
    push: bool = Field(DEFAULT_NOTIFICATIONS["push"], description="Push notifications")
    sound: bool = Field(DEFAULT_NOTIFICATIONS["sound"], description="Play notification sounds")
    desktop: bool = Field(DEFAULT_NOTIFICATIONS["desktop"], description="Desktop banners")

    # Categories
    marketing: bool = Field(DEFAULT_NOTIFICATIONS["marketing"], description="Product news")
    security: bool = Field(DEFAULT_NOTIFICATIONS["security"], description="Security alerts")
    friends: bool = Field(DEFAULT_NOTIFICATIONS["friends"], description="Friend requests")
    messages: bool = Field(DEFAULT_NOTIFICATIONS["messages"], description="New messages")
    calls: bool = Field(DEFAULT_NOTIFICATIONS["calls"], description="Incoming calls")

    # Quiet hours
    do_not_disturb: bool = Field(
        DEFAULT_NOTIFICATIONS["doNotDisturb"],
        alias="doNotDisturb",
        description="Enable the quiet-hours window",
    )
    quiet_hours_start: str = Field(
        DEFAULT_NOTIFICATIONS["quietHoursStart"],
        alias="quietHoursStart",
        description="Start of quiet hours (HH:MM, inclusive)",
    )
    quiet_hours_end: str = Field(
        DEFAULT_NOTIFICATIONS["quietHoursEnd"],
        alias="quietHoursEnd",
        description="End of quiet hours (HH:MM, exclusive)",
    )

    sound_volume: int = Field(
        DEFAULT_NOTIFICATIONS["soundVolume"],
        alias="soundVolume",
        description="Notification sound volume (0-100)",
    )

    # ---- validators ----
    @field_validator("quiet_hours_start", "quiet_hours_end")
    @classmethod
    def validate_hhmm(cls, v: str) -> str:
        TimeUtils.parse_hhmm(v)
        return v

    @field_validator("sound_volume")
    @classmethod
    def validate_volume(cls, v: int) -> int:
        """Clamp out-of-range volumes instead of rejecting them."""
        return clamp_volume(v)

    # ---- convenience methods ----
    def is_quiet_time(self, current_time: TimeOfDay | None = None) -> bool:
        """Check if the current or specified time is within quiet hours.

        Args:
            current_time: Time to check (default: current local time)

        Returns:
            True if do-not-disturb is on and the time is within quiet hours
        """
        now = current_time or TimeUtils.now_localized()
        return quiet_hours_active(
            self.do_not_disturb, self.quiet_hours_start, self.quiet_hours_end, now
        )

    def seconds_until_quiet_end(self, current_time: TimeOfDay | None = None) -> int:
        """Return seconds until quiet hours end, or 0 if not in quiet hours."""
        now = current_time or TimeUtils.now_localized()
        return seconds_until_quiet_end(
            self.do_not_disturb, self.quiet_hours_start, self.quiet_hours_end, now
        )

    def allows(self, category: str, current_time: TimeOfDay | None = None) -> bool:
        """Decide whether a notification of *category* should be delivered.

        The category toggle must be on, and quiet hours must not be active
        unless the category is exempt (security alerts).

        Raises:
            UnknownSettingError: If *category* is not a notification category
        """
        if category not in NOTIFICATION_CATEGORIES:
            raise UnknownSettingError(self.DOMAIN, category)
        if not getattr(self, category):
            return False
        if category in QUIET_HOURS_EXEMPT:
            return True
        return not self.is_quiet_time(current_time)

    @property
    def enabled_channels(self) -> tuple[str, ...]:
        """Channels currently switched on, in display order."""
        return tuple(name for name in NOTIFICATION_CHANNELS if getattr(self, name))
