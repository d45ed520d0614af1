"""Editing sessions for the general and notification preference domains.

A session is built once from the host's preferences snapshot, applies
single-field edits, and after every edit hands the host a partial
snapshot ``{"preferences": {...}}`` to persist. The two sessions share no
state; each contributes its own keys through the same callback contract.

Examples:
    def save(change):
        store.merge(change)

    with GeneralPreferences(profile, save) as general:
        general.start()  # live preview, needs a running asyncio loop
        general.update("timeFormat", "24h")
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, ClassVar, Final, Generic, Optional, TypeVar

from userprefs.constants import PREVIEW_TICK_SECONDS
from userprefs.errors import SessionClosedError
from userprefs.merge import build_change, update
from userprefs.preview import Clock, PreviewFormatter
from userprefs.settings import GeneralSettings, NotificationSettings, SettingsModel
from userprefs.ticker import Ticker, TimerLoop
from userprefs.utils.time import TimeOfDay

logger: Final = logging.getLogger(__name__)

S = TypeVar("S", bound=SettingsModel)

ChangeCallback = Callable[[dict[str, Any]], None]
PreviewCallback = Callable[[str], None]


class PreferencesSession(Generic[S]):
    """Owns one domain's settings for the lifetime of an editing session."""

    settings_class: ClassVar[type[SettingsModel]] = SettingsModel

    def __init__(self, snapshot: Optional[Mapping[str, Any]], on_change: ChangeCallback) -> None:
        """Initialize from a host snapshot.

        Args:
            snapshot: Host preferences record (read-only); may be partial
            on_change: Called with the partial snapshot after every edit
        """
        self._snapshot: Mapping[str, Any] = snapshot or {}
        self._on_change = on_change
        settings = self.settings_class.from_snapshot(self._snapshot)
        self._settings: S = settings  # type: ignore[assignment]
        self._closed = False

    @property
    def settings(self) -> S:
        return self._settings

    @property
    def closed(self) -> bool:
        return self._closed

    def update(self, key: str, value: Any) -> S:
        """Apply one field edit and publish the whole domain.

        Raises:
            SessionClosedError: If the session has been closed
            UnknownSettingError: If *key* is not a field of the domain
            InvalidSettingValueError: If *value* fails validation
        """
        if self._closed:
            raise SessionClosedError(f"{self.settings_class.DOMAIN} session is closed")

        self._settings = update(self._settings, key, value)
        self._on_settings_changed()
        self.publish()
        return self._settings

    def update_many(self, changes: Mapping[str, Any]) -> S:
        """Apply several edits in order, publishing after each one."""
        for key, value in changes.items():
            self.update(key, value)
        return self._settings

    def snapshot(self) -> dict[str, Any]:
        """Return the partial snapshot for the current settings."""
        return build_change(self._snapshot, self._settings)

    def publish(self) -> dict[str, Any]:
        """Send the current settings to the host callback."""
        change = self.snapshot()
        logger.debug("Publishing %s preferences", self.settings_class.DOMAIN)
        self._on_change(change)
        return change

    def close(self) -> None:
        self._closed = True

    def _on_settings_changed(self) -> None:
        """Hook for derived values that depend on settings."""

    def __enter__(self) -> PreferencesSession[S]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class GeneralPreferences(PreferencesSession[GeneralSettings]):
    """Regional/display settings with a live, once-a-second preview."""

    settings_class: ClassVar[type[SettingsModel]] = GeneralSettings

    def __init__(
        self,
        snapshot: Optional[Mapping[str, Any]],
        on_change: ChangeCallback,
        on_preview: Optional[PreviewCallback] = None,
        clock: Optional[Clock] = None,
        interval: float = PREVIEW_TICK_SECONDS,
    ) -> None:
        """Initialize the session.

        Args:
            snapshot: Host preferences record
            on_change: Receives the partial snapshot after every edit
            on_preview: Receives each recomputed preview string
            clock: Current-instant source (default: system UTC clock)
            interval: Preview refresh cadence in seconds
        """
        super().__init__(snapshot, on_change)
        self._formatter = PreviewFormatter(clock)
        self._on_preview = on_preview
        self._ticker = Ticker(self.refresh_preview, interval)
        self._preview = self._formatter.format(self._settings)

    @property
    def preview(self) -> str:
        return self._preview

    @property
    def ticking(self) -> bool:
        return self._ticker.running

    def refresh_preview(self) -> str:
        """Resample the clock and recompute the preview."""
        self._preview = self._formatter.format(self._settings)
        if self._on_preview is not None:
            self._on_preview(self._preview)
        return self._preview

    def start(self, loop: Optional[TimerLoop] = None) -> None:
        """Start refreshing the preview every tick on an asyncio loop."""
        if self._closed:
            raise SessionClosedError("general session is closed")
        self._ticker.start(loop)

    def stop(self) -> None:
        self._ticker.stop()

    def close(self) -> None:
        self._ticker.stop()
        super().close()

    def _on_settings_changed(self) -> None:
        self.refresh_preview()

    def __enter__(self) -> GeneralPreferences:
        return self


class NotificationPreferences(PreferencesSession[NotificationSettings]):
    """Notification toggles and the quiet-hours window."""

    settings_class: ClassVar[type[SettingsModel]] = NotificationSettings

    def is_quiet_time(self, current_time: TimeOfDay | None = None) -> bool:
        """Whether notifications are suppressed right now (or at *current_time*)."""
        return self._settings.is_quiet_time(current_time)

    def seconds_until_quiet_end(self, current_time: TimeOfDay | None = None) -> int:
        return self._settings.seconds_until_quiet_end(current_time)

    def allows(self, category: str, current_time: TimeOfDay | None = None) -> bool:
        return self._settings.allows(category, current_time)

    def __enter__(self) -> NotificationPreferences:
        return self
