"""Regional and display preferences."""

from __future__ import annotations

from datetime import tzinfo
from typing import ClassVar, Literal

from pydantic import Field

from userprefs.constants import DEFAULT_GENERAL
from userprefs.settings.base import SettingsModel
from userprefs.utils.time import TimeUtils

DateFormat = Literal["MM/DD/YYYY", "DD/MM/YYYY"]
TimeFormat = Literal["12h", "24h"]


class GeneralSettings(SettingsModel):
    """Language, timezone, date/time format, country and currency.

    The fields live directly under ``preferences`` in the host snapshot,
    next to other domains' sub-records.
    """

    DOMAIN: ClassVar[str] = "general"
    DOMAIN_KEY: ClassVar[str | None] = None

    language: str = Field(
        DEFAULT_GENERAL["language"], min_length=1, description="Locale code (e.g. en, fr)"
    )
    timezone: str = Field(
        DEFAULT_GENERAL["timezone"],
        min_length=1,
        description="Fixed UTC offset label (e.g. UTC-05:00)",
    )
    date_format: DateFormat = Field(
        DEFAULT_GENERAL["dateFormat"], alias="dateFormat", description="Date layout"
    )
    time_format: TimeFormat = Field(
        DEFAULT_GENERAL["timeFormat"], alias="timeFormat", description="Hour cycle"
    )
    country: str = Field(DEFAULT_GENERAL["country"], description="Free-form country name")
    currency: str = Field(
        DEFAULT_GENERAL["currency"], min_length=1, description="ISO 4217 currency code"
    )

    # ---- convenience methods ----
    @property
    def numeric_month(self) -> bool:
        """Whether dates render the month as a 2-digit number.

        Only the month-first layout is numeric; day-first dates use the
        abbreviated month name.
        """
        return self.date_format.startswith("MM")

    @property
    def hour12(self) -> bool:
        """Whether times render on a 12-hour clock with an AM/PM marker."""
        return self.time_format == "12h"

    def get_timezone(self) -> tzinfo | None:
        """Get the configured offset as a fixed-offset tzinfo.

        Returns:
            tzinfo, or None if the label is not a recognized offset
        """
        return TimeUtils.parse_utc_offset(self.timezone)
