"""Common utility functions and helpers for the userprefs package."""

from userprefs.utils.time import TimeOfDay, TimeUtils

__all__ = [
    "TimeOfDay",
    "TimeUtils",
]
