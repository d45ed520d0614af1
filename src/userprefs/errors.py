"""Exception classes for preference editing.

This module defines a small hierarchy of exceptions raised when a caller
breaks the update contract of a settings domain, or when reference data
cannot be loaded.
"""

from __future__ import annotations

from typing import Any, Optional


class PreferenceError(Exception):
    """Base class for all preference errors."""


class UnknownSettingError(PreferenceError, KeyError):
    """Raised when an update names a field the domain does not define.

    The settings object is left untouched.
    """

    def __init__(self, domain: str, key: str) -> None:
        """Initialize the exception.

        Args:
            domain: Name of the settings domain (e.g. "general")
            key: The rejected field key
        """
        super().__init__(f"Unknown {domain} setting: {key!r}")
        self.domain: str = domain
        self.key: str = key

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class InvalidSettingValueError(PreferenceError, ValueError):
    """Raised when an update carries a value of the wrong type or shape."""

    def __init__(
        self,
        domain: str,
        key: str,
        value: Any,
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize with validation details.

        Args:
            domain: Name of the settings domain
            key: Field key being updated
            value: The rejected value
            original_error: The validation error that was caught
        """
        super().__init__(f"Invalid value for {domain} setting {key!r}: {value!r}")
        self.domain = domain
        self.key = key
        self.value = value
        self.original_error = original_error


class ReferenceDataError(PreferenceError):
    """Raised when a reference data file cannot be read or is invalid."""

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.original_error = original_error


class SessionClosedError(PreferenceError):
    """Raised when an edit is attempted on a closed editing session."""
