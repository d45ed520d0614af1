"""Shared behaviour for settings domain models."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Final, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from userprefs.constants import PREFERENCES_KEY
from userprefs.errors import InvalidSettingValueError, UnknownSettingError

logger: Final = logging.getLogger(__name__)

S = TypeVar("S", bound="SettingsModel")


class SettingsModel(BaseModel):
    """Immutable settings record for one domain.

    Attributes are snake_case; snapshot keys are the camelCase aliases.
    Subclasses set ``DOMAIN`` (a label used in errors and logs) and
    ``DOMAIN_KEY`` (the sub-record under ``preferences`` holding their
    fields, or None when the fields sit directly in ``preferences``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    DOMAIN: ClassVar[str] = "settings"
    DOMAIN_KEY: ClassVar[str | None] = None

    # ---- key handling ----
    @classmethod
    def field_name(cls, key: str) -> str:
        """Resolve a snapshot key or attribute name to the attribute name.

        Raises:
            UnknownSettingError: If the key is not a field of this domain
        """
        for name, info in cls.model_fields.items():
            if key == name or key == info.alias:
                return name
        raise UnknownSettingError(cls.DOMAIN, key)

    @classmethod
    def snapshot_keys(cls) -> tuple[str, ...]:
        """Return the snapshot (camelCase) keys of every field."""
        return tuple(info.alias or name for name, info in cls.model_fields.items())

    # ---- initialization ----
    @classmethod
    def domain_record(cls, snapshot: Mapping[str, Any] | None) -> Mapping[str, Any]:
        """Locate this domain's raw record inside a full preferences snapshot."""
        if not isinstance(snapshot, Mapping):
            return {}
        record: Any = snapshot.get(PREFERENCES_KEY)
        if cls.DOMAIN_KEY is not None and isinstance(record, Mapping):
            record = record.get(cls.DOMAIN_KEY)
        return record if isinstance(record, Mapping) else {}

    @classmethod
    def from_record(cls: type[S], record: Mapping[str, Any] | None) -> S:
        """Build settings from a raw domain record, field by field.

        Values that are missing or fail validation are replaced by the
        field default, so the result is always fully populated.
        """
        accepted: dict[str, Any] = {}
        for name, info in cls.model_fields.items():
            key = info.alias or name
            if not record or key not in record:
                continue
            value = record[key]
            try:
                cls.model_validate({key: value})
            except ValidationError:
                logger.warning(
                    "Ignoring invalid %s value for %r: %r (using default)",
                    cls.DOMAIN,
                    key,
                    value,
                )
                continue
            accepted[key] = value
        return cls.model_validate(accepted)

    @classmethod
    def from_snapshot(cls: type[S], snapshot: Mapping[str, Any] | None) -> S:
        """Build settings from a full preferences snapshot.

        Args:
            snapshot: Host record of the form ``{"preferences": {...}}``;
                may be partial, empty or None

        Returns:
            Fully populated settings
        """
        return cls.from_record(cls.domain_record(snapshot))

    # ---- updates ----
    def with_value(self: S, key: str, value: Any) -> S:
        """Return a copy with one field replaced.

        Raises:
            UnknownSettingError: If *key* is not a field of this domain
            InvalidSettingValueError: If *value* fails validation
        """
        name = self.field_name(key)
        data = self.model_dump()
        data[name] = value
        try:
            return self.model_validate(data)
        except ValidationError as err:
            raise InvalidSettingValueError(self.DOMAIN, key, value, err) from err

    def to_record(self) -> dict[str, Any]:
        """Dump to a plain dict keyed by snapshot (camelCase) keys."""
        return self.model_dump(by_alias=True)
