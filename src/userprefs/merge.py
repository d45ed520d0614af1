"""Partial-update and change-emission helpers.

Every edit replaces one field of a domain's settings and republishes the
whole domain merged into the host's existing preferences record.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from userprefs.constants import PREFERENCES_KEY
from userprefs.settings.base import SettingsModel

S = TypeVar("S", bound=SettingsModel)


def update(state: S, key: str, value: Any) -> S:
    """Return a copy of *state* with ``state[key] = value``.

    Args:
        state: Current settings
        key: Snapshot key (``dateFormat``) or attribute name (``date_format``)
        value: New value

    Raises:
        UnknownSettingError: If *key* is not a field of the domain
        InvalidSettingValueError: If *value* fails validation
    """
    return state.with_value(key, value)


def emit(
    outer: Mapping[str, Any] | None, domain_key: str, state: Mapping[str, Any]
) -> dict[str, Any]:
    """Replace ``outer[domain_key]`` with *state*, keeping sibling keys.

    Shallow merge at the top level, full replacement at the domain level.
    Neither input is mutated.
    """
    merged = dict(outer or {})
    merged[domain_key] = dict(state)
    return merged


def merge_domain(preferences: Mapping[str, Any] | None, state: SettingsModel) -> dict[str, Any]:
    """Merge a domain's settings into a ``preferences`` record.

    Domains with a ``DOMAIN_KEY`` replace that sub-record; domains without
    one overlay their fields directly onto ``preferences``.
    """
    record = state.to_record()
    if state.DOMAIN_KEY is None:
        return {**(preferences or {}), **record}
    return emit(preferences, state.DOMAIN_KEY, record)


def build_change(snapshot: Mapping[str, Any] | None, state: SettingsModel) -> dict[str, Any]:
    """Build the partial snapshot handed to the host after an edit.

    Returns:
        ``{"preferences": <existing preferences with this domain merged in>}``
    """
    preferences: Any = (snapshot or {}).get(PREFERENCES_KEY)
    if not isinstance(preferences, Mapping):
        preferences = {}
    return emit({}, PREFERENCES_KEY, merge_domain(preferences, state))
