from typing import Any

import pytest

from helpers import FIXED_INSTANT


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_INSTANT


@pytest.fixture
def profile() -> dict[str, Any]:
    return {
        "fullName": "Ada",
        "preferences": {
            "theme": "dark",
            "language": "fr",
            "timeFormat": "24h",
            "notifications": {"email": False, "quietHoursStart": "23:00"},
            "privacy": {"showOnlineStatus": True},
        },
    }
