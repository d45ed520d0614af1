"""Static option lists offered to the user (languages, timezones, currencies).

The lists are informational: settings are never rejected for holding a
value that is not listed here. Hosts may replace the built-in tables with
a YAML file.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import ClassVar, Final, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from userprefs.errors import ReferenceDataError

# Load environment variables from .env file(s)
load_dotenv()

logger: Final = logging.getLogger(__name__)

REFERENCE_ENV_VAR: Final = "USERPREFS_REFERENCE"


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


def _offset_labels() -> list[str]:
    return [f"UTC{h:+03d}:00" for h in range(-12, 13)]


class Option(BaseModel):
    """One selectable value with its display name."""

    code: str = Field(..., min_length=1, description="Stored value")
    name: str = Field(..., min_length=1, description="Display name")
    flag: str = Field("", description="Optional emoji flag")


DEFAULT_LANGUAGES: Final = [
    Option(code="en", name="English", flag="🇺🇸"),
    Option(code="fr", name="Français", flag="🇫🇷"),
    Option(code="es", name="Español", flag="🇪🇸"),
    Option(code="de", name="Deutsch", flag="🇩🇪"),
    Option(code="it", name="Italiano", flag="🇮🇹"),
    Option(code="pt", name="Português", flag="🇵🇹"),
    Option(code="ru", name="Русский", flag="🇷🇺"),
    Option(code="ja", name="日本語", flag="🇯🇵"),
    Option(code="ko", name="한국어", flag="🇰🇷"),
    Option(code="zh", name="中文", flag="🇨🇳"),
]

DEFAULT_CURRENCIES: Final = [
    Option(code="USD", name="US Dollar", flag="🇺🇸"),
    Option(code="EUR", name="Euro", flag="🇪🇺"),
    Option(code="GBP", name="British Pound", flag="🇬🇧"),
    Option(code="JPY", name="Japanese Yen", flag="🇯🇵"),
    Option(code="CAD", name="Canadian Dollar", flag="🇨🇦"),
    Option(code="AUD", name="Australian Dollar", flag="🇦🇺"),
]


class ReferenceData(BaseModel):
    """Enumerated options for the general preferences form."""

    DEFAULT_PATHS: ClassVar[list[Path]] = [
        Path("userprefs-reference.yaml"),
        Path("~/.config/userprefs/reference.yaml").expanduser(),
    ]

    languages: list[Option] = Field(default_factory=lambda: list(DEFAULT_LANGUAGES))
    timezones: list[str] = Field(default_factory=_offset_labels)
    currencies: list[Option] = Field(default_factory=lambda: list(DEFAULT_CURRENCIES))

    # ---- convenience methods ----
    def language_codes(self) -> list[str]:
        return [opt.code for opt in self.languages]

    def currency_codes(self) -> list[str]:
        return [opt.code for opt in self.currencies]

    def is_known_language(self, code: str) -> bool:
        return code in self.language_codes()

    def is_known_timezone(self, label: str) -> bool:
        return label in self.timezones

    def is_known_currency(self, code: str) -> bool:
        return code in self.currency_codes()

    def display_name(self, code: str) -> Optional[str]:
        """Look up the display name of a language or currency code."""
        for opt in (*self.languages, *self.currencies):
            if opt.code == code:
                return opt.name
        return None

    @classmethod
    def load(cls, path: Optional[Path] = None) -> ReferenceData:
        """Load reference data from a YAML file.

        Args:
            path: Path to the YAML file (optional; falls back to the
                USERPREFS_REFERENCE variable, then the default locations,
                then the built-in tables)

        Returns:
            Validated ReferenceData object

        Raises:
            FileNotFoundError: If an explicit or env-provided file is missing
            ReferenceDataError: If the file cannot be parsed or is invalid
        """
        if path is None:
            env_path = os.environ.get(REFERENCE_ENV_VAR)
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(
                        f"Reference file from {REFERENCE_ENV_VAR} not found: {path}"
                    )
            else:
                for default_path in cls.DEFAULT_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    logger.debug("No reference file found; using built-in tables")
                    return cls()
        elif not path.exists():
            raise FileNotFoundError(f"Reference file not found: {path}")

        import yaml  # local import to avoid hard dep for callers

        try:
            data = yaml.safe_load(_interpolate_env(path.read_text(encoding="utf-8")))
        except (OSError, yaml.YAMLError) as exc:
            raise ReferenceDataError(f"Unable to read reference YAML: {exc}", exc) from exc

        try:
            return cls.model_validate(data or {})
        except ValidationError as err:
            raise ReferenceDataError(f"Invalid reference data:\n{err}", err) from err
