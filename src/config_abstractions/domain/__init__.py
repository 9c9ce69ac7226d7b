"""Domain layer - pure types with no I/O or framework dependencies.

Contents:
    * :mod:`.enums` - Domain enumerations (UserLevel, SaveMode)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import SaveMode, UserLevel
from .errors import (
    ConfigurationError,
    SectionNotFoundError,
    SettingArgumentError,
    SettingConversionError,
    SettingNotFoundError,
)

__all__ = [
    # Enums
    "SaveMode",
    "UserLevel",
    # Errors
    "ConfigurationError",
    "SectionNotFoundError",
    "SettingArgumentError",
    "SettingConversionError",
    "SettingNotFoundError",
]
