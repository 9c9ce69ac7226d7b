"""Type-safe domain enums for configuration scopes and save behaviour."""

from __future__ import annotations

from enum import Enum


class UserLevel(str, Enum):
    """Scope of the configuration file opened for the current application.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        NONE: Configuration shared by every user of the application.
        PER_USER_ROAMING: Per-user configuration that roams with the profile.
        PER_USER_ROAMING_AND_LOCAL: Per-user configuration local to this machine.

    Example:
        >>> UserLevel.NONE.value
        'none'
        >>> UserLevel.PER_USER_ROAMING == "per_user_roaming"
        True
    """

    NONE = "none"
    PER_USER_ROAMING = "per_user_roaming"
    PER_USER_ROAMING_AND_LOCAL = "per_user_roaming_and_local"


class SaveMode(str, Enum):
    """Which parts of a configuration document are written on save.

    Attributes:
        MODIFIED: Write only when the document changed since it was loaded.
        MINIMAL: Same as MODIFIED; the whole file is rewritten when it changed.
        FULL: Always rewrite the file.

    Example:
        >>> SaveMode.FULL.value
        'full'
    """

    MODIFIED = "modified"
    MINIMAL = "minimal"
    FULL = "full"


__all__ = [
    "SaveMode",
    "UserLevel",
]
