"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Base class for every configuration access failure.

    Example:
        >>> from config_abstractions.domain.errors import ConfigurationError
        >>> str(ConfigurationError("configuration unavailable"))
        'configuration unavailable'
    """


class SettingArgumentError(ConfigurationError, ValueError):
    """Invalid argument passed to a setting lookup.

    Covers blank or unknown keys and unknown sections. Inherits from
    ValueError so callers can treat it like any other bad argument.
    """


class SettingNotFoundError(SettingArgumentError):
    """Key is blank, absent, or holds a blank value.

    Example:
        >>> err = SettingNotFoundError("Timeout")
        >>> str(err)
        'Specified key (Timeout) not found or empty.'
        >>> str(SettingNotFoundError(None))
        'Specified key () not found or empty.'
    """

    def __init__(self, key: str | None) -> None:
        self.key = key
        super().__init__(f"Specified key ({'' if key is None else key}) not found or empty.")


class SectionNotFoundError(SettingArgumentError):
    """Named section does not exist in the loaded configuration.

    Example:
        >>> str(SectionNotFoundError("unknown"))
        'Section unknown is not found in configuration'
    """

    def __init__(self, section: str | None) -> None:
        self.section = section
        super().__init__(f"Section {section} is not found in configuration")


class SettingConversionError(ConfigurationError, ValueError):
    """Raw setting text cannot be converted to the requested type.

    Example:
        >>> err = SettingConversionError("true", int)
        >>> str(err)
        'true is not a valid value for int.'
        >>> err.target_type is int
        True
    """

    def __init__(self, value: str, target_type: object) -> None:
        self.value = value
        self.target_type = target_type
        type_name = getattr(target_type, "__name__", None) or str(target_type)
        super().__init__(f"{value} is not a valid value for {type_name}.")


__all__ = [
    "ConfigurationError",
    "SectionNotFoundError",
    "SettingArgumentError",
    "SettingConversionError",
    "SettingNotFoundError",
]
