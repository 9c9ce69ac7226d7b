"""Connection entries stored in the ``connection_strings`` section.

An entry is either a table::

    [connection_strings.default]
    connection_string = "postgresql://db.internal/app"
    provider_name = "psycopg"

or a bare string (``reporting = "sqlite:///reports.db"``).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, ValidationError

from config_abstractions.domain.errors import SettingConversionError


class ConnectionStringSettings(BaseModel):
    """A named data-source connection definition.

    Example:
        >>> entry = ConnectionStringSettings(name="default", connection_string="sqlite://")
        >>> entry.provider_name is None
        True
    """

    name: str
    connection_string: str
    provider_name: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


def parse_connection_strings(raw: object) -> tuple[ConnectionStringSettings, ...]:
    """Parse a raw ``connection_strings`` section into entries, preserving order.

    Args:
        raw: Section contents as loaded from configuration, or None.

    Returns:
        Tuple of parsed entries; empty when the section is absent.

    Raises:
        SettingConversionError: When a table entry lacks ``connection_string``.

    Examples:
        >>> entries = parse_connection_strings({"a": "sqlite://", "b": {"connection_string": "x", "provider_name": "p"}})
        >>> [(e.name, e.connection_string, e.provider_name) for e in entries]
        [('a', 'sqlite://', None), ('b', 'x', 'p')]
        >>> parse_connection_strings(None)
        ()
    """
    if not isinstance(raw, Mapping):
        return ()
    entries: list[ConnectionStringSettings] = []
    for name, value in cast("Mapping[str, Any]", raw).items():
        if isinstance(value, Mapping):
            payload = {**cast("Mapping[str, Any]", value), "name": name}
            try:
                entries.append(ConnectionStringSettings.model_validate(payload))
            except ValidationError as exc:
                raise SettingConversionError(f"{name} = {dict(value)!r}", ConnectionStringSettings) from exc
        else:
            entries.append(ConnectionStringSettings(name=name, connection_string=str(value)))
    return tuple(entries)


__all__ = [
    "ConnectionStringSettings",
    "parse_connection_strings",
]
