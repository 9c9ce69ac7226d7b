"""Render raw setting values as strings and coerce them to requested types.

Every setting is string-typed until coerced. Values that arrive already typed
from TOML layers are rendered back to their invariant text first, then handed
to pydantic's ``TypeAdapter`` which acts as the canonical, locale-independent
string-to-type converter.

Contents:
    * :func:`render_raw` - invariant string form of a raw configuration value.
    * :func:`convert_value` - coerce a raw string to the requested type.
    * :func:`zero_value` - the "default" value of a requested type.
"""

from __future__ import annotations

from collections.abc import Mapping, Set
from datetime import date, datetime, time
from decimal import Decimal
from functools import lru_cache
from typing import Any, Final, get_origin

import orjson
from pydantic import TypeAdapter, ValidationError

from config_abstractions.domain.errors import SettingConversionError

_JSON_CONTAINERS: Final[frozenset[type]] = frozenset({list, tuple, set, frozenset, dict})

_ZERO_VALUES: Final[dict[Any, object]] = {
    bool: False,
    int: 0,
    float: 0.0,
    str: "",
    Decimal: Decimal(0),
}


def _plain(value: object) -> object:
    # Read-only views handed out by layered configuration.
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, Set):
        return sorted(value, key=str)
    raise TypeError(f"Type is not JSON serializable: {type(value).__name__}")


def render_raw(value: object) -> str:
    """Return the invariant string form of a raw configuration value.

    Examples:
        >>> render_raw(True)
        'true'
        >>> render_raw(10)
        '10'
        >>> render_raw(" spaced ")
        ' spaced '
        >>> render_raw(["a", 1])
        '["a",1]'
        >>> render_raw(None)
        ''
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return orjson.dumps(value, default=_plain).decode("utf-8")


@lru_cache(maxsize=64)
def _adapter_for(target_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target_type)


def _is_json_container(target_type: Any) -> bool:
    origin = get_origin(target_type) or target_type
    return origin in _JSON_CONTAINERS


def convert_value(raw: str, target_type: Any = str) -> Any:
    """Coerce ``raw`` to ``target_type``.

    Scalars go through ``TypeAdapter.validate_strings``; containers (lists,
    tuples, sets, dicts) are parsed from their JSON text.

    Args:
        raw: Raw setting text.
        target_type: Requested type (``bool``, ``int``, ``Decimal``, ``Path``,
            ``list[int]``, enums, ...).

    Returns:
        The converted value.

    Raises:
        SettingConversionError: When ``raw`` is not a valid value for the type.

    Examples:
        >>> convert_value("10", int)
        10
        >>> convert_value("true", bool)
        True
        >>> convert_value("[1, 2]", list[int])
        [1, 2]
        >>> convert_value("true", int)
        Traceback (most recent call last):
        ...
        config_abstractions.domain.errors.SettingConversionError: true is not a valid value for int.
    """
    if target_type is str:
        return raw
    adapter = _adapter_for(target_type)
    try:
        if _is_json_container(target_type):
            return adapter.validate_json(raw)
        return adapter.validate_strings(raw)
    except ValidationError as exc:
        raise SettingConversionError(raw, target_type) from exc


def zero_value(target_type: Any) -> Any:
    """Return the zero/default value of ``target_type``, or None when it has none.

    Examples:
        >>> zero_value(int), zero_value(bool), zero_value(str)
        (0, False, '')
        >>> zero_value(list) is None
        True
    """
    return _ZERO_VALUES.get(target_type)


__all__ = [
    "convert_value",
    "render_raw",
    "zero_value",
]
