"""Option vocabularies shared by the CLI commands."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Final

#: ``-h`` works wherever ``--help`` does.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Names accepted by ``get --type`` and the Python type each converts to.
VALUE_TYPES: Final[dict[str, type[Any]]] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "decimal": Decimal,
}

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "VALUE_TYPES",
]
