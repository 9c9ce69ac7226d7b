"""Application layer - port definitions.

Contains the Protocol classes that define the interfaces for adapter
implementations.

Contents:
    * :mod:`.ports` - Protocol definitions for configuration access
"""

from __future__ import annotations

from .ports import (
    ConfigurationManagerPort,
    ConfigurationPort,
    GetConfig,
    InitLogging,
    OpenDocument,
)

__all__ = [
    "ConfigurationManagerPort",
    "ConfigurationPort",
    "GetConfig",
    "InitLogging",
    "OpenDocument",
]
