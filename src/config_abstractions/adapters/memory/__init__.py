"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that operate entirely
in memory -- no filesystem, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration and document store
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    IN_MEMORY_LOCATIONS,
    InMemoryConfiguration,
    InMemoryDocumentStore,
    create_configuration_manager_in_memory,
    get_config_in_memory,
)
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from config_abstractions.application.ports import (
        ConfigurationManagerPort,
        ConfigurationPort,
        GetConfig,
        InitLogging,
        OpenDocument,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_open_document: OpenDocument = InMemoryDocumentStore().open_document
    _assert_document: ConfigurationPort = InMemoryConfiguration("x.toml", store=InMemoryDocumentStore())
    _assert_manager: ConfigurationManagerPort = create_configuration_manager_in_memory()

__all__ = [
    "IN_MEMORY_LOCATIONS",
    "InMemoryConfiguration",
    "InMemoryDocumentStore",
    "create_configuration_manager_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
