"""Composition root wiring adapters to application ports.

Applications obtain their configuration handle here at startup and pass it
to the code that needs it, instead of reaching for a global.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from ..adapters.config.loader import get_config
from ..adapters.config.manager import create_configuration_manager
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..adapters.memory.config import InMemoryDocumentStore
    from ..application.ports import ConfigurationManagerPort, GetConfig, InitLogging


class CreateConfigurationManager(Protocol):
    """Build a ConfigurationManager for the given profile."""

    def __call__(self, *, profile: str | None = ...) -> ConfigurationManagerPort: ...


# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging
    _assert_create_manager: CreateConfigurationManager = create_configuration_manager


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    create_configuration_manager: CreateConfigurationManager
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        create_configuration_manager=create_configuration_manager,
        init_logging=init_logging,
    )


def build_testing(
    config_data: Mapping[str, Any] | None = None,
    *,
    store: InMemoryDocumentStore | None = None,
) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        config_data: Layered configuration contents seen by every manager.
            Empty when None.
        store: Optional document store shared by every manager so tests can
            seed documents and assert on saves. A fresh store when None.

    Returns:
        AppServices container with in-memory adapters.
    """
    from lib_layered_config import Config

    from ..adapters.memory import (
        InMemoryDocumentStore,
        create_configuration_manager_in_memory,
        init_logging_in_memory,
    )

    config = Config(dict(config_data or {}), {})
    document_store = store if store is not None else InMemoryDocumentStore()

    def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
        return config

    def _create_manager(*, profile: str | None = None) -> ConfigurationManagerPort:
        return create_configuration_manager_in_memory(config_data, store=document_store, profile=profile)

    return AppServices(
        get_config=_get_config,
        create_configuration_manager=_create_manager,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "get_config",
    "create_configuration_manager",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "CreateConfigurationManager",
    "build_production",
    "build_testing",
]
