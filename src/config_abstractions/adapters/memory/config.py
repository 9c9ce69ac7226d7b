"""In-memory configuration adapters for testing.

Satisfy the same ports as the production adapters but never touch the
filesystem: layered configuration comes from a dict and opened documents
live in an :class:`InMemoryDocumentStore`.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from lib_layered_config import Config

from ..config.document import Table, TableDocument
from ..config.locations import ConfigLocations
from ..config.manager import ConfigurationManager

IN_MEMORY_LOCATIONS = ConfigLocations(
    vendor="config-abstractions",
    app="Config Abstractions",
    slug="config-abstractions",
    app_file=Path("memory") / "app.toml",
    hostname="memory-host",
)
"""Fixed locations so in-memory documents get stable, platform-neutral names."""


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


@dataclass
class InMemoryDocumentStore:
    """Files of opened documents, keyed by path, plus a log of writes.

    Attributes:
        files: Document contents keyed by path; saving writes here.
        writes: Paths in the order they were written.
    """

    files: dict[Path, Table] = field(default_factory=dict)
    writes: list[Path] = field(default_factory=list)

    def add(self, path: str | Path, data: Mapping[str, Any]) -> None:
        """Seed the store with a document."""
        self.files[Path(path)] = copy.deepcopy(dict(data))

    def open_document(self, path: Path, *, preload: bool = False) -> InMemoryConfiguration:
        """OpenDocument adapter returning a document bound to this store."""
        return InMemoryConfiguration(path, store=self, preload=preload)


class InMemoryConfiguration(TableDocument):
    """Document whose file lives in an :class:`InMemoryDocumentStore`."""

    def __init__(self, file_path: str | Path, *, store: InMemoryDocumentStore, preload: bool = False) -> None:
        self._store = store
        super().__init__(file_path, preload=preload)

    @property
    def has_file(self) -> bool:
        return self._file_path in self._store.files

    def _read(self) -> Table:
        return copy.deepcopy(self._store.files.get(self._file_path, {}))

    def _write(self, path: Path, data: Table) -> None:
        self._store.files[path] = copy.deepcopy(data)
        self._store.writes.append(path)


def create_configuration_manager_in_memory(
    data: Mapping[str, Any] | None = None,
    *,
    store: InMemoryDocumentStore | None = None,
    profile: str | None = None,
) -> ConfigurationManager:
    """Build a ConfigurationManager over ``data`` and an in-memory document store."""
    config = Config(dict(data or {}), {})
    document_store = store if store is not None else InMemoryDocumentStore()

    def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
        return config

    return ConfigurationManager(
        _get_config,
        locations=IN_MEMORY_LOCATIONS,
        open_document=document_store.open_document,
        profile=profile,
    )


__all__ = [
    "IN_MEMORY_LOCATIONS",
    "InMemoryConfiguration",
    "InMemoryDocumentStore",
    "create_configuration_manager_in_memory",
    "get_config_in_memory",
]
