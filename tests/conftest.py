"""Shared pytest fixtures for configuration, document and CLI tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from config_abstractions.adapters.config.manager import ConfigurationManager
from config_abstractions.adapters.memory import (
    InMemoryDocumentStore,
    create_configuration_manager_in_memory,
)

if TYPE_CHECKING:
    from config_abstractions.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

#: Layered configuration shared by manager and CLI tests.
SAMPLE_SETTINGS: dict[str, Any] = {
    "app_settings": {
        "IsValue": "true",
        "Timeout": "10",
        "EmptyValue": "",
        "Size": "30",
        "Ratio": 0.25,
        "Enabled": True,
        "Retries": 3,
        "Hosts": ["alpha", "beta"],
    },
    "customSection": {
        "IntValue": "10",
        "Label": "[bold]not markup[/bold]",
    },
    "connection_strings": {
        "default": {
            "connection_string": "postgresql://db.internal/app",
            "provider_name": "psycopg",
        },
        "reporting": "sqlite:///reports.db",
    },
}


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for command output and ``result.stderr`` for
    error messages; Click 8.2+ keeps them apart.
    """
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts.

    Builds actual ``lib_layered_config.Config`` objects without filesystem I/O.
    The second argument (empty dict) represents no source provenance info.

    Example:
        def test_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"app_settings": {"Timeout": "10"}})
            assert config.get("app_settings.Timeout") == "10"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def sample_settings() -> dict[str, Any]:
    """Return the layered configuration most manager tests read from."""
    return SAMPLE_SETTINGS


@pytest.fixture
def document_store() -> InMemoryDocumentStore:
    """Provide an empty in-memory document store."""
    return InMemoryDocumentStore()


@pytest.fixture
def manager(document_store: InMemoryDocumentStore) -> ConfigurationManager:
    """Provide a ConfigurationManager over the sample settings and an in-memory store."""
    return create_configuration_manager_in_memory(SAMPLE_SETTINGS, store=document_store)


@pytest.fixture
def counting_loader(
    config_factory: Callable[[dict[str, Any]], Config],
) -> Callable[[list[dict[str, Any]]], Any]:
    """Return a factory for GetConfig doubles serving successive snapshots.

    Each call of the returned loader yields the next snapshot (the last one
    repeats). The loader records its calls and ``cache_clear`` invocations.

    Example:
        def test_reload(counting_loader) -> None:
            loader = counting_loader([{"a": {"x": 1}}, {"a": {"x": 2}}])
            loader()
            assert loader.calls == 1
    """

    class _CountingLoader:
        def __init__(self, snapshots: list[dict[str, Any]]) -> None:
            self.snapshots = [config_factory(snapshot) for snapshot in snapshots]
            self.calls = 0
            self.clears = 0
            self.profiles: list[str | None] = []

        def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
            self.profiles.append(profile)
            snapshot = self.snapshots[min(self.calls, len(self.snapshots) - 1)]
            self.calls += 1
            return snapshot

        def cache_clear(self) -> None:
            self.clears += 1

    def _factory(snapshots: list[dict[str, Any]]) -> _CountingLoader:
        return _CountingLoader(snapshots)

    return _factory


@pytest.fixture
def testing_factory(document_store: InMemoryDocumentStore) -> Callable[[], AppServices]:
    """Provide a services factory wired to the sample settings and in-memory adapters.

    Example:
        def test_get(cli_runner: CliRunner, testing_factory) -> None:
            result = cli_runner.invoke(cli, ["get", "Timeout"], obj=testing_factory)
            assert result.stdout == "10\\n"
    """
    from config_abstractions.composition import build_testing

    services = build_testing(SAMPLE_SETTINGS, store=document_store)
    return lambda: services


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from config_abstractions.composition import build_production

    return build_production
