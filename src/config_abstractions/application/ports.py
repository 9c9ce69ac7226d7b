"""Application ports - Protocol definitions for injectable collaborators.

Callable ports (``GetConfig``, ``OpenDocument``, ``InitLogging``) define a
``__call__`` method whose signature matches the corresponding adapter
function, so module-level functions satisfy them via structural subtyping
(PEP 544). ``ConfigurationManagerPort`` and ``ConfigurationPort`` describe
the two injectable configuration handles; production classes and in-memory
doubles both satisfy them.

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    section classes, connection entries) are imported under ``TYPE_CHECKING``
    only so that layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import SaveMode, UserLevel

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.connections import ConnectionStringSettings
    from ..adapters.config.document import ConfigurationSection, ConfigurationSectionGroup
    from ..adapters.config.locations import ConfigurationFileMap, ExeConfigurationFileMap


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class OpenDocument(Protocol):
    """Open the configuration document stored at ``path``."""

    def __call__(self, path: Path, *, preload: bool = ...) -> ConfigurationPort: ...


class ConfigurationPort(Protocol):
    """A single opened configuration document."""

    @property
    def app_settings(self) -> ConfigurationSection: ...

    @property
    def connection_strings(self) -> ConfigurationSection: ...

    @property
    def file_path(self) -> Path: ...

    @property
    def has_file(self) -> bool: ...

    @property
    def sections(self) -> Mapping[str, ConfigurationSection]: ...

    @property
    def section_groups(self) -> Mapping[str, ConfigurationSectionGroup]: ...

    @property
    def root_section_group(self) -> ConfigurationSectionGroup: ...

    def get_section(self, section_name: str) -> ConfigurationSection | None: ...

    def get_section_group(self, group_name: str) -> ConfigurationSectionGroup | None: ...

    def save(self, save_mode: SaveMode | str = ..., force_save_all: bool = ...) -> None: ...

    def save_as(self, filename: str | Path, save_mode: SaveMode | str = ..., force_save_all: bool = ...) -> None: ...


class ConfigurationManagerPort(Protocol):
    """Process-wide settings, connection strings and document opening."""

    @property
    def app_settings(self) -> Mapping[str, str]: ...

    @property
    def connection_strings(self) -> tuple[ConnectionStringSettings, ...]: ...

    def get_section(self, section_name: str) -> Mapping[str, str] | None: ...

    def get_setting(self, key: str | None, section: str | None = ..., *, as_type: Any = ...) -> Any: ...

    def get_setting_or_default(
        self,
        key: str | None,
        section: str | None = ...,
        *,
        fallback: Any = ...,
        as_type: Any = ...,
    ) -> Any: ...

    def has_setting(self, key: str | None, section: str | None = ...) -> bool: ...

    def has_connection_string(self, name: str | None) -> bool: ...

    def open_exe_configuration(self, target: UserLevel | str | Path) -> ConfigurationPort: ...

    def open_machine_configuration(self) -> ConfigurationPort: ...

    def open_mapped_exe_configuration(
        self,
        file_map: ExeConfigurationFileMap,
        user_level: UserLevel | str,
        preload: bool = ...,
    ) -> ConfigurationPort: ...

    def open_mapped_machine_configuration(self, file_map: ConfigurationFileMap) -> ConfigurationPort: ...

    def refresh_section(self, section_name: str) -> None: ...


__all__ = [
    "ConfigurationManagerPort",
    "ConfigurationPort",
    "GetConfig",
    "InitLogging",
    "OpenDocument",
]
