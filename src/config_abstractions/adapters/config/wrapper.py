"""Injectable wrapper around one opened configuration document."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from config_abstractions.domain.enums import SaveMode

if TYPE_CHECKING:
    from config_abstractions.application.ports import ConfigurationPort

    from .document import ConfigurationSection, ConfigurationSectionGroup


class ConfigurationWrapper:
    """Delegate every property and method to the wrapped document.

    Adds no validation of its own; failures are whatever the document raises.

    Example:
        >>> import tempfile
        >>> from config_abstractions.adapters.config.document import TomlConfiguration
        >>> wrapper = ConfigurationWrapper(TomlConfiguration(Path(tempfile.mkdtemp()) / "app.toml"))
        >>> wrapper.has_file
        False
    """

    __slots__ = ("_configuration",)

    def __init__(self, configuration: ConfigurationPort) -> None:
        self._configuration = configuration

    @property
    def app_settings(self) -> ConfigurationSection:
        return self._configuration.app_settings

    @property
    def connection_strings(self) -> ConfigurationSection:
        return self._configuration.connection_strings

    @property
    def file_path(self) -> Path:
        return self._configuration.file_path

    @property
    def has_file(self) -> bool:
        return self._configuration.has_file

    @property
    def sections(self) -> Mapping[str, ConfigurationSection]:
        return self._configuration.sections

    @property
    def section_groups(self) -> Mapping[str, ConfigurationSectionGroup]:
        return self._configuration.section_groups

    @property
    def root_section_group(self) -> ConfigurationSectionGroup:
        return self._configuration.root_section_group

    def get_section(self, section_name: str) -> ConfigurationSection | None:
        return self._configuration.get_section(section_name)

    def get_section_group(self, group_name: str) -> ConfigurationSectionGroup | None:
        return self._configuration.get_section_group(group_name)

    def save(self, save_mode: SaveMode | str = SaveMode.MODIFIED, force_save_all: bool = False) -> None:
        self._configuration.save(save_mode, force_save_all)

    def save_as(
        self,
        filename: str | Path,
        save_mode: SaveMode | str = SaveMode.MODIFIED,
        force_save_all: bool = False,
    ) -> None:
        self._configuration.save_as(filename, save_mode, force_save_all)


__all__ = ["ConfigurationWrapper"]
