"""Injectable facade over the process-wide layered configuration.

``ConfigurationManager`` replaces static configuration access with an
explicit handle: callers receive one from the composition root and tests
build one over an in-memory ``Config``.

Lookups read from a per-section cache filled on first use. The backing
``Config`` is only re-read after :meth:`ConfigurationManager.refresh_section`,
and then only the refreshed section is taken from the new snapshot.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, cast

from pydantic import BaseModel, ConfigDict

from config_abstractions import __init__conf__
from config_abstractions.domain.enums import UserLevel
from config_abstractions.domain.errors import SectionNotFoundError, SettingNotFoundError

from .coercion import convert_value, render_raw, zero_value
from .connections import ConnectionStringSettings, parse_connection_strings
from .document import APP_SETTINGS_SECTION, CONNECTION_STRINGS_SECTION, open_toml_document
from .loader import get_config, get_default_config_path
from .locations import ConfigLocations, ConfigurationFileMap, ExeConfigurationFileMap, exe_config_path
from .wrapper import ConfigurationWrapper

if TYPE_CHECKING:
    from lib_layered_config import Config

    from config_abstractions.application.ports import GetConfig, OpenDocument

logger = logging.getLogger(__name__)

MANAGER_SECTION: Final[str] = "configuration_manager"

RawSection = Mapping[str, Any]


class _Unset:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<unset>"


UNSET: Final = _Unset()
"""Marker for "no fallback supplied" in :meth:`ConfigurationManager.get_setting_or_default`."""

_EMPTY_SECTION: Final[RawSection] = MappingProxyType({})


class ManagerSettingsModel(BaseModel):
    """Pydantic model for the [configuration_manager] section.

    Example:
        >>> ManagerSettingsModel().app_settings_section
        'app_settings'
        >>> ManagerSettingsModel(connection_strings_section="databases").connection_strings_section
        'databases'
    """

    app_settings_section: str = APP_SETTINGS_SECTION
    connection_strings_section: str = CONNECTION_STRINGS_SECTION

    model_config = ConfigDict(extra="ignore")


def _is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


class ConfigurationManager:
    """Settings, connection strings and configuration documents of an application.

    Args:
        get_config: Loader returning the layered ``Config``. When it exposes
            ``cache_clear`` it is called before re-reading after a refresh.
        locations: Where application, user and machine files live.
        open_document: Opens a document for the ``open_*`` operations.
        profile: Configuration profile passed to ``get_config``.
        start_dir: Directory seeding .env discovery, passed to ``get_config``.

    Example:
        >>> from lib_layered_config import Config
        >>> data = {"app_settings": {"Timeout": "10", "IsValue": True}}
        >>> manager = ConfigurationManager(
        ...     lambda **_: Config(data, {}),
        ...     locations=ConfigLocations(vendor="Acme", app="Tool", slug="acme-tool"),
        ... )
        >>> manager.get_setting("Timeout", as_type=int)
        10
        >>> manager.get_setting("IsValue", as_type=bool)
        True
        >>> manager.get_setting_or_default("Missing", fallback=22)
        22
    """

    def __init__(
        self,
        get_config: GetConfig,
        *,
        locations: ConfigLocations,
        open_document: OpenDocument = open_toml_document,
        profile: str | None = None,
        start_dir: str | None = None,
    ) -> None:
        self._get_config = get_config
        self._locations = locations
        self._open_document = open_document
        self._profile = profile
        self._start_dir = start_dir
        self._config: Config | None = None
        self._stale = False
        self._sections: dict[str, RawSection | None] = {}

    # ------------------------------------------------------------------ store access

    def _current_config(self) -> Config:
        if self._config is None or self._stale:
            if self._stale:
                cache_clear = getattr(self._get_config, "cache_clear", None)
                if callable(cache_clear):
                    cache_clear()
            self._config = self._get_config(profile=self._profile, start_dir=self._start_dir)
            self._stale = False
        return self._config

    def _raw_section(self, section_name: str) -> RawSection | None:
        if section_name in self._sections:
            return self._sections[section_name]
        raw = self._current_config().get(section_name, default=None)
        section = cast(RawSection, raw) if isinstance(raw, Mapping) else None
        self._sections[section_name] = section
        logger.debug("Cached configuration section", extra={"section": section_name, "found": section is not None})
        return section

    def _manager_settings(self) -> ManagerSettingsModel:
        return ManagerSettingsModel.model_validate(dict(self._raw_section(MANAGER_SECTION) or {}))

    def _app_settings_section(self) -> RawSection:
        return self._raw_section(self._manager_settings().app_settings_section) or _EMPTY_SECTION

    def _required_section(self, section_name: str) -> RawSection:
        section = self._raw_section(section_name)
        if section is None:
            raise SectionNotFoundError(section_name)
        return section

    @staticmethod
    def _raw_value(key: str | None, section: RawSection) -> str | None:
        if _is_blank(key) or key not in section:
            return None
        return render_raw(section[key])

    # ------------------------------------------------------------------ properties

    @property
    def app_settings(self) -> Mapping[str, str]:
        """The default settings section rendered as strings."""
        section = self._app_settings_section()
        return MappingProxyType({key: render_raw(value) for key, value in section.items()})

    @property
    def connection_strings(self) -> tuple[ConnectionStringSettings, ...]:
        """All configured connection entries in declaration order.

        Raises:
            SettingConversionError: When a table entry lacks ``connection_string``.
        """
        return parse_connection_strings(self._raw_section(self._manager_settings().connection_strings_section))

    # ------------------------------------------------------------------ lookups

    def get_section(self, section_name: str) -> Mapping[str, str] | None:
        """Return the named section rendered as strings, or None when absent."""
        section = self._raw_section(section_name)
        if section is None:
            return None
        return MappingProxyType({key: render_raw(value) for key, value in section.items()})

    def get_setting(self, key: str | None, section: str | None = None, *, as_type: Any = str) -> Any:
        """Return the value of ``key`` coerced to ``as_type``.

        Args:
            key: Setting name.
            section: Custom section to read; the default settings section when None.
            as_type: Requested type; ``str`` returns the raw text.

        Raises:
            SectionNotFoundError: When ``section`` does not exist.
            SettingNotFoundError: When ``key`` is blank or absent, or its value is blank.
            SettingConversionError: When the value cannot be converted to ``as_type``.
        """
        table = self._app_settings_section() if section is None else self._required_section(section)
        raw = self._raw_value(key, table)
        if _is_blank(raw):
            raise SettingNotFoundError(key)
        return convert_value(cast(str, raw), as_type)

    def get_setting_or_default(
        self,
        key: str | None,
        section: str | None = None,
        *,
        fallback: Any = UNSET,
        as_type: Any = None,
    ) -> Any:
        """Return the value of ``key``, or a fallback when it is not available.

        A blank or absent key, a blank value and a missing ``section`` all
        produce the fallback. Without ``fallback`` the zero value of the
        requested type is returned. When ``as_type`` is omitted it is taken
        from the fallback's type, else ``str``.

        Raises:
            SettingConversionError: When a present value cannot be converted.
        """
        if as_type is None:
            as_type = type(fallback) if fallback is not UNSET and fallback is not None else str
        default = zero_value(as_type) if fallback is UNSET else fallback

        table = self._app_settings_section() if section is None else self._raw_section(section)
        if table is None:
            return default
        raw = self._raw_value(key, table)
        if _is_blank(raw):
            return default
        return convert_value(cast(str, raw), as_type)

    def has_setting(self, key: str | None, section: str | None = None) -> bool:
        """Return whether ``key`` exists in the default or the named section."""
        table = self._app_settings_section() if section is None else self._raw_section(section)
        return table is not None and key is not None and key in table

    def has_connection_string(self, name: str | None) -> bool:
        """Return whether a configured connection entry is named exactly ``name``.

        Raises:
            SettingConversionError: When the connection section holds a malformed entry.
        """
        if _is_blank(name):
            return False
        return any(entry.name == name for entry in self.connection_strings)

    # ------------------------------------------------------------------ documents

    def _open(self, path: Path, *, preload: bool = False) -> ConfigurationWrapper:
        logger.debug("Opening configuration document", extra={"path": str(path), "preload": preload})
        return ConfigurationWrapper(self._open_document(path, preload=preload))

    def open_exe_configuration(self, target: UserLevel | str | Path) -> ConfigurationWrapper:
        """Open the application configuration for a user level or an executable path."""
        if isinstance(target, UserLevel):
            return self._open(self._locations.exe_path(target))
        return self._open(exe_config_path(target))

    def open_machine_configuration(self) -> ConfigurationWrapper:
        """Open the configuration file of this machine."""
        return self._open(self._locations.machine_path())

    def open_mapped_exe_configuration(
        self,
        file_map: ExeConfigurationFileMap,
        user_level: UserLevel | str,
        preload: bool = False,
    ) -> ConfigurationWrapper:
        """Open the file ``file_map`` names for ``user_level``.

        Raises:
            ValueError: When ``user_level`` is unknown or the map has no file for it.
        """
        return self._open(file_map.resolve(user_level), preload=preload)

    def open_mapped_machine_configuration(self, file_map: ConfigurationFileMap) -> ConfigurationWrapper:
        """Open the machine file named by ``file_map``."""
        return self._open(Path(file_map.machine_config_filename))

    def refresh_section(self, section_name: str) -> None:
        """Drop the cached copy of ``section_name``; the next read re-fetches it."""
        self._sections.pop(section_name, None)
        self._stale = True
        logger.debug("Refreshed configuration section", extra={"section": section_name})


def default_locations() -> ConfigLocations:
    """Return the file locations of this package's own configuration."""
    return ConfigLocations(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        app_file=get_default_config_path(),
    )


def create_configuration_manager(*, profile: str | None = None) -> ConfigurationManager:
    """Build a manager over this package's layered configuration and TOML documents."""
    return ConfigurationManager(get_config, locations=default_locations(), profile=profile)


__all__ = [
    "MANAGER_SECTION",
    "UNSET",
    "ConfigurationManager",
    "ManagerSettingsModel",
    "create_configuration_manager",
    "default_locations",
]
