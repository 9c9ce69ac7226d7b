"""Configuration adapter - layered settings facade and document wrappers.

Provides the injectable configuration handles built on lib_layered_config
(reading) and rtoml (explicitly opened documents).

Contents:
    * :mod:`.loader` - Layered configuration loading with caching
    * :mod:`.manager` - ConfigurationManager facade
    * :mod:`.wrapper` - ConfigurationWrapper around an opened document
    * :mod:`.document` - TOML-backed documents, sections and section groups
    * :mod:`.coercion` - String rendering and type coercion of settings
    * :mod:`.connections` - Connection entry model
    * :mod:`.locations` - Configuration file locations and file maps
"""

from __future__ import annotations

from .coercion import convert_value, render_raw, zero_value
from .connections import ConnectionStringSettings, parse_connection_strings
from .document import (
    ConfigurationSection,
    ConfigurationSectionGroup,
    TableDocument,
    TomlConfiguration,
    open_toml_document,
)
from .loader import LayeredConfigLoader, build_config_loader, get_config, get_default_config_path
from .locations import ConfigLocations, ConfigurationFileMap, ExeConfigurationFileMap, exe_config_path
from .manager import UNSET, ConfigurationManager, create_configuration_manager, default_locations
from .wrapper import ConfigurationWrapper

__all__ = [
    "UNSET",
    "ConfigLocations",
    "ConfigurationFileMap",
    "ConfigurationManager",
    "ConfigurationSection",
    "ConfigurationSectionGroup",
    "ConfigurationWrapper",
    "ConnectionStringSettings",
    "ExeConfigurationFileMap",
    "LayeredConfigLoader",
    "TableDocument",
    "TomlConfiguration",
    "build_config_loader",
    "convert_value",
    "create_configuration_manager",
    "default_locations",
    "exe_config_path",
    "get_config",
    "get_default_config_path",
    "open_toml_document",
    "parse_connection_strings",
    "render_raw",
    "zero_value",
]
