"""Public package surface for injectable configuration access.

Routes imports through the architectural layers:
- Domain exports: error types and enumerations
- Application exports: ports callers type against
- Composition exports: wired production and testing services
- Adapter exports: the configuration facade, document wrapper and file maps
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Adapter exports
from .adapters.config import (
    UNSET,
    ConfigLocations,
    ConfigurationFileMap,
    ConfigurationManager,
    ConfigurationSection,
    ConfigurationSectionGroup,
    ConfigurationWrapper,
    ConnectionStringSettings,
    ExeConfigurationFileMap,
    TomlConfiguration,
    build_config_loader,
)

# Application exports
from .application.ports import ConfigurationManagerPort, ConfigurationPort

# Composition exports (wired adapters)
from .composition import AppServices, build_production, build_testing, create_configuration_manager, get_config

# Domain exports
from .domain import (
    ConfigurationError,
    SaveMode,
    SectionNotFoundError,
    SettingArgumentError,
    SettingConversionError,
    SettingNotFoundError,
    UserLevel,
)

__all__ = [
    "UNSET",
    "AppServices",
    "ConfigLocations",
    "ConfigurationError",
    "ConfigurationFileMap",
    "ConfigurationManager",
    "ConfigurationManagerPort",
    "ConfigurationPort",
    "ConfigurationSection",
    "ConfigurationSectionGroup",
    "ConfigurationWrapper",
    "ConnectionStringSettings",
    "ExeConfigurationFileMap",
    "SaveMode",
    "SectionNotFoundError",
    "SettingArgumentError",
    "SettingConversionError",
    "SettingNotFoundError",
    "TomlConfiguration",
    "UserLevel",
    "build_config_loader",
    "build_production",
    "build_testing",
    "create_configuration_manager",
    "get_config",
    "print_info",
]
