r"""Resolve configuration file paths for each configuration scope.

Paths follow the same layer layout lib_layered_config reads from:

- Linux (app): ``/etc/xdg/{slug}/config.toml``
- Linux (host): ``/etc/xdg/{slug}/hosts/{hostname}.toml``
- Linux (user): ``~/.config/{slug}/config.toml``
- macOS (app): ``/Library/Application Support/{vendor}/{app}/config.toml``
- macOS (user): ``~/Library/Application Support/{vendor}/{app}/config.toml``
- Windows (app): ``C:\ProgramData\{vendor}\{app}\config.toml``
- Windows (user): ``%APPDATA%\{vendor}\{app}\config.toml`` (roaming) or
  ``%LOCALAPPDATA%\{vendor}\{app}\config.toml`` (local)

The machine configuration is the host layer file of the current machine.
"""

from __future__ import annotations

import os
import socket
import sys
from dataclasses import dataclass
from pathlib import Path

import click

from config_abstractions.domain.enums import UserLevel

_CONFIG_FILE_NAME = "config.toml"


def exe_config_path(exe_path: str | Path) -> Path:
    """Return the configuration file belonging to an executable or script.

    Examples:
        >>> exe_config_path("/opt/tool/run").as_posix()
        '/opt/tool/run.toml'
        >>> exe_config_path("/opt/tool/settings.toml").as_posix()
        '/opt/tool/settings.toml'
    """
    path = Path(exe_path)
    if path.suffix == ".toml":
        return path
    return path.with_name(f"{path.name}.toml")


@dataclass(frozen=True, slots=True)
class ConfigurationFileMap:
    """Explicit location of a machine configuration file."""

    machine_config_filename: str | Path


@dataclass(frozen=True, slots=True)
class ExeConfigurationFileMap:
    """Explicit locations of the files an application configuration spans.

    Example:
        >>> file_map = ExeConfigurationFileMap("app.toml", roaming_user_config_filename="user.toml")
        >>> file_map.resolve(UserLevel.PER_USER_ROAMING).name
        'user.toml'
    """

    exe_config_filename: str | Path
    roaming_user_config_filename: str | Path | None = None
    local_user_config_filename: str | Path | None = None
    machine_config_filename: str | Path | None = None

    def resolve(self, user_level: UserLevel | str) -> Path:
        """Return the mapped file for ``user_level``.

        Raises:
            ValueError: When the level is unknown or the map has no file for it.
        """
        user_level = UserLevel(user_level)
        if user_level is UserLevel.NONE:
            return Path(self.exe_config_filename)
        if user_level is UserLevel.PER_USER_ROAMING:
            chosen = self.roaming_user_config_filename
        else:
            chosen = self.local_user_config_filename
        if chosen is None:
            raise ValueError(f"No configuration file mapped for user level {user_level.value!r}")
        return Path(chosen)


@dataclass(frozen=True, slots=True)
class ConfigLocations:
    """Platform-specific configuration paths for one application identity.

    Attributes:
        vendor: Vendor name used on macOS and Windows.
        app: Application name used on macOS and Windows.
        slug: Directory name used on Linux.
        app_file: Configuration shipped with the application; opened for
            ``UserLevel.NONE`` when set.
        hostname: Host name for the machine file; defaults to the current host.
    """

    vendor: str
    app: str
    slug: str
    app_file: Path | None = None
    hostname: str | None = None

    def _system_dir(self) -> Path:
        if sys.platform == "win32":
            return Path(os.environ.get("ProgramData", r"C:\ProgramData")) / self.vendor / self.app
        if sys.platform == "darwin":
            return Path("/Library/Application Support") / self.vendor / self.app
        xdg_dirs = os.environ.get("XDG_CONFIG_DIRS", "").split(os.pathsep)
        return Path(xdg_dirs[0] or "/etc/xdg") / self.slug

    def app_path(self) -> Path:
        """Shared configuration for every user of the application."""
        if self.app_file is not None:
            return Path(self.app_file)
        return self._system_dir() / _CONFIG_FILE_NAME

    def user_path(self, *, roaming: bool) -> Path:
        """Per-user configuration; ``roaming`` only changes the result on Windows."""
        app_name = self.slug if sys.platform not in ("win32", "darwin") else os.path.join(self.vendor, self.app)
        return Path(click.get_app_dir(app_name, roaming=roaming)) / _CONFIG_FILE_NAME

    def machine_path(self) -> Path:
        """Host layer configuration of this machine."""
        hostname = self.hostname or socket.gethostname()
        return self._system_dir() / "hosts" / f"{hostname}.toml"

    def exe_path(self, user_level: UserLevel | str) -> Path:
        """Return the file opened for ``user_level``."""
        user_level = UserLevel(user_level)
        if user_level is UserLevel.NONE:
            return self.app_path()
        return self.user_path(roaming=user_level is UserLevel.PER_USER_ROAMING)


__all__ = [
    "ConfigLocations",
    "ConfigurationFileMap",
    "ExeConfigurationFileMap",
    "exe_config_path",
]
