"""Static package metadata surfaced to CLI commands and documentation.

The values mirror ``pyproject.toml`` and the layered-configuration identity
used to locate configuration files on every platform.
"""

from __future__ import annotations

import rich_click as click

#: Distribution name declared in pyproject.toml.
name = "config_abstractions"
#: Human-readable summary shown in CLI help output.
title = "Dependency-injectable access to layered application configuration"
#: Current release version pulled from pyproject.toml.
version = "1.0.0"
#: Repository homepage presented to users.
homepage = "https://github.com/config-abstractions/config_abstractions"
#: Author attribution surfaced in CLI output.
author = "config_abstractions contributors"
#: Console-script name published by the package.
shell_command = "config-abstractions"

#: Vendor, application and slug identifiers passed to lib_layered_config.
LAYEREDCONF_VENDOR = "config-abstractions"
LAYEREDCONF_APP = "Config Abstractions"
LAYEREDCONF_SLUG = "config-abstractions"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for config_abstractions:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    click.echo("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
