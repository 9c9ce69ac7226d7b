"""CLI subcommands registered on the root group."""

from __future__ import annotations

from .info import cli_info
from .settings import cli_get, cli_has, cli_has_connection, cli_show_section

__all__ = [
    "cli_get",
    "cli_has",
    "cli_has_connection",
    "cli_info",
    "cli_show_section",
]
