"""Setting lookup commands: get, has, has-connection, show-section.

Each command is a thin client of :class:`ConfigurationManager`; domain
errors are reported on stderr and mapped to exit codes.
"""

from __future__ import annotations

import logging

import rich_click as click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from config_abstractions.adapters.config.coercion import convert_value, render_raw
from config_abstractions.domain.errors import SectionNotFoundError, SettingArgumentError, SettingConversionError

from ..constants import CLICK_CONTEXT_SETTINGS, VALUE_TYPES
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import fail, log_scope

logger = logging.getLogger(__name__)


def _echo_flag(flag: bool) -> None:
    click.echo("true" if flag else "false")


@click.command("get", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("key")
@click.option("--section", default=None, help="Custom section to read instead of the app settings")
@click.option(
    "--type",
    "type_name",
    type=click.Choice(list(VALUE_TYPES)),
    default="str",
    show_default=True,
    help="Type the value is converted to",
)
@click.option("--default", "default", default=None, help="Returned when the setting is missing or empty")
@click.pass_context
def cli_get(ctx: click.Context, key: str, section: str | None, type_name: str, default: str | None) -> None:
    """Print the value of KEY converted to the requested type.

    \b
    Without --default a missing key or section is an error (exit 22).
    A value that cannot be converted exits with 78.
    """
    cli_ctx = get_cli_context(ctx)
    as_type = VALUE_TYPES[type_name]

    with log_scope("cli-get", command="get", key=key, section=section, type=type_name):
        logger.info("Reading setting", extra={"key": key, "section": section})
        try:
            if default is None:
                value = cli_ctx.manager.get_setting(key, section, as_type=as_type)
            else:
                fallback = convert_value(default, as_type)
                value = cli_ctx.manager.get_setting_or_default(key, section, fallback=fallback, as_type=as_type)
        except SettingArgumentError as exc:
            fail(exc, ExitCode.INVALID_ARGUMENT)
        except SettingConversionError as exc:
            fail(exc, ExitCode.CONFIG_ERROR)

    click.echo(render_raw(value))


@click.command("has", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("key")
@click.option("--section", default=None, help="Custom section to look in instead of the app settings")
@click.pass_context
def cli_has(ctx: click.Context, key: str, section: str | None) -> None:
    """Print ``true`` when KEY exists, ``false`` otherwise."""
    cli_ctx = get_cli_context(ctx)
    with log_scope("cli-has", command="has", key=key, section=section):
        _echo_flag(cli_ctx.manager.has_setting(key, section))


@click.command("has-connection", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@click.pass_context
def cli_has_connection(ctx: click.Context, name: str) -> None:
    """Print ``true`` when a connection entry is named NAME.

    \b
    A malformed connection entry exits with 78.
    """
    cli_ctx = get_cli_context(ctx)
    with log_scope("cli-has-connection", command="has-connection", name=name):
        try:
            found = cli_ctx.manager.has_connection_string(name)
        except SettingConversionError as exc:
            fail(exc, ExitCode.CONFIG_ERROR)
    _echo_flag(found)


@click.command("show-section", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@click.pass_context
def cli_show_section(ctx: click.Context, name: str) -> None:
    """Render the keys and values of section NAME as a table."""
    cli_ctx = get_cli_context(ctx)
    with log_scope("cli-show-section", command="show-section", section=name):
        section = cli_ctx.manager.get_section(name)
        if section is None:
            fail(SectionNotFoundError(name), ExitCode.INVALID_ARGUMENT)

        table = Table(title=Text(name), show_header=True, header_style="bold")
        table.add_column("Key", style="cyan", no_wrap=True)
        table.add_column("Value", overflow="fold")
        for key, value in section.items():
            table.add_row(Text(key), Text(value))
        Console().print(table)


__all__ = ["cli_get", "cli_has", "cli_has_connection", "cli_show_section"]
