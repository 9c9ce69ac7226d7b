"""The ``config-abstractions`` command group.

Global options select the configuration profile and traceback verbosity.
The group callback builds the services, starts logging and hands a
ConfigurationManager to the subcommands through the Click context.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, cast

import rich_click as click

from config_abstractions import __init__conf__

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from config_abstractions.composition import AppServices


def _services_from(ctx: click.Context) -> AppServices:
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    return cast("Callable[[], AppServices]", factory)()


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    default=None,
    help="Read settings from a named configuration profile (e.g. 'staging')",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None) -> None:
    """Inspect the layered configuration of config-abstractions."""
    services = _services_from(ctx)
    try:
        config = services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--profile") from exc
    services.init_logging(config)

    store_cli_context(
        ctx,
        manager=services.create_configuration_manager(profile=profile),
        services=services,
        profile=profile,
        traceback=traceback,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # Deferred: command modules import from this package.
    from .commands import cli_get, cli_has, cli_has_connection, cli_info, cli_show_section

    for command in (cli_info, cli_get, cli_has, cli_has_connection, cli_show_section):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
