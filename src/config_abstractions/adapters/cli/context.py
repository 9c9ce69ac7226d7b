"""Per-invocation CLI state and the shared traceback switches.

The root command stores one :class:`CLIContext` on the Click context;
subcommands fetch it with :func:`get_cli_context` and read settings through
its manager. Traceback output is a process-wide ``lib_cli_exit_tools``
setting, captured and re-applied as a :class:`TracebackState`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click

if TYPE_CHECKING:
    from config_abstractions.application.ports import ConfigurationManagerPort
    from config_abstractions.composition import AppServices


class TracebackState(NamedTuple):
    """The two ``lib_cli_exit_tools`` flags governing error output."""

    traceback: bool
    force_color: bool


@dataclass(frozen=True, slots=True)
class CLIContext:
    """What every subcommand needs: the settings handle and how it was built."""

    manager: ConfigurationManagerPort
    services: AppServices
    profile: str | None = None
    traceback: bool = False


def store_cli_context(
    ctx: click.Context,
    *,
    manager: ConfigurationManagerPort,
    services: AppServices,
    profile: str | None = None,
    traceback: bool = False,
) -> CLIContext:
    """Attach a :class:`CLIContext` to ``ctx`` and return it."""
    cli_ctx = CLIContext(manager=manager, services=services, profile=profile, traceback=traceback)
    ctx.obj = cli_ctx
    return cli_ctx


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the state stored by the root command.

    Raises:
        RuntimeError: If the root command has not stored a context.
    """
    cli_ctx = ctx.find_object(CLIContext)
    if cli_ctx is None:
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return cli_ctx


def apply_traceback_preferences(enabled: bool) -> None:
    """Switch full, coloured tracebacks on or off for error reporting.

    Example:
        >>> apply_traceback_preferences(True)
        >>> snapshot_traceback_state()
        TracebackState(traceback=True, force_color=True)
        >>> apply_traceback_preferences(False)
    """
    restore_traceback_state(TracebackState(bool(enabled), bool(enabled)))


def snapshot_traceback_state() -> TracebackState:
    """Capture the current traceback switches."""
    config = lib_cli_exit_tools.config
    return TracebackState(
        traceback=bool(getattr(config, "traceback", False)),
        force_color=bool(getattr(config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Re-apply switches captured by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback = state.traceback
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
