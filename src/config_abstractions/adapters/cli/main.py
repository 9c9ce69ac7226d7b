"""Run the CLI and turn its outcome into a process exit code.

Contents:
    * :func:`main` - Entry point used by ``python -m`` and the console script.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING, Final

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from config_abstractions import __init__conf__

from .context import apply_traceback_preferences, restore_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from config_abstractions.composition import AppServices

#: Characters of traceback printed without ``--traceback``.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
#: Characters of traceback printed with ``--traceback``.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


def _report_failure(exc: BaseException) -> int:
    """Print ``exc`` the way lib_cli_exit_tools formats it and pick its exit code."""
    verbose = snapshot_traceback_state().traceback
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    try:
        cli.main(
            args=list(sys.argv[1:] if argv is None else argv),
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        # Includes SystemExit raised by commands with an ExitCode.
        return _report_failure(exc)
    return 0


@contextmanager
def _cli_session(*, restore_traceback: bool) -> Iterator[None]:
    """Restore traceback switches and stop the logging runtime after a run."""
    previous = snapshot_traceback_state()
    try:
        yield
    finally:
        if restore_traceback:
            restore_traceback_state(previous)
        # The logging runtime belongs to the main thread.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``config-abstractions`` and return its exit code.

    Args:
        argv: Command line arguments; ``sys.argv[1:]`` when None.
        restore_traceback: Put the traceback switches back as they were
            before the run.
        services_factory: Returns the AppServices the commands use. The
            package entry points pass ``build_production``.

    Raises:
        ValueError: If ``services_factory`` is missing.
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")
    with _cli_session(restore_traceback=restore_traceback):
        return _run_cli(argv, services_factory=services_factory)


__all__ = ["TRACEBACK_SUMMARY_LIMIT", "TRACEBACK_VERBOSE_LIMIT", "main"]
