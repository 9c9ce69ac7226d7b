"""Shared helpers for CLI command modules."""

from __future__ import annotations

import contextlib
import logging
from contextlib import AbstractContextManager
from typing import NoReturn

import lib_log_rich.runtime
import rich_click as click

from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def log_scope(job_id: str, **extra: object) -> AbstractContextManager[object]:
    """Bind job context to log records while the lib_log_rich runtime is running."""
    if lib_log_rich.runtime.is_initialised():
        return lib_log_rich.runtime.bind(job_id=job_id, extra=extra)
    return contextlib.nullcontext()


def fail(exc: Exception, code: ExitCode) -> NoReturn:
    """Report ``exc`` on stderr and exit with ``code``.

    Raises:
        SystemExit: Always.
    """
    logger.error("Configuration lookup failed", extra={"error": str(exc), "error_type": type(exc).__name__})
    click.echo(f"Error: {exc}", err=True)
    raise SystemExit(code) from exc


__all__ = ["fail", "log_scope"]
