"""CLI entry point and execution wrapper.

Contents:
    * :func:`main` - Primary entry point for console scripts and ``python -m``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from cincinnati import __init__conf__

from .context import preserved_traceback_flags, set_traceback
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from cincinnati.composition import AppServices

#: Characters of exception output printed without and with ``--traceback``.
TRACEBACK_SUMMARY_LIMIT = 500
TRACEBACK_VERBOSE_LIMIT = 10_000


def _exit_code_of(exc: SystemExit) -> int:
    """Translate a ``SystemExit`` payload into an integer exit code."""
    if exc.code is None:
        return ExitCode.SUCCESS
    if isinstance(exc.code, int):
        return exc.code
    return ExitCode.GENERAL_ERROR


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    """Invoke the root group and turn every outcome into an exit code.

    ``lib_cli_exit_tools.run_cli`` cannot pass ``obj`` to Click, so its
    behaviour is reproduced here with the services factory attached.
    """
    from .root import cli

    args = list(argv) if argv is not None else sys.argv[1:]

    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
        return ExitCode.SUCCESS
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        return _exit_code_of(exc)
    except BaseException as exc:  # noqa: BLE001 - CLI boundary: every failure becomes an exit code
        tracebacks_enabled = bool(lib_cli_exit_tools.config.traceback)
        set_traceback(tracebacks_enabled)
        length_limit = TRACEBACK_VERBOSE_LIMIT if tracebacks_enabled else TRACEBACK_SUMMARY_LIMIT
        lib_cli_exit_tools.print_exception_message(trace_back=tracebacks_enabled, length_limit=length_limit)
        return lib_cli_exit_tools.get_system_exit_code(exc)


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Execute the CLI with error handling and return the exit code.

    Args:
        argv: CLI arguments; ``sys.argv[1:]`` when ``None``.
        restore_traceback: Restore the previous traceback flags afterwards.
        services_factory: Returns the AppServices to run with. Callers
            outside the adapters layer pass ``build_production``.

    Returns:
        Exit code of the run.

    Raises:
        ValueError: If *services_factory* is missing.

    Example:
        >>> from cincinnati.composition import build_testing
        >>> main(["greet", "David"], services_factory=build_testing)  # doctest: +SKIP
        Hello, David
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    try:
        with preserved_traceback_flags(restore=restore_traceback):
            return _run_cli(argv, services_factory=services_factory)
    finally:
        # Worker threads must not tear down the process-wide logging runtime.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
