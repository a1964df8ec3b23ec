"""State shared between the root group and its subcommands.

Contents:
    * :data:`CLICK_CONTEXT_SETTINGS` - ``-h``/``--help`` for every command.
    * :class:`CLIContext` - what the root group hands to subcommands.
    * :func:`set_traceback` / :func:`preserved_traceback_flags` - the
      ``lib_cli_exit_tools`` switches behind ``--traceback``.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from cincinnati.composition import AppServices

CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}


@dataclass(slots=True)
class CLIContext:
    """Loaded configuration and wired services for one invocation.

    ``set_overrides`` is kept so ``config --profile`` can reload and apply
    the same ``--set`` entries again.
    """

    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` the root group placed on ``ctx.obj``.

    Raises:
        RuntimeError: If a subcommand runs without the root group.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. The root group must run first.")
    return ctx.obj


def set_traceback(enabled: bool) -> None:
    """Switch full, colored tracebacks on or off for lib_cli_exit_tools.

    Example:
        >>> set_traceback(True)
        >>> lib_cli_exit_tools.config.traceback
        True
        >>> set_traceback(False)
    """
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


@contextmanager
def preserved_traceback_flags(*, restore: bool = True) -> Iterator[None]:
    """Put the traceback flags back as they were once the block exits.

    ``--traceback`` writes process-wide settings; embedding callers and
    test runs need them undone after each CLI run.
    """
    saved = (lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color)
    try:
        yield
    finally:
        if restore:
            lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = saved


__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "CLIContext",
    "get_cli_context",
    "preserved_traceback_flags",
    "set_traceback",
]
