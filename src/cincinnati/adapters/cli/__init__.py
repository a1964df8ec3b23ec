"""rich-click command-line interface.

Contents:
    * :func:`cli` - Root command group; subcommands register on import.
    * :func:`main` - Exit-code returning entry point used by ``entry`` and ``__main__``.
"""

from __future__ import annotations

from .commands import cli_bye, cli_config, cli_fail, cli_greet, cli_info
from .context import CLICK_CONTEXT_SETTINGS, CLIContext, get_cli_context, preserved_traceback_flags, set_traceback
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "CLIContext",
    "ExitCode",
    "cli",
    "cli_bye",
    "cli_config",
    "cli_fail",
    "cli_greet",
    "cli_info",
    "get_cli_context",
    "main",
    "preserved_traceback_flags",
    "set_traceback",
]
