"""CLI command implementations registered on the root group.

Contents:
    * Salutation commands from :mod:`.salutations`
    * Info commands from :mod:`.info`
    * Config commands from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_fail, cli_info
from .salutations import cli_bye, cli_greet

__all__ = [
    "cli_bye",
    "cli_config",
    "cli_fail",
    "cli_greet",
    "cli_info",
]
