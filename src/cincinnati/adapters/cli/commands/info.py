"""Metadata and failure-path commands.

Contents:
    * :func:`cli_info` - Display package metadata.
    * :func:`cli_fail` - Raise on purpose to exercise error reporting.
"""

from __future__ import annotations

import logging

import rich_click as click

from cincinnati import __init__conf__
from cincinnati.adapters.logging.scope import command_scope

from ..context import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""
    with command_scope("info"):
        logger.info("Displaying package information")
        __init__conf__.print_info()


@click.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Raise a RuntimeError to check traceback and exit-code handling."""
    with command_scope("fail"):
        logger.warning("Executing intentional failure command")
        raise RuntimeError("I should fail")


__all__ = ["cli_fail", "cli_info"]
