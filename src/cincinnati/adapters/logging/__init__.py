"""Logging adapter - lib_log_rich setup and per-command context.

Contents:
    * :func:`.setup.init_logging` - Idempotent logging initialization
    * :func:`.scope.command_scope` - Bind a command's job id for its log records
"""

from __future__ import annotations

from .scope import command_scope
from .setup import init_logging

__all__ = ["command_scope", "init_logging"]
