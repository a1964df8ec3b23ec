"""POSIX-conventional exit codes for CLI error paths.

Every ``SystemExit`` raised by a command carries one of these values
instead of a bare ``1``.  Click's own usage errors keep exit code 2.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes used by this application.

    * 0–1: generic success / failure
    * 22: EINVAL, a command argument that names nothing valid
    * 78: EX_CONFIG (sysexits.h), unusable configuration or profile

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
