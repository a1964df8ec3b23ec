"""Per-command logging context bound through lib_log_rich."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import lib_log_rich.runtime


@contextmanager
def command_scope(command: str, **extra: object) -> Iterator[None]:
    """Bind ``job_id="cli-<command>"`` plus *extra* for the enclosed block.

    Without an initialised runtime (in-memory wiring) nothing is bound and
    stdlib logging records flow to whatever handlers exist.

    Example:
        >>> with command_scope("greet", names=1):
        ...     pass
    """
    if not lib_log_rich.runtime.is_initialised():
        yield
        return
    with lib_log_rich.runtime.bind(job_id=f"cli-{command}", extra={"command": command, **extra}):
        yield


__all__ = ["command_scope"]
