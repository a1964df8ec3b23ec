"""In-memory adapter implementations for testing.

Lightweight implementations of every application port that operate
entirely in memory -- no filesystem, no logging runtime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    load_salutation_settings_in_memory,
)
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from cincinnati.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadSalutationSettings,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_load_salutation_settings: LoadSalutationSettings = load_salutation_settings_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_salutation_settings_in_memory",
]
