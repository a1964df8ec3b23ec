"""In-memory configuration adapters for testing.

Satisfy the same Protocols as the production adapters without touching
the filesystem or lib_layered_config's discovery logic.
"""

from __future__ import annotations

from lib_layered_config import Config

from ...domain.enums import OutputFormat
from ..config.settings import SalutationSettings


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display -- satisfies the DisplayConfig protocol."""


def load_salutation_settings_in_memory(config: Config) -> SalutationSettings:
    """Parse settings with the real model; an absent section yields defaults."""
    raw = config.get("cincinnati", default={})
    return SalutationSettings.model_validate(raw or {})


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "load_salutation_settings_in_memory",
]
