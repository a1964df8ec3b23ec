"""Typed view of the ``[cincinnati]`` configuration section."""

from __future__ import annotations

from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict


class SalutationSettings(BaseModel):
    """Validated settings for the salutation commands.

    Unknown keys are rejected so typos in configuration files surface early.

    Example:
        >>> SalutationSettings().log_salutations
        True
        >>> SalutationSettings.model_validate({"log_salutations": "false"}).log_salutations
        False
    """

    log_salutations: bool = True

    model_config = ConfigDict(extra="forbid", frozen=True)


def load_salutation_settings(config: Config) -> SalutationSettings:
    """Parse the ``[cincinnati]`` section of *config*.

    Args:
        config: Already-loaded layered configuration.

    Returns:
        Frozen settings; defaults apply when the section is absent.

    Raises:
        pydantic.ValidationError: If the section holds unknown keys or
            values that cannot be coerced.

    Example:
        >>> load_salutation_settings(Config({}, {})).log_salutations
        True
    """
    raw: object = config.get("cincinnati", default={})
    return SalutationSettings.model_validate(cast("dict[str, object]", raw) if raw else {})


__all__ = [
    "SalutationSettings",
    "load_salutation_settings",
]
