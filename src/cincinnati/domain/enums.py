"""Type-safe domain enums shared by CLI commands and adapters."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str so members compare equal to their plain values and
    plug directly into ``click.Choice``.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class Salutation(str, Enum):
    """Salutation kinds rendered by the CLI.

    Example:
        >>> Salutation("bye") is Salutation.FAREWELL
        True
    """

    GREETING = "greet"
    FAREWELL = "bye"


__all__ = [
    "OutputFormat",
    "Salutation",
]
