"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Salutation rendering (greeting, farewell)
    * :mod:`.enums` - Domain enumerations (OutputFormat, Salutation)
"""

from __future__ import annotations

from .behaviors import (
    FAREWELL_TEMPLATE,
    GREETING_TEMPLATE,
    SalutationTemplate,
    bye,
    greeting,
    template_for,
)
from .enums import OutputFormat, Salutation

__all__ = [
    # Behaviors
    "FAREWELL_TEMPLATE",
    "GREETING_TEMPLATE",
    "SalutationTemplate",
    "bye",
    "greeting",
    "template_for",
    # Enums
    "OutputFormat",
    "Salutation",
]
