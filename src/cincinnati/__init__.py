"""Public package surface exposing the salutation helpers, metadata, and configuration.

- Domain exports: :func:`greeting`, :func:`bye` and the templates behind them
- Composition exports: :func:`get_config`
- Metadata: :func:`print_info`

Example:
    >>> from cincinnati import bye, greeting
    >>> greeting("Jeff"), bye("Jeff")
    ('Hello, Jeff', 'Bye, Jeff!')
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    FAREWELL_TEMPLATE,
    GREETING_TEMPLATE,
    SalutationTemplate,
    bye,
    greeting,
)

__all__ = [
    "FAREWELL_TEMPLATE",
    "GREETING_TEMPLATE",
    "SalutationTemplate",
    "bye",
    "get_config",
    "greeting",
    "print_info",
]
