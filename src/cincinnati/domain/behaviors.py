"""Pure salutation functions with no I/O or framework dependencies.

A salutation is described by a :class:`SalutationTemplate` value and
rendered by an ordinary function; the two canonical shapes are exposed as
:func:`greeting` and :func:`bye`.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import Salutation


@dataclass(frozen=True, slots=True)
class SalutationTemplate:
    """Immutable description of a salutation's fixed text around a name.

    Attributes:
        prefix: Text placed before the name.
        suffix: Text placed after the name.

    Example:
        >>> SalutationTemplate(prefix="Hi ", suffix=".").render("Ann")
        'Hi Ann.'
    """

    prefix: str
    suffix: str = ""

    def render(self, name: str) -> str:
        """Return ``prefix + name + suffix``."""
        return f"{self.prefix}{name}{self.suffix}"


GREETING_TEMPLATE = SalutationTemplate(prefix="Hello, ")
FAREWELL_TEMPLATE = SalutationTemplate(prefix="Bye, ", suffix="!")

_TEMPLATES: dict[Salutation, SalutationTemplate] = {
    Salutation.GREETING: GREETING_TEMPLATE,
    Salutation.FAREWELL: FAREWELL_TEMPLATE,
}


def template_for(kind: Salutation) -> SalutationTemplate:
    """Return the template rendering the given salutation kind.

    Example:
        >>> template_for(Salutation.FAREWELL).render("Jeff")
        'Bye, Jeff!'
    """
    return _TEMPLATES[kind]


def greeting(name: str) -> str:
    """Return the greeting for *name*.

    Any text is accepted, including the empty string; the call cannot fail.

    Args:
        name: Name to greet, used verbatim.

    Returns:
        ``"Hello, " + name``.

    Example:
        >>> greeting("David")
        'Hello, David'
        >>> greeting("")
        'Hello, '
    """
    return GREETING_TEMPLATE.render(name)


def bye(name: str) -> str:
    """Return the farewell for *name*.

    Example:
        >>> bye("David")
        'Bye, David!'
    """
    return FAREWELL_TEMPLATE.render(name)


__all__ = [
    "FAREWELL_TEMPLATE",
    "GREETING_TEMPLATE",
    "SalutationTemplate",
    "bye",
    "greeting",
    "template_for",
]
