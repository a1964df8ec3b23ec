"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml``; the ``LAYEREDCONF_*``
identifiers determine where lib_layered_config looks for configuration
files on each platform.

Contents:
    * Metadata constants (``name``, ``title``, ``version`` ...).
    * :func:`print_info` - render the metadata block used by ``info``.
"""

from __future__ import annotations

from typing import Final

#: Distribution name as declared in pyproject.toml.
name: Final[str] = "cincinnati"
#: One-line description shown in CLI help.
title: Final[str] = "Deterministic greeting and farewell helpers"
#: Release version, synced with pyproject.toml.
version: Final[str] = "0.1.0"
#: Project homepage.
homepage: Final[str] = "https://pypi.org/project/cincinnati/"
#: Author name.
author: Final[str] = "Cincinnati Contributors"
#: Author contact address.
author_email: Final[str] = "cincinnati@example.org"
#: Console script name installed by pip.
shell_command: Final[str] = "cincinnati"

#: Vendor identifier for macOS/Windows configuration paths.
LAYEREDCONF_VENDOR: Final[str] = "cincinnati"
#: Application identifier for macOS/Windows configuration paths.
LAYEREDCONF_APP: Final[str] = "cincinnati"
#: Slug used for XDG configuration paths on Linux.
LAYEREDCONF_SLUG: Final[str] = "cincinnati"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for cincinnati:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
