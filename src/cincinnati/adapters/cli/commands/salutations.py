"""Greeting and farewell commands.

Contents:
    * :func:`cli_greet` - Print ``Hello, <name>`` for each name.
    * :func:`cli_bye` - Print ``Bye, <name>!`` for each name.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import rich_click as click

from cincinnati.adapters.logging.scope import command_scope
from cincinnati.domain.behaviors import template_for
from cincinnati.domain.enums import Salutation

from ..context import CLICK_CONTEXT_SETTINGS, CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def render_all(kind: Salutation, names: Sequence[str], *, log_salutations: bool) -> list[str]:
    """Render *kind* for every name, in order.

    Args:
        kind: Which salutation to render.
        names: Names exactly as given on the command line.
        log_salutations: Emit one INFO record per rendered line.

    Returns:
        One rendered line per name.

    Example:
        >>> render_all(Salutation.GREETING, ["David", "Jeff"], log_salutations=False)
        ['Hello, David', 'Hello, Jeff']
    """
    template = template_for(kind)
    lines = [template.render(name) for name in names]
    if log_salutations:
        for line in lines:
            logger.info("Rendered salutation", extra={"salutation": kind.value, "text": line})
    return lines


def _log_salutations_enabled(cli_ctx: CLIContext) -> bool:
    """Read ``cincinnati.log_salutations``, exiting with CONFIG_ERROR when the section is invalid."""
    try:
        return cli_ctx.services.load_salutation_settings(cli_ctx.config).log_salutations
    except ValueError as exc:
        click.echo(f"Error: invalid [cincinnati] configuration: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def _run(ctx: click.Context, kind: Salutation, names: tuple[str, ...]) -> None:
    cli_ctx = get_cli_context(ctx)
    log_salutations = _log_salutations_enabled(cli_ctx)
    with command_scope(kind.value, names=len(names)):
        for line in render_all(kind, names, log_salutations=log_salutations):
            click.echo(line)


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("names", nargs=-1, required=True, metavar="NAME...")
@click.pass_context
def cli_greet(ctx: click.Context, names: tuple[str, ...]) -> None:
    """Print a greeting for each NAME, one per line."""
    _run(ctx, Salutation.GREETING, names)


@click.command("bye", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("names", nargs=-1, required=True, metavar="NAME...")
@click.pass_context
def cli_bye(ctx: click.Context, names: tuple[str, ...]) -> None:
    """Print a farewell for each NAME, one per line."""
    _run(ctx, Salutation.FAREWELL, names)


__all__ = ["cli_bye", "cli_greet", "render_all"]
