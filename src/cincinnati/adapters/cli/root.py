"""Root CLI command group and global option handling.

Contents:
    * :func:`cli` - Root command group with ``--traceback``, ``--profile`` and ``--set``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from cincinnati import __init__conf__
from cincinnati.adapters.config.overrides import apply_overrides

from .context import CLICK_CONTEXT_SETTINGS, CLIContext, set_traceback
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from cincinnati.composition import AppServices


def _load_config(services: AppServices, profile: str | None) -> Config:
    """Load configuration for *profile*, exiting with CONFIG_ERROR when it is invalid."""
    try:
        return services.get_config(profile=profile)
    except ValueError as exc:
        click.echo(f"Error: invalid profile {profile!r}: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` overrides, reporting malformed entries as usage errors."""
    try:
        return apply_overrides(config, set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration once, initialise logging and share state with subcommands.

    Example:
        >>> from click.testing import CliRunner
        >>> from cincinnati.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["greet", "Jeff"], obj=build_testing)
        >>> result.output
        'Hello, Jeff\\n'
    """
    # ctx.obj arrives as the services factory (production or testing).
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]
    config = _apply_cli_overrides(_load_config(services, profile), set_overrides)
    services.init_logging(config)
    ctx.obj = CLIContext(config=config, services=services, profile=profile, set_overrides=set_overrides)
    set_traceback(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Deferred: command modules import from this package, so they register after ``cli`` exists.
def _register_commands() -> None:
    from .commands import cli_bye, cli_config, cli_fail, cli_greet, cli_info

    for cmd in (cli_greet, cli_bye, cli_info, cli_config, cli_fail):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
