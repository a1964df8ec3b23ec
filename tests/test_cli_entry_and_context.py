"""Behaviour tests for the CLI entry point and the context helpers."""

from __future__ import annotations

import lib_cli_exit_tools
import pytest
import rich_click as click
from click.testing import CliRunner, Result
from lib_layered_config import Config

from cincinnati.adapters import cli as cli_mod
from cincinnati.adapters.cli.context import (
    CLIContext,
    get_cli_context,
    preserved_traceback_flags,
    set_traceback,
)
from cincinnati.adapters.cli.main import main
from cincinnati.composition import build_testing


@pytest.mark.os_agnostic
def test_main_raises_when_services_factory_is_none() -> None:
    with pytest.raises(ValueError, match="services_factory is required"):
        main(["--help"], services_factory=None)


@pytest.mark.os_agnostic
def test_main_returns_usage_exit_code_for_bad_override(
    managed_traceback_state: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    exit_code = main(["--set", "invalid_no_dot=value", "greet", "David"], services_factory=build_testing)

    assert exit_code == 2
    assert "at least one dot" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_main_returns_success_for_help(managed_traceback_state: None, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--help"], services_factory=build_testing)

    assert exit_code == 0
    assert "greet" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_get_cli_context_raises_when_not_initialized() -> None:
    ctx = click.Context(click.Command("test"))
    ctx.obj = "not a CLIContext"

    with pytest.raises(RuntimeError, match="CLI context not initialized"):
        get_cli_context(ctx)


@pytest.mark.os_agnostic
def test_get_cli_context_returns_state_from_root_group() -> None:
    ctx = click.Context(click.Command("test"))
    config = Config({}, {})
    services = build_testing()
    ctx.obj = CLIContext(config=config, services=services, profile="test", set_overrides=("s.k=1",))

    cli_ctx = get_cli_context(ctx)

    assert cli_ctx.config is config
    assert cli_ctx.services is services
    assert cli_ctx.profile == "test"
    assert cli_ctx.set_overrides == ("s.k=1",)


@pytest.mark.os_agnostic
def test_cli_root_raises_when_obj_not_callable(cli_runner: CliRunner) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj="not_callable")

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)


@pytest.mark.os_agnostic
def test_preserved_traceback_flags_undoes_changes(managed_traceback_state: None) -> None:
    set_traceback(True)

    with preserved_traceback_flags():
        set_traceback(False)
        assert lib_cli_exit_tools.config.traceback is False

    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


@pytest.mark.os_agnostic
def test_preserved_traceback_flags_restores_after_exception(managed_traceback_state: None) -> None:
    with pytest.raises(RuntimeError), preserved_traceback_flags():
        set_traceback(True)
        raise RuntimeError("boom")

    assert lib_cli_exit_tools.config.traceback is False


@pytest.mark.os_agnostic
def test_preserved_traceback_flags_can_keep_changes(managed_traceback_state: None) -> None:
    with preserved_traceback_flags(restore=False):
        set_traceback(True)

    assert lib_cli_exit_tools.config.traceback is True
