"""Integration tests for the config display wrapper around lib_layered_config."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config

from cincinnati.adapters.config.display import display_config
from cincinnati.domain.enums import OutputFormat


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", list(OutputFormat))
def test_display_config_raises_for_nonexistent_section(
    config_factory: Callable[[dict[str, Any]], Config],
    output_format: OutputFormat,
) -> None:
    config = config_factory({"cincinnati": {"log_salutations": True}})

    with pytest.raises(ValueError, match="not found"):
        display_config(config, output_format=output_format, section="nonexistent")


@pytest.mark.os_agnostic
def test_display_human_renders_sections(capsys: pytest.CaptureFixture[str]) -> None:
    config = Config({"cincinnati": {"log_salutations": True}, "lib_log_rich": {"environment": "prod"}}, {})

    display_config(config, output_format=OutputFormat.HUMAN)
    output = capsys.readouterr().out

    assert "[cincinnati]" in output
    assert "[lib_log_rich]" in output
    assert 'environment = "prod"' in output


@pytest.mark.os_agnostic
def test_display_json_renders_output(capsys: pytest.CaptureFixture[str]) -> None:
    config = Config({"lib_log_rich": {"environment": "prod"}}, {})

    display_config(config, output_format=OutputFormat.JSON)
    output = capsys.readouterr().out

    assert '"lib_log_rich"' in output
    assert '"environment": "prod"' in output


@pytest.mark.os_agnostic
def test_display_section_omits_other_sections(capsys: pytest.CaptureFixture[str]) -> None:
    config = Config({"cincinnati": {"log_salutations": True}, "lib_log_rich": {"environment": "prod"}}, {})

    display_config(config, output_format=OutputFormat.HUMAN, section="cincinnati")
    output = capsys.readouterr().out

    assert "log_salutations" in output
    assert "lib_log_rich" not in output
