"""``produce`` stories: the message reaches stdout unchanged in every form."""

from __future__ import annotations

from collections.abc import Callable

import click
import orjson
import pytest
from click.testing import CliRunner, Result

from message_producer import MESSAGE
from message_producer.adapters.cli import cli, main
from message_producer.adapters.cli.commands import produce_command, render_message
from message_producer.domain import OutputFormat


@pytest.mark.os_agnostic
def test_produce_prints_the_message_and_nothing_else(runner: CliRunner, production: Callable[[], object]) -> None:
    result: Result = runner.invoke(cli, ["produce"], obj=production)

    assert result.exit_code == 0
    assert result.stdout == MESSAGE + "\n"


@pytest.mark.os_agnostic
def test_produce_json_is_an_object_with_the_message(runner: CliRunner, production: Callable[[], object]) -> None:
    result: Result = runner.invoke(cli, ["produce", "--format", "json"], obj=production)

    assert result.exit_code == 0
    assert orjson.loads(result.stdout) == {"message": MESSAGE}


@pytest.mark.os_agnostic
def test_produce_format_ignores_case(runner: CliRunner, production: Callable[[], object]) -> None:
    result: Result = runner.invoke(cli, ["produce", "--format", "JSON"], obj=production)

    assert result.exit_code == 0
    assert orjson.loads(result.stdout)["message"] == MESSAGE


@pytest.mark.os_agnostic
def test_produce_rejects_an_unknown_format(runner: CliRunner, production: Callable[[], object]) -> None:
    result: Result = runner.invoke(cli, ["produce", "--format", "yaml"], obj=production)

    assert result.exit_code == 2
    assert result.stdout == ""


@pytest.mark.os_agnostic
def test_produce_options_offer_human_and_json() -> None:
    option = next(param for param in produce_command.params if param.name == "output_format")

    assert isinstance(option.type, click.Choice)
    assert list(option.type.choices) == ["human", "json"]
    assert option.default == "human"
    assert option.show_default is True


@pytest.mark.os_agnostic
def test_produce_output_ignores_configuration(
    runner: CliRunner,
    services_with_config: Callable[..., tuple[Callable[[], object], object]],
) -> None:
    factory, _ = services_with_config({"producer": {"message": "something else"}})

    result: Result = runner.invoke(cli, ["--set", "producer.prefix=x", "produce"], obj=factory)

    assert result.exit_code == 0
    assert result.stdout.strip() == MESSAGE


@pytest.mark.os_agnostic
def test_main_produce_returns_zero(
    production: Callable[[], object],
    traceback_flags: None,
    capsys: pytest.CaptureFixture[str],
) -> None:
    exit_code = main(["produce"], services_factory=production)

    assert exit_code == 0
    assert capsys.readouterr().out == MESSAGE + "\n"


@pytest.mark.os_agnostic
def test_produce_twice_prints_the_same_line(runner: CliRunner, production: Callable[[], object]) -> None:
    first = runner.invoke(cli, ["produce"], obj=production).stdout
    second = runner.invoke(cli, ["produce"], obj=production).stdout

    assert first == second


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("output_format", "expected"),
    [
        (OutputFormat.HUMAN, "ready"),
        (OutputFormat.JSON, '{"message":"ready"}'),
    ],
)
def test_render_message(output_format: OutputFormat, expected: str) -> None:
    assert render_message("ready", output_format) == expected


@pytest.mark.os_agnostic
def test_render_message_json_escapes_quotes() -> None:
    rendered = render_message('say "hi"', OutputFormat.JSON)

    assert orjson.loads(rendered) == {"message": 'say "hi"'}
