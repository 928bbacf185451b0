import pytest
import typer
from typer.testing import CliRunner

from othello_core import config
from othello_core.main import moves_command, parse_color, parse_move, show_command
from othello_core.othello.cell import Cell

runner = CliRunner()

show_app = typer.Typer()
show_app.command()(show_command)

moves_app = typer.Typer()
moves_app.command()(moves_command)


@pytest.mark.parametrize(
    ["string", "expected"],
    [
        pytest.param("b", Cell.BLACK, id="b"),
        pytest.param("Black", Cell.BLACK, id="Black"),
        pytest.param("x", Cell.BLACK, id="x"),
        pytest.param("w", Cell.WHITE, id="w"),
        pytest.param("WHITE", Cell.WHITE, id="WHITE"),
        pytest.param("o", Cell.WHITE, id="o"),
    ],
)
def test_parse_color_ok(string: str, expected: Cell) -> None:
    assert parse_color(string) == expected


def test_parse_color_error() -> None:
    with pytest.raises(ValueError):
        parse_color("empty")


def test_parse_move() -> None:
    assert parse_move("b:c4") == (Cell.BLACK, 2, 3)
    assert parse_move("W:E3") == (Cell.WHITE, 4, 2)


@pytest.mark.parametrize(
    ["string"],
    [
        pytest.param("c4", id="no-color"),
        pytest.param("b:z9", id="bad-field"),
        pytest.param("q:c4", id="bad-color"),
    ],
)
def test_parse_move_error(string: str) -> None:
    with pytest.raises(ValueError):
        parse_move(string)


@pytest.mark.parametrize(
    ["args", "expected"],
    [
        pytest.param([], "d3 c4 f5 e6", id="start-black"),
        pytest.param(["-c", "white"], "e3 f4 c5 d6", id="start-white"),
        pytest.param(["b:c4", "--color", "white"], "c3 e3 c5", id="after-c4"),
    ],
)
def test_moves_command(args: list[str], expected: str) -> None:
    result = runner.invoke(moves_app, args)
    assert result.exit_code == 0
    assert result.output.strip() == expected


def test_moves_command_illegal_move() -> None:
    result = runner.invoke(moves_app, ["b:a1"])
    assert result.exit_code == 1
    assert "Error: Cannot place BLACK" in result.output


def test_show_command() -> None:
    result = runner.invoke(show_app, ["b:c4", "-c", "w"])
    assert result.exit_code == 0

    lines = result.output.split("\n")
    assert lines[0] == "+-a-b-c-d-e-f-g-h-+"
    assert lines[4] == "4     ○ ○ ○       |"


def test_show_command_bad_color() -> None:
    result = runner.invoke(show_app, ["--color", "red"])
    assert result.exit_code == 1


def test_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "LOG_LEVEL", "LOUD")

    result = runner.invoke(moves_app, [])

    assert result.exit_code == 1
    assert 'Error: Invalid log level "LOUD"' in result.output
