import logging
import typer
from typing import Optional

from othello_core import config
from othello_core.othello.board import Board, IllegalMoveError
from othello_core.othello.cell import Cell

COLOR_NAMES = {
    "b": Cell.BLACK,
    "black": Cell.BLACK,
    "x": Cell.BLACK,
    "w": Cell.WHITE,
    "white": Cell.WHITE,
    "o": Cell.WHITE,
}


def parse_color(string: str) -> Cell:
    try:
        return COLOR_NAMES[string.lower()]
    except KeyError:
        raise ValueError(f'Invalid color "{string}"')


def parse_move(string: str) -> tuple[Cell, int, int]:
    color, separator, field = string.partition(":")
    if not separator:
        raise ValueError(f'Invalid move "{string}", expected <color>:<field>')

    x, y = Board.field_to_coords(field)
    return parse_color(color), x, y


def build_board(moves: list[str]) -> Board:
    board = Board.start()
    for move in moves:
        color, x, y = parse_move(move)
        board.apply_move(x, y, color)
    return board


def load(moves: Optional[list[str]], color: str) -> tuple[Board, Cell]:
    try:
        logging.basicConfig(level=config.parse_log_level(config.LOG_LEVEL))
        return build_board(moves or []), parse_color(color)
    except (ValueError, IllegalMoveError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def show_command(
    moves: Optional[list[str]] = typer.Argument(None),
    color: str = typer.Option("black", "-c", "--color"),
) -> None:
    board, to_move = load(moves, color)
    board.show(to_move)


def moves_command(
    moves: Optional[list[str]] = typer.Argument(None),
    color: str = typer.Option("black", "-c", "--color"),
) -> None:
    board, to_move = load(moves, color)
    typer.echo(Board.coords_to_fields(board.legal_moves(to_move)))


def show() -> None:
    typer.run(show_command)


def moves() -> None:
    typer.run(moves_command)
