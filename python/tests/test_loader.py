"""Loader tests: the plain-text puzzle format."""

from __future__ import annotations

from pathlib import Path

import pytest

from npuzzle.engine.gameloader import format_board, load_board, parse_board
from npuzzle.models.board import Board
from npuzzle.models.errors import GridFormatError, InvalidArgument


def test_parse_board() -> None:
    board = parse_board("3\n 0  1  3\n 4  2  5\n 7  8  6\n")
    assert board == Board([[0, 1, 3], [4, 2, 5], [7, 8, 6]])


def test_parse_tolerates_any_whitespace() -> None:
    assert parse_board("2 1 2\t0\n\n3") == Board([[1, 2], [0, 3]])


def test_load_board(tmp_path: Path) -> None:
    path = tmp_path / "puzzle04.txt"
    path.write_text("3\n1 2 3\n0 7 6\n5 4 8\n")
    assert load_board(path) == Board([[1, 2, 3], [0, 7, 6], [5, 4, 8]])
    assert load_board(str(path)) == load_board(path)


def test_format_round_trips() -> None:
    board = Board([[8, 1, 3], [4, 0, 2], [7, 6, 5]])
    assert parse_board(format_board(board)) == board


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   \n",
        "3\n1 2 3\n4 x 6\n7 8 0\n",
        "3\n1 2 3\n4 5 6\n",
        "2\n1 2\n0 3\n4\n",
        "0\n",
        "-2\n1 2 0 3\n",
    ],
    ids=["empty", "blank-lines", "non-integer", "too-few", "too-many", "zero-size", "negative-size"],
)
def test_malformed_text(text: str) -> None:
    with pytest.raises(GridFormatError):
        parse_board(text)


def test_grid_without_blank_is_invalid() -> None:
    with pytest.raises(InvalidArgument):
        parse_board("2\n1 2\n3 4\n")


def test_load_non_utf8_file(tmp_path: Path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"2\n1 2\n0 3\n\xff\xfe")
    with pytest.raises(GridFormatError):
        load_board(path)
