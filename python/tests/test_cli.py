"""CLI tests: drive the typer app end to end through both frontends."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from npuzzle.main import app

runner = CliRunner()


# -- fixtures -----------------------------------------------------------------


@pytest.fixture
def puzzle04(tmp_path: Path) -> Path:
    path = tmp_path / "puzzle04.txt"
    path.write_text("3\n 0  1  3\n 4  2  5\n 7  8  6\n")
    return path


@pytest.fixture
def unsolvable(tmp_path: Path) -> Path:
    path = tmp_path / "puzzle2x2-unsolvable1.txt"
    path.write_text("2\n 2  1\n 0  3\n")
    return path


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize("frontend", ["rich", "vanilla"])
def test_solves_puzzle_file(puzzle04: Path, frontend: str) -> None:
    result = runner.invoke(app, [str(puzzle04), "-f", frontend])
    assert result.exit_code == 0, result.output
    assert "Minimum number of moves = 4" in result.output


def test_vanilla_prints_every_board(puzzle04: Path) -> None:
    result = runner.invoke(app, [str(puzzle04), "-f", "vanilla"])
    assert result.exit_code == 0, result.output
    assert "initial Manhattan: 4" in result.output
    # initial board printed once before solving and again as step 0
    assert result.output.count(" 0  1  3 ") == 2
    assert " 7  8  0 " in result.output


@pytest.mark.parametrize("frontend", ["rich", "vanilla"])
def test_unsolvable_puzzle(unsolvable: Path, frontend: str) -> None:
    result = runner.invoke(app, [str(unsolvable), "-f", frontend])
    assert result.exit_code == 0, result.output
    assert "No solution possible" in result.output


def test_random_puzzle() -> None:
    result = runner.invoke(app, ["-s", "2", "--seed", "3", "-f", "vanilla", "--visited"])
    assert result.exit_code == 0, result.output
    assert "Minimum number of moves = " in result.output


def test_timeout_exit_code(unsolvable: Path) -> None:
    result = runner.invoke(app, [str(unsolvable), "-f", "vanilla", "--timeout", "0"])
    assert result.exit_code == 1
    assert "Search aborted" in result.output


def test_malformed_file(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("3\n1 2 3\n4 5\n")
    result = runner.invoke(app, [str(path)])
    assert result.exit_code == 2


def test_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, [str(tmp_path / "nope.txt")])
    assert result.exit_code != 0


def test_size_out_of_range() -> None:
    result = runner.invoke(app, ["-s", "9"])
    assert result.exit_code != 0


def test_non_utf8_file(tmp_path: Path) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\x00\x01")
    result = runner.invoke(app, [str(path)])
    assert result.exit_code == 2
