"""
Unit tests for the command-line driver.
"""
import argparse
import io
from pathlib import Path

import pytest

import main


@pytest.fixture
def layout_file(tmp_path: Path) -> Path:
    path = tmp_path / "board.txt"
    path.write_text("..*\n...\n...\n")
    return path


def play_args(path: Path, origin: str = "top-left") -> argparse.Namespace:
    return argparse.Namespace(layout=str(path), origin=origin)


class TestLoadGame:
    """Test loading layouts from files."""

    def test_loads_layout(self, layout_file: Path) -> None:
        game = main.load_game(str(layout_file), "top-left")
        assert (game.width, game.height) == (3, 3)
        assert game.mine_count == 1

    def test_missing_file(self, tmp_path: Path, capsys) -> None:
        assert main.load_game(str(tmp_path / "nope.txt"), "top-left") is None
        assert "Cannot read layout" in capsys.readouterr().err

    def test_ragged_file(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "ragged.txt"
        path.write_text("...\n..\n")
        assert main.load_game(str(path), "top-left") is None
        assert "different lengths" in capsys.readouterr().err

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.txt"
        path.write_text("\n")
        assert main.load_game(str(path), "top-left") is None


class TestCommands:
    """Test the show and play commands."""

    def test_show_prints_solution(self, layout_file: Path, capsys) -> None:
        assert main.main(["show", "--layout", str(layout_file)]) == 0
        out = capsys.readouterr().out
        assert "3x3 with 1 mines" in out
        assert "|_|1|X|" in out

    def test_play_reveal_wins(self, layout_file: Path, capsys) -> None:
        assert main.play(play_args(layout_file), io.StringIO("r 0 0\n")) == 0
        assert "WIN" in capsys.readouterr().out

    def test_play_mine_loses(self, layout_file: Path, capsys) -> None:
        main.play(play_args(layout_file), io.StringIO("f 0 0\nr 2 0\n"))
        out = capsys.readouterr().out
        assert "|*| |X|" in out
        assert "LOST" in out

    def test_play_bottom_left_origin(self, layout_file: Path, capsys) -> None:
        main.play(play_args(layout_file, "bottom-left"), io.StringIO("r 2 2\n"))
        assert "LOST" in capsys.readouterr().out

    def test_play_bad_input_and_quit(self, layout_file: Path, capsys) -> None:
        commands = io.StringIO("\nzz\nr a b\nr 9 9\nq\nr 0 0\n")
        assert main.play(play_args(layout_file), commands) == 0
        out = capsys.readouterr().out
        assert "Coordinates must be integers" in out
        assert "Cannot reveal (9, 9)" in out
        assert "WIN" not in out
