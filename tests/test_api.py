"""
Tests for nd_tictactoe.api and nd_tictactoe.cli

Drives the terminal loop with scripted input.
"""

import json
from typing import List

import pytest

from nd_tictactoe.api import parse_coordinate, play_game
from nd_tictactoe.cli import build_session, main, parse_args
from nd_tictactoe.core.types import Occupant, Phase
from nd_tictactoe.debug.viz import render_board, state_string, strip_ansi
from nd_tictactoe.games.game_state import GameState
from nd_tictactoe.games.serialization import dumps_state
from nd_tictactoe.session import GameSession


def _scripted(lines: List[str]):
    it = iter(lines)

    def input_fn(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return input_fn


class TestParseCoordinate:
    """Coordinate parsing."""

    def test_simple(self):
        assert parse_coordinate("1,0,2", 3) == (1, 0, 2)

    def test_spaces(self):
        assert parse_coordinate(" 1 , 2 ", 2) == (1, 2)

    def test_wrong_arity(self):
        with pytest.raises(ValueError, match="Expected 3"):
            parse_coordinate("1,2", 3)

    def test_not_integers(self):
        with pytest.raises(ValueError, match="integers"):
            parse_coordinate("a,b", 2)


class TestPlayGame:
    """Scripted terminal games."""

    def test_x_wins(self, session: GameSession):
        out: List[str] = []
        play_game(
            session,
            color=False,
            input_fn=_scripted(["0,0", "1,0", "0,1", "1,1", "0,2"]),
            output=out.append,
        )
        assert session.state.phase is Phase.WON
        assert "Player X wins after 5 moves" in out[-1]

    def test_illegal_input_reported(self, session: GameSession):
        out: List[str] = []
        play_game(
            session,
            color=False,
            input_fn=_scripted(["1,1", "1,1", "5,5", "x", "q", "2,2"]),
            output=out.append,
        )
        assert any("is taken" in line for line in out)
        assert any("off the board" in line for line in out)
        assert any("Invalid input" in line for line in out)
        # Quit before the last move
        assert len(session.state.moves) == 1

    def test_undo_redo_commands(self, session: GameSession):
        out: List[str] = []
        play_game(
            session,
            color=False,
            input_fn=_scripted(["0,0", "u", "r", "u", "u"]),
            output=out.append,
        )
        assert session.state.moves == ()
        assert any("Undid X at [0, 0]" in line for line in out)
        assert any("Redid X at [0, 0]" in line for line in out)
        assert "Nothing to undo" in out

    def test_save_prints_snapshot(self, session: GameSession):
        out: List[str] = []
        play_game(session, color=False, input_fn=_scripted(["1,2", "save"]), output=out.append)
        snapshot = json.loads(out[-1])
        assert snapshot["moves"][0]["coordinate"] == [1, 2]

    def test_new_game(self, session: GameSession):
        play_game(session, color=False, input_fn=_scripted(["1,2", "n"]), output=lambda s: None)
        assert session.state.moves == ()


class TestRendering:
    """Text rendering of boards."""

    def test_2d_grid(self, classic: GameState):
        from nd_tictactoe.games.game_rules import place_marker

        text = render_board(place_marker(classic, (0, 2)).board, color=False)
        lines = text.splitlines()
        assert lines[0] == "╭───┬───┬───╮"
        assert lines[1] == "│   │   │ X │"

    def test_3d_slices_labelled(self, cube: GameState):
        text = render_board(cube.board, color=False)
        assert "[0, *, *]" in text
        assert "[2, *, *]" in text

    def test_color_strips_to_plain(self, classic: GameState):
        from nd_tictactoe.games.game_rules import place_marker

        board = place_marker(classic, (1, 1)).board
        assert strip_ansi(render_board(board, color=True)) == render_board(board, color=False)

    def test_large_board_hides_empty_slices(self):
        from nd_tictactoe.games.game_rules import place_marker

        state = place_marker(GameState.initial(5, 3), (0, 0, 0, 1, 1))
        text = render_board(state.board, color=False, max_slices=10)
        assert "[0, 0, 0, *, *]" in text
        assert "26 empty slices not shown" in text

    def test_status_line(self, classic: GameState):
        assert state_string(classic, color=False).endswith("Player X to move (move 1)")


class TestCli:
    """Argument parsing and session construction."""

    def test_defaults(self):
        args = parse_args([])
        assert args.dimensions == 4
        assert args.size == 4
        assert args.log_level == "WARNING"

    def test_custom(self):
        args = parse_args(["-d", "3", "-n", "5", "--no-color"])
        assert args.dimensions == 3
        assert args.size == 5
        assert args.no_color

    def test_build_session(self):
        session = build_session(parse_args(["-d", "3", "-n", "3"]))
        assert session.state.dimensions == 3

    def test_load_snapshot(self, tmp_path, mid_game: GameState):
        path = tmp_path / "game.json"
        path.write_text(dumps_state(mid_game))
        session = build_session(parse_args(["--load", str(path)]))
        assert session.state == mid_game
        assert session.state.get_marker_at((2, 2)) == Occupant.O

    def test_bad_settings_exit_code(self, capsys):
        assert main(["-d", "12"]) == 2
        assert "Dimensions must be between" in capsys.readouterr().err

    def test_main_plays(self, monkeypatch):
        monkeypatch.setattr("builtins.input", _scripted(["0,0", "q"]))
        assert main(["-d", "2", "-n", "3", "--no-color"]) == 0
