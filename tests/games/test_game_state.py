"""
Tests for nd_tictactoe.games.game_state

Tests the immutable snapshot and its with_* helpers.
"""

import dataclasses

import pytest

from nd_tictactoe.core.types import Move, Occupant, Phase, Settings
from nd_tictactoe.games.game_state import GameState


class TestInitial:
    """GameState.initial tests."""

    def test_defaults(self, classic: GameState):
        assert classic.current_player == Occupant.X
        assert classic.phase is Phase.PLAYING
        assert classic.winner is None
        assert classic.moves == ()
        assert classic.board.occupied_count == 0

    def test_settings(self, cube: GameState):
        assert cube.settings == Settings(3, 3)
        assert cube.dimensions == 3
        assert cube.size == 3

    def test_initial_states_equal(self):
        assert GameState.initial(3, 4) == GameState.initial(3, 4)


class TestWithHelpers:
    """Every helper returns a new state."""

    def test_with_marker_logs_move(self, classic: GameState):
        state = classic.with_marker((1, 2), Occupant.O)
        assert state.get_marker_at((1, 2)) == Occupant.O
        assert state.moves == (Move((1, 2), Occupant.O),)
        assert state.moves[0].timestamp is not None
        assert classic.moves == ()

    def test_with_marker_does_not_flip_player(self, classic: GameState):
        assert classic.with_marker((0, 0), Occupant.X).current_player == Occupant.X

    def test_with_player(self, classic: GameState):
        assert classic.with_player(Occupant.O).current_player == Occupant.O
        assert classic.current_player == Occupant.X

    def test_with_winner(self, classic: GameState):
        state = classic.with_winner(Occupant.O)
        assert state.phase is Phase.WON
        assert state.winner == Occupant.O

    def test_with_draw(self, classic: GameState):
        state = classic.with_draw()
        assert state.phase is Phase.DRAWN
        assert state.winner is None

    def test_frozen(self, classic: GameState):
        with pytest.raises(dataclasses.FrozenInstanceError):
            classic.phase = Phase.WON


class TestQueries:
    """Validity and status queries."""

    def test_is_valid_move(self, classic: GameState):
        assert classic.is_valid_move((0, 0))
        assert not classic.is_valid_move((3, 0))

    def test_is_valid_move_generator(self, classic: GameState):
        assert classic.is_valid_move(c for c in (0, 0))

    def test_no_moves_after_game_over(self, classic: GameState):
        assert not classic.with_draw().is_valid_move((0, 0))
        assert not classic.with_winner(Occupant.X).is_valid_move((0, 0))

    def test_is_game_over(self, classic: GameState):
        assert not classic.is_game_over()
        assert classic.with_draw().is_game_over()

    def test_last_move(self, classic: GameState):
        assert classic.last_move is None
        state = classic.with_marker((0, 1), Occupant.X)
        assert state.last_move == Move((0, 1), Occupant.X)


class TestFingerprint:
    """Fingerprint ignores timestamps but not occupancy."""

    def test_same_position_same_fingerprint(self, classic: GameState):
        a = classic.with_marker((0, 0), Occupant.X)
        b = classic.with_marker((0, 0), Occupant.X)
        assert a.fingerprint() == b.fingerprint()

    def test_different_position(self, classic: GameState):
        a = classic.with_marker((0, 0), Occupant.X)
        b = classic.with_marker((0, 1), Occupant.X)
        assert a.fingerprint() != b.fingerprint()

    def test_player_to_move_matters(self, classic: GameState):
        assert classic.fingerprint() != classic.with_player(Occupant.O).fingerprint()
