"""
Shared test fixtures for nd_tictactoe tests.

Design principles:
- Small boards unless the test is about dimensionality
- Clean imports at module level
- Minimal, focused fixtures
"""

from typing import Iterable, Sequence

import pytest

from nd_tictactoe.core.types import Occupant
from nd_tictactoe.games.game_rules import place_marker
from nd_tictactoe.games.game_state import GameState
from nd_tictactoe.session import GameSession
from nd_tictactoe.utils.config import Config


def play(state: GameState, moves: Iterable[Sequence[int]]) -> GameState:
    """Apply moves in order, alternating players as the rules dictate."""
    for coord in moves:
        state = place_marker(state, coord)
    return state


def play_as(state: GameState, moves: Iterable[tuple]) -> GameState:
    """Apply (player, coord) pairs, ignoring whose turn it is."""
    for player, coord in moves:
        state = place_marker(state, coord, player)
    return state


# =============================================================================
# State Fixtures
# =============================================================================

@pytest.fixture
def classic() -> GameState:
    """Empty 3x3 board."""
    return GameState.initial(2, 3)


@pytest.fixture
def tiny() -> GameState:
    """Empty 2x2 board."""
    return GameState.initial(2, 2)


@pytest.fixture
def cube() -> GameState:
    """Empty 3x3x3 board."""
    return GameState.initial(3, 3)


@pytest.fixture
def sparse_state() -> GameState:
    """Empty 5D board of size 2 (sparse storage)."""
    return GameState.initial(5, 2)


@pytest.fixture
def mid_game(classic: GameState) -> GameState:
    """3x3 game after four moves, X to move."""
    return play(classic, [(0, 0), (0, 1), (1, 1), (2, 2)])


@pytest.fixture
def won_game(classic: GameState) -> GameState:
    """3x3 game X won on the top row."""
    return play_as(classic, [
        (Occupant.X, (0, 0)),
        (Occupant.O, (1, 0)),
        (Occupant.X, (0, 1)),
        (Occupant.O, (1, 1)),
        (Occupant.X, (0, 2)),
    ])


# =============================================================================
# Session Fixtures
# =============================================================================

@pytest.fixture
def session() -> GameSession:
    """Session on a 3x3 board."""
    return GameSession(Config(dimensions=2, size=3))
