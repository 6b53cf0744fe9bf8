"""
nd_tictactoe - rule engine for tic-tac-toe on an n^d board.

A board of side L in D dimensions; L markers in a row along any of the
3^D - 1 axis or diagonal directions wins.

Quick Start:
    from nd_tictactoe import GameState, place_marker, undo

    state = GameState.initial(dimensions=3, size=3)
    state = place_marker(state, (1, 1, 1))
    state = undo(state)

Modules:
    core       - Value types, coordinate validation, hashing
    games      - Cell storage, win detection, board, state, rules, serialization
    session    - Interactive session with undo/redo
    debug      - Terminal rendering
"""

from nd_tictactoe.core import Move, Occupant, Phase, Settings
from nd_tictactoe.games import (
    Board,
    GameState,
    SerializationError,
    can_undo,
    decode_state,
    encode_state,
    get_valid_moves,
    place_marker,
    reset,
    undo,
    update_settings,
)
from nd_tictactoe.session import GameSession
from nd_tictactoe.api import play_game

__version__ = "1.0.0"

__all__ = [
    # Types
    "Move",
    "Occupant",
    "Phase",
    "Settings",
    # State
    "Board",
    "GameState",
    # Rules
    "can_undo",
    "get_valid_moves",
    "place_marker",
    "reset",
    "undo",
    "update_settings",
    # Serialization
    "SerializationError",
    "decode_state",
    "encode_state",
    # Session
    "GameSession",
    "play_game",
]
