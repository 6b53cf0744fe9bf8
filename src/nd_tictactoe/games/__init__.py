"""
Games module - board, state and rules for n^d tic-tac-toe.
"""

from nd_tictactoe.games.storage import (
    CellStorage,
    DenseStorage,
    SparseStorage,
    SPARSE_DIMENSION_THRESHOLD,
    create_storage,
)
from nd_tictactoe.games.win_detection import (
    directions,
    canonical_directions,
    direction_count,
    has_winning_line,
    winning_line,
)
from nd_tictactoe.games.board import Board
from nd_tictactoe.games.game_state import GameState
from nd_tictactoe.games.game_rules import (
    can_undo,
    get_valid_moves,
    is_valid_position,
    next_player,
    place_marker,
    reset,
    undo,
    update_settings,
)
from nd_tictactoe.games.serialization import (
    SerializationError,
    decode_state,
    dumps_state,
    encode_state,
    loads_state,
)

__all__ = [
    # Storage
    "CellStorage",
    "DenseStorage",
    "SparseStorage",
    "SPARSE_DIMENSION_THRESHOLD",
    "create_storage",
    # Win detection
    "directions",
    "canonical_directions",
    "direction_count",
    "has_winning_line",
    "winning_line",
    # State
    "Board",
    "GameState",
    # Rules
    "can_undo",
    "get_valid_moves",
    "is_valid_position",
    "next_player",
    "place_marker",
    "reset",
    "undo",
    "update_settings",
    # Serialization
    "SerializationError",
    "decode_state",
    "dumps_state",
    "encode_state",
    "loads_state",
]
