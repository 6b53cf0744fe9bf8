"""
GameSession - one interactive game with undo/redo.

The rule engine only knows how to undo (replay from an empty board).
Redo lives here: undone moves are remembered and re-applied through the
normal place_marker path.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from nd_tictactoe.core.types import Coordinate, Move, Phase
from nd_tictactoe.games import game_rules
from nd_tictactoe.games.game_state import GameState
from nd_tictactoe.games.serialization import decode_state, encode_state
from nd_tictactoe.utils.config import Config

logger = logging.getLogger(__name__)


class GameSession:
    """Holds the current GameState plus a redo stack."""

    def __init__(self, config: Optional[Config] = None):
        self._config = config or Config()
        self._state = GameState.initial(self._config.dimensions, self._config.size)
        self._redo: List[Move] = []

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def config(self) -> Config:
        return self._config

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def place_marker(self, coord) -> bool:
        """Play for the current player. Returns False if the move was rejected."""
        new_state = game_rules.place_marker(self._state, coord)
        if new_state is self._state:
            return False

        self._state = new_state
        self._redo.clear()
        if new_state.is_game_over():
            logger.info(
                "Game over: %s",
                f"{new_state.winner.symbol} wins" if new_state.phase is Phase.WON else "draw",
            )
        return True

    def can_undo(self) -> bool:
        return game_rules.can_undo(self._state) and not self._state.is_game_over()

    def can_redo(self) -> bool:
        return bool(self._redo) and not self._state.is_game_over()

    def undo(self) -> Optional[Move]:
        """Undo the last move; returns it, or None when there is nothing to undo."""
        if not self.can_undo():
            return None
        move = self._state.last_move
        self._state = game_rules.undo(self._state)
        self._redo.append(move)
        return move

    def redo(self) -> Optional[Move]:
        """Re-apply the most recently undone move."""
        if not self.can_redo():
            return None
        move = self._redo.pop()
        self._state = game_rules.place_marker(self._state, move.coordinate, move.player)
        return move

    def valid_moves(self) -> List[Coordinate]:
        return game_rules.get_valid_moves(self._state)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> GameState:
        """Start over with the same settings."""
        self._state = game_rules.reset(self._state)
        self._redo.clear()
        logger.info("New game: %r", self._config)
        return self._state

    def update_settings(self, dimensions: int, size: int) -> GameState:
        """
        Switch to a new board shape. Raises ValueError for unsupported
        settings, leaving the current game untouched.
        """
        config = Config(dimensions, size)
        self._state = game_rules.update_settings(self._state, config.dimensions, config.size)
        self._config = config
        self._redo.clear()
        return self._state

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def snapshot(self) -> Dict[str, Any]:
        return encode_state(self._state)

    @classmethod
    def from_state(cls, state: GameState) -> "GameSession":
        """
        Resume from an existing state; the redo stack starts empty.
        Raises ValueError if the state's settings are unsupported.
        """
        session = cls(Config(state.dimensions, state.size))
        session._state = state
        return session

    @classmethod
    def from_snapshot(cls, snapshot: Dict[str, Any]) -> "GameSession":
        return cls.from_state(decode_state(snapshot))
