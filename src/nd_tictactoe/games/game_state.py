"""
GameState - immutable game snapshot.

All with_* methods return new instances; nothing here mutates.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from nd_tictactoe.core.coordinates import as_tuple
from nd_tictactoe.core.hashing import hash_board
from nd_tictactoe.core.types import Move, Occupant, Phase, Settings
from nd_tictactoe.games.board import Board


@dataclass(frozen=True)
class GameState:
    """
    Snapshot of a game: board, player to move, phase, winner and move log.

    Settings (dimensions, size) are fixed for the lifetime of a game; a
    settings change always starts from GameState.initial().
    """

    board: Board
    current_player: Occupant = Occupant.X
    phase: Phase = Phase.PLAYING
    winner: Optional[Occupant] = None
    moves: Tuple[Move, ...] = ()

    @classmethod
    def initial(cls, dimensions: int, size: int) -> "GameState":
        return cls(board=Board.empty(dimensions, size))

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    @property
    def settings(self) -> Settings:
        return self.board.settings

    @property
    def dimensions(self) -> int:
        return self.board.dimensions

    @property
    def size(self) -> int:
        return self.board.size

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def with_marker(self, coord, player: Occupant) -> "GameState":
        """Place player's marker and append it to the move log."""
        coord = tuple(int(c) for c in coord)
        move = Move(coord, Occupant(player), timestamp=time.time())
        return replace(
            self,
            board=self.board.apply_move(coord, player),
            moves=self.moves + (move,),
        )

    def with_player(self, player: Occupant) -> "GameState":
        return replace(self, current_player=Occupant(player))

    def with_winner(self, winner: Occupant) -> "GameState":
        return replace(self, phase=Phase.WON, winner=Occupant(winner))

    def with_draw(self) -> "GameState":
        return replace(self, phase=Phase.DRAWN, winner=None)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_marker_at(self, coord) -> Occupant:
        return self.board.get(coord)

    def is_valid_move(self, coord) -> bool:
        """Game still running, coord on the board and the cell empty."""
        if self.phase is not Phase.PLAYING:
            return False
        return self.board.is_valid_move(as_tuple(coord))

    def is_board_full(self) -> bool:
        return self.board.is_full()

    def is_game_over(self) -> bool:
        return self.phase is not Phase.PLAYING

    @property
    def last_move(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    def fingerprint(self) -> str:
        """Hash of occupancy, player to move and phase (timestamps excluded)."""
        board_hash = hash_board(self.board.to_array())
        return f"{board_hash}:{self.current_player.symbol}:{self.phase.value}"
