"""
Game rules - pure transition functions over GameState.

Illegal moves are a normal outcome, not an error: place_marker() returns
the state it was given. Callers that need to tell the user why should ask
GameState.is_valid_move() first.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from nd_tictactoe.core.coordinates import (
    as_tuple,
    is_valid_coordinate,
    iter_coordinates,
    normalize,
)
from nd_tictactoe.core.types import Coordinate, Occupant, Phase, Settings
from nd_tictactoe.games.board import Board
from nd_tictactoe.games.game_state import GameState
from nd_tictactoe.games.win_detection import has_winning_line

logger = logging.getLogger(__name__)


def next_player(current: Occupant) -> Occupant:
    return Occupant.O if current == Occupant.X else Occupant.X


def place_marker(
    state: GameState,
    coord,
    player: Optional[Occupant] = None,
) -> GameState:
    """
    Attempt to place a marker.

    Args:
        state: Current state.
        coord: Target cell.
        player: Marker to place; defaults to state.current_player.

    Returns:
        The new state, or `state` itself when the move is illegal.
    """
    coord = as_tuple(coord)
    if not state.is_valid_move(coord):
        logger.debug("Rejected move %r in phase %s", coord, state.phase.value)
        return state

    actual = state.current_player if player is None else player
    if actual not in (Occupant.X, Occupant.O):
        logger.debug("Rejected marker %r at %r", actual, coord)
        return state
    actual = Occupant(actual)

    coord = normalize(coord)
    new_state = state.with_marker(coord, actual)

    # Win before draw: a move that completes a line and fills the board wins
    if has_winning_line(
        new_state.board.storage, coord, actual, state.dimensions, state.size
    ):
        logger.info("Player %s wins at %s", actual.symbol, coord)
        return new_state.with_winner(actual)

    if new_state.is_board_full():
        logger.info("Board full after %d moves: draw", len(new_state.moves))
        return new_state.with_draw()

    return new_state.with_player(next_player(actual))


def can_undo(state: GameState) -> bool:
    return len(state.moves) > 0


def undo(state: GameState) -> GameState:
    """
    Drop the last move by replaying the rest of the log on an empty board.

    Replay goes through Board.apply_move, so intermediate positions are
    never re-checked for wins. The player to move becomes the player whose
    move was undone.
    """
    if not can_undo(state):
        return state

    remaining = state.moves[:-1]
    board = Board.empty(state.dimensions, state.size)
    for move in remaining:
        board = board.apply_move(move.coordinate, move.player)

    undone = state.moves[-1]
    logger.debug("Undid move %s by %s", undone.coordinate, undone.player.symbol)
    return GameState(
        board=board,
        current_player=undone.player,
        phase=Phase.PLAYING,
        winner=None,
        moves=remaining,
    )


def get_valid_moves(state: GameState) -> List[Coordinate]:
    """
    Every legal coordinate, row-major order.

    Scans all size**dimensions cells; meant for tests and tooling, not
    for per-move use.
    """
    if state.phase is not Phase.PLAYING:
        return []
    return [
        coord
        for coord in iter_coordinates(state.dimensions, state.size)
        if state.is_valid_move(coord)
    ]


def is_valid_position(coord, settings: Settings) -> bool:
    return is_valid_coordinate(coord, settings.dimensions, settings.size)


def reset(state: GameState) -> GameState:
    """Fresh game with the same settings."""
    return GameState.initial(state.dimensions, state.size)


def update_settings(state: GameState, dimensions: int, size: int) -> GameState:
    """Fresh game with new settings; nothing carries over."""
    logger.info(
        "Settings changed: %dD/%d -> %dD/%d",
        state.dimensions, state.size, dimensions, size,
    )
    return GameState.initial(dimensions, size)
