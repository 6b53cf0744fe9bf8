"""
Public API for playing n^d tic-tac-toe.

Usage:
    from nd_tictactoe import GameSession, play_game
    from nd_tictactoe.utils.config import Config

    session = GameSession(Config(dimensions=3, size=3))
    play_game(session)
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from nd_tictactoe.core.coordinates import is_valid_coordinate
from nd_tictactoe.core.types import Coordinate, Phase
from nd_tictactoe.debug.viz import state_string
from nd_tictactoe.games.serialization import dumps_state
from nd_tictactoe.games.win_detection import winning_line
from nd_tictactoe.session import GameSession

logger = logging.getLogger(__name__)

HELP = (
    "Enter a cell as comma-separated values (e.g. 0,1,2).\n"
    "Commands: u = undo, r = redo, n = new game, save = print snapshot, "
    "h = help, q = quit"
)


def parse_coordinate(text: str, dimensions: int) -> Coordinate:
    """
    Parse '1,0,2' (spaces allowed) into a coordinate.

    Raises:
        ValueError: not integers, or wrong number of values
    """
    parts = [p.strip() for p in text.split(",") if p.strip()]
    try:
        coord = tuple(int(p) for p in parts)
    except ValueError as e:
        raise ValueError(f"Invalid coordinate {text!r}: expected integers") from e
    if len(coord) != dimensions:
        raise ValueError(f"Expected {dimensions} comma-separated values, got {len(coord)}")
    return coord


def _highlight(session: GameSession):
    state = session.state
    if state.phase is not Phase.WON or state.last_move is None:
        return ()
    move = state.last_move
    return winning_line(
        state.board.storage, move.coordinate, move.player, state.dimensions, state.size
    ) or ()


def _human_turn(
    session: GameSession,
    raw: str,
    output: Callable[[str], None],
) -> bool:
    """Handle one line of input. Returns False when the player quits."""
    command = raw.strip().lower()
    state = session.state

    if command in ("q", "quit", "exit"):
        return False
    if command in ("h", "help", "?"):
        output(HELP)
    elif command in ("u", "undo"):
        move = session.undo()
        output(f"Undid {move.player.symbol} at {list(move.coordinate)}" if move else "Nothing to undo")
    elif command in ("r", "redo"):
        move = session.redo()
        output(f"Redid {move.player.symbol} at {list(move.coordinate)}" if move else "Nothing to redo")
    elif command in ("n", "new"):
        session.reset()
        output("New game")
    elif command == "save":
        output(dumps_state(state))
    else:
        try:
            coord = parse_coordinate(raw, state.dimensions)
        except ValueError as e:
            output(f"Invalid input: {e}")
            return True
        if state.is_game_over():
            output("Game is over: 'n' for a new game, 'q' to quit")
        elif not is_valid_coordinate(coord, state.dimensions, state.size):
            output(f"Illegal move: {list(coord)} is off the board")
        elif not session.place_marker(coord):
            output(f"Illegal move: {list(coord)} is taken")
    return True


def play_game(
    session: GameSession,
    color: bool = True,
    input_fn: Optional[Callable[[str], str]] = None,
    output: Optional[Callable[[str], None]] = None,
) -> GameSession:
    """
    Run a two-player terminal game until a player quits or input ends.

    Parameters
    ----------
    session : GameSession
        Session to play in; returned when the loop exits.
    color : bool
        Use ANSI colours when drawing the board.
    input_fn : Callable
        Prompt function (default: builtin input).
    output : Callable
        Line sink (default: print).
    """
    input_fn = input_fn or input
    output = output or print
    state = session.state
    output(f"{state.dimensions}D tic-tac-toe, {state.size} in a row wins. 'h' for help.")
    output(state_string(state, color=color))

    try:
        while True:
            try:
                raw = input_fn("Move: ")
            except EOFError:
                break

            before = session.state
            if not _human_turn(session, raw, output):
                break
            if session.state is not before:
                output(state_string(session.state, color=color, highlight=_highlight(session)))
    except KeyboardInterrupt:
        output("\nInterrupted")
    except Exception:
        logger.exception("Fatal error in game loop")
        raise
    return session


__all__ = [
    "parse_coordinate",
    "play_game",
]
