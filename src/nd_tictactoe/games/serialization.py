"""
GameState <-> plain data (dicts, lists, str, int, float, None).

Snapshot layout:

    {
        "schema_version": "1.0",
        "settings": {"dimensions": D, "size": L},
        "board": {"dimensions": D, "size": L, "type": "dense" | "sparse", "data": ...},
        "current_player": "X",
        "phase": "playing" | "won" | "draw",
        "winner": None | "X" | "O",
        "moves": [{"coordinate": [...], "player": "X", "timestamp": 1.0}, ...],
    }

Dense board data is a D-deep nested list of None / "X" / "O". Sparse board
data is a list of [coordinate, symbol] pairs for occupied cells only.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Tuple

import numpy as np

from nd_tictactoe.core.coordinates import coordinate_key, is_valid_coordinate, normalize
from nd_tictactoe.core.types import Coordinate, Move, Occupant, Phase
from nd_tictactoe.games.board import Board
from nd_tictactoe.games.game_state import GameState
from nd_tictactoe.games.storage import SPARSE_DIMENSION_THRESHOLD, DenseStorage, SparseStorage
from nd_tictactoe.games.win_detection import has_winning_line

SCHEMA_VERSION = "1.0"


class SerializationError(ValueError):
    """Snapshot is malformed or inconsistent with its declared settings."""


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def _symbol(occupant: Occupant):
    return None if occupant == Occupant.EMPTY else occupant.symbol


def _nested(arr: np.ndarray):
    if arr.ndim == 0:
        return _symbol(Occupant(int(arr)))
    return [_nested(sub) for sub in arr]


def encode_board(board: Board) -> Dict[str, Any]:
    if board.storage_kind == "dense":
        data = _nested(board.to_array())
    else:
        data = [[list(coord), _symbol(occ)] for coord, occ in board.cells()]

    return {
        "dimensions": board.dimensions,
        "size": board.size,
        "type": board.storage_kind,
        "data": data,
    }


def encode_state(state: GameState) -> Dict[str, Any]:
    """Convert a GameState to a JSON-friendly snapshot."""
    return {
        "schema_version": SCHEMA_VERSION,
        "settings": {"dimensions": state.dimensions, "size": state.size},
        "board": encode_board(state.board),
        "current_player": state.current_player.symbol,
        "phase": state.phase.value,
        "winner": _symbol(state.winner) if state.winner is not None else None,
        "moves": [
            {
                "coordinate": list(move.coordinate),
                "player": move.player.symbol,
                "timestamp": move.timestamp,
            }
            for move in state.moves
        ],
    }


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def _occupant(value, where: str) -> Occupant:
    try:
        return Occupant.from_symbol(value)
    except ValueError as e:
        raise SerializationError(f"{where}: {e}") from None


def _player(value, where: str) -> Occupant:
    occupant = _occupant(value, where)
    if occupant == Occupant.EMPTY:
        raise SerializationError(f"{where}: expected 'X' or 'O', got {value!r}")
    return occupant


def _non_negative_int(value, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SerializationError(f"{where} must be a non-negative integer, got {value!r}")
    return value


def _decode_dense(data, dimensions: int, size: int) -> List[Tuple[Coordinate, Occupant]]:
    cells: List[Tuple[Coordinate, Occupant]] = []

    def walk(node, prefix: Tuple[int, ...]) -> None:
        depth = len(prefix)
        if depth == dimensions:
            if isinstance(node, list):
                raise SerializationError(
                    f"Dense board nests deeper than {dimensions} levels at {prefix}"
                )
            occupant = _occupant(node, f"cell {prefix}")
            if occupant != Occupant.EMPTY:
                cells.append((prefix, occupant))
            return
        if not isinstance(node, list) or len(node) != size:
            got = len(node) if isinstance(node, list) else type(node).__name__
            raise SerializationError(
                f"Dense board level {depth} at {prefix} has {got} entries; "
                f"declared size is {size}"
            )
        for i, child in enumerate(node):
            walk(child, prefix + (i,))

    walk(data, ())
    return cells


def _decode_sparse(data, dimensions: int, size: int) -> List[Tuple[Coordinate, Occupant]]:
    if not isinstance(data, list):
        raise SerializationError("Sparse board data must be a list of [coordinate, player] pairs")

    cells: List[Tuple[Coordinate, Occupant]] = []
    seen = set()
    for entry in data:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise SerializationError(f"Sparse entry {entry!r} is not a [coordinate, player] pair")
        coord, symbol = entry
        if not is_valid_coordinate(coord, dimensions, size):
            raise SerializationError(
                f"Sparse coordinate {coord!r} does not fit a {dimensions}D board of size {size}"
            )
        coord = normalize(coord)
        if coord in seen:
            raise SerializationError(f"Sparse coordinate {list(coord)} appears twice")
        seen.add(coord)
        cells.append((coord, _player(symbol, f"cell {coord}")))
    return cells


def decode_board(payload: Mapping[str, Any]) -> Board:
    try:
        dimensions = _non_negative_int(payload["dimensions"], "board.dimensions")
        size = _non_negative_int(payload["size"], "board.size")
        kind = payload["type"]
        data = payload["data"]
    except (KeyError, TypeError) as e:
        raise SerializationError(f"Board payload is missing {e}") from None

    if kind == "dense":
        cells = _decode_dense(data, dimensions, size)
    elif kind == "sparse":
        cells = _decode_sparse(data, dimensions, size)
    else:
        raise SerializationError(f"Unknown board type: {kind!r}")

    # The storage variant follows D, whatever layout the snapshot used
    if dimensions >= SPARSE_DIMENSION_THRESHOLD:
        keyed = {coordinate_key(coord, size): occ for coord, occ in cells}
        return Board(SparseStorage(dimensions, size, keyed))

    try:
        arr = np.zeros((size,) * dimensions, dtype=np.int8)
    except (ValueError, MemoryError):
        raise SerializationError(
            f"Dense board of size {size}^{dimensions} is too large to build"
        ) from None
    for coord, occupant in cells:
        arr[coord] = occupant
    return Board(DenseStorage(dimensions, size, arr, len(cells)))


def decode_state(snapshot: Mapping[str, Any]) -> GameState:
    """
    Rebuild a GameState from a snapshot.

    Raises:
        SerializationError: the snapshot is malformed, its move log does
            not replay onto its board, or its phase does not match the board.
    """
    if not isinstance(snapshot, Mapping):
        raise SerializationError(f"Snapshot must be a mapping, got {type(snapshot).__name__}")

    version = snapshot.get("schema_version")
    if version != SCHEMA_VERSION:
        raise SerializationError(f"Unsupported schema_version: {version!r}")

    try:
        settings = snapshot["settings"]
        board = decode_board(snapshot["board"])
        dimensions = settings["dimensions"]
        size = settings["size"]
    except (KeyError, TypeError) as e:
        raise SerializationError(f"Snapshot is missing {e}") from None

    if (dimensions, size) != (board.dimensions, board.size):
        raise SerializationError(
            f"Settings declare {dimensions}D/{size} but board is "
            f"{board.dimensions}D/{board.size}"
        )

    try:
        phase = Phase(snapshot["phase"])
    except (KeyError, ValueError):
        raise SerializationError(f"Unknown phase: {snapshot.get('phase')!r}") from None

    current_player = _player(snapshot.get("current_player"), "current_player")
    winner_raw = snapshot.get("winner")
    winner = None if winner_raw is None else _player(winner_raw, "winner")
    if (phase is Phase.WON) != (winner is not None):
        raise SerializationError(
            f"Phase {phase.value!r} is inconsistent with winner {winner_raw!r}"
        )

    moves_raw = snapshot.get("moves", [])
    if not isinstance(moves_raw, list):
        raise SerializationError(f"moves must be a list, got {type(moves_raw).__name__}")
    moves = tuple(_decode_move(m, dimensions, size) for m in moves_raw)
    if len(moves) != board.occupied_count:
        raise SerializationError(
            f"Move log has {len(moves)} entries but board has "
            f"{board.occupied_count} occupied cells"
        )

    replayed = Board.empty(dimensions, size)
    for i, move in enumerate(moves):
        try:
            replayed = replayed.apply_move(move.coordinate, move.player)
        except (IndexError, ValueError) as e:
            raise SerializationError(f"Move {i} cannot be replayed: {e}") from None
    if replayed != board:
        raise SerializationError("Move log disagrees with the board")

    _check_phase(board, phase, winner, moves)

    return GameState(
        board=board,
        current_player=current_player,
        phase=phase,
        winner=winner,
        moves=moves,
    )


def _check_phase(board: Board, phase: Phase, winner, moves: Tuple[Move, ...]) -> None:
    last = moves[-1] if moves else None
    won = last is not None and has_winning_line(
        board.storage, last.coordinate, last.player, board.dimensions, board.size
    )

    if phase is Phase.WON:
        if not won:
            raise SerializationError("Phase 'won' but the last move completes no line")
        if winner != last.player:
            raise SerializationError(
                f"Winner {winner.symbol} did not make the winning move"
            )
    elif phase is Phase.DRAWN:
        if won or not board.is_full():
            raise SerializationError("Phase 'draw' needs a full board with no winning line")
    elif won or board.is_full():
        raise SerializationError("Phase 'playing' but the game is already over")


def _decode_move(payload: Mapping[str, Any], dimensions: int, size: int) -> Move:
    try:
        coord = payload["coordinate"]
        player = payload["player"]
    except (KeyError, TypeError):
        raise SerializationError(f"Malformed move entry: {payload!r}") from None

    if not is_valid_coordinate(coord, dimensions, size):
        raise SerializationError(
            f"Move coordinate {coord!r} does not fit a {dimensions}D board of size {size}"
        )
    timestamp = payload.get("timestamp")
    if timestamp is not None:
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            raise SerializationError(f"move.timestamp must be a number, got {timestamp!r}")
        timestamp = float(timestamp)
    return Move(normalize(coord), _player(player, "move.player"), timestamp=timestamp)



# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def dumps_state(state: GameState, **kwargs) -> str:
    return json.dumps(encode_state(state), **kwargs)


def loads_state(text: str) -> GameState:
    try:
        snapshot = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON snapshot: {e}") from e
    return decode_state(snapshot)


__all__ = [
    "SCHEMA_VERSION",
    "SerializationError",
    "encode_board",
    "encode_state",
    "decode_board",
    "decode_state",
    "dumps_state",
    "loads_state",
]
