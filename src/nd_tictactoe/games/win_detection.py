"""
Direction enumeration and win detection for n^d boards.

A line through a cell is described by a step vector over {-1, 0, 1}^D.
There are 3^D - 1 non-zero steps; v and -v describe the same line, so
the detector only walks the canonical half and counts both ways.
"""

from __future__ import annotations

from functools import lru_cache
from itertools import product
from typing import List, Optional, Sequence, Tuple

from nd_tictactoe.core.coordinates import in_bounds, normalize
from nd_tictactoe.core.types import Coordinate, Occupant
from nd_tictactoe.games.storage import CellStorage

Direction = Tuple[int, ...]


@lru_cache(maxsize=None)
def directions(dimensions: int) -> Tuple[Direction, ...]:
    """All non-zero step vectors in {-1, 0, 1}^dimensions (3^D - 1 of them)."""
    return tuple(
        v for v in product((-1, 0, 1), repeat=dimensions) if any(v)
    )


@lru_cache(maxsize=None)
def canonical_directions(dimensions: int) -> Tuple[Direction, ...]:
    """One step vector per line axis: those whose first non-zero component is +1."""
    return tuple(
        v for v in directions(dimensions) if next(c for c in v if c) == 1
    )


def direction_count(dimensions: int) -> int:
    return 3 ** dimensions - 1


def count_in_direction(
    storage: CellStorage,
    start: Sequence[int],
    occupant: Occupant,
    direction: Direction,
    sign: int = 1,
) -> int:
    """
    Count consecutive `occupant` cells after `start`, stepping by
    sign * direction. Stops at the first off-board or mismatched cell.
    """
    size = storage.size
    current = list(start)
    count = 0
    while True:
        for i, step in enumerate(direction):
            current[i] += sign * step
        if not in_bounds(current, size):
            return count
        if storage.get(current) != occupant:
            return count
        count += 1


def _run_length(storage, coord, occupant, direction) -> Tuple[int, int]:
    forward = count_in_direction(storage, coord, occupant, direction, 1)
    backward = count_in_direction(storage, coord, occupant, direction, -1)
    return forward, backward


def has_winning_line(
    storage: CellStorage,
    coord: Sequence[int],
    occupant: Occupant,
    dimensions: int,
    size: int,
) -> bool:
    """
    Return True if a run of at least `size` markers of `occupant` passes
    through coord. Only lines through coord are inspected.
    """
    return winning_line(storage, coord, occupant, dimensions, size) is not None


def winning_line(
    storage: CellStorage,
    coord: Sequence[int],
    occupant: Occupant,
    dimensions: int,
    size: int,
) -> Optional[List[Coordinate]]:
    """
    Return the cells of the first qualifying run through coord, ordered
    along its direction, or None when there is none.
    """
    if occupant == Occupant.EMPTY:
        return None

    coord = normalize(coord)
    for direction in canonical_directions(dimensions):
        forward, backward = _run_length(storage, coord, occupant, direction)
        if 1 + forward + backward >= size:
            return [
                tuple(c + k * step for c, step in zip(coord, direction))
                for k in range(-backward, forward + 1)
            ]
    return None
