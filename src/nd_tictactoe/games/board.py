"""
Board - immutable n^d grid of occupants.

The board only knows where markers are and whether a cell can take one.
Deciding wins and draws is the rule layer's job (game_rules).
"""

from __future__ import annotations

from typing import Iterator, Tuple

import numpy as np

from nd_tictactoe.core.coordinates import as_tuple, is_valid_coordinate
from nd_tictactoe.core.types import Coordinate, Occupant, Settings
from nd_tictactoe.games.storage import CellStorage, create_storage


class Board:
    """
    Immutable board backed by a single CellStorage.

    Every mutation returns a new Board; the storage underneath is
    persistent, so the old Board keeps its cells.
    """

    __slots__ = ("_storage",)

    def __init__(self, storage: CellStorage):
        self._storage = storage

    @classmethod
    def empty(cls, dimensions: int, size: int) -> "Board":
        return cls(create_storage(dimensions, size))

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def dimensions(self) -> int:
        return self._storage.dimensions

    @property
    def size(self) -> int:
        return self._storage.size

    @property
    def settings(self) -> Settings:
        return Settings(self.dimensions, self.size)

    @property
    def storage(self) -> CellStorage:
        return self._storage

    @property
    def storage_kind(self) -> str:
        """'dense' or 'sparse'."""
        return self._storage.kind

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, coord) -> Occupant:
        """Occupant at coord. Raises IndexError for off-board coordinates."""
        return self._storage.get(coord)

    def is_valid_coordinate(self, coord) -> bool:
        return is_valid_coordinate(coord, self.dimensions, self.size)

    def is_empty(self, coord) -> bool:
        """True if coord is on the board and unoccupied (False for bad coordinates)."""
        coord = as_tuple(coord)
        if not self.is_valid_coordinate(coord):
            return False
        return self._storage.get(coord) == Occupant.EMPTY

    def is_valid_move(self, coord) -> bool:
        return self.is_empty(coord)

    def is_full(self) -> bool:
        return self._storage.is_full()

    @property
    def occupied_count(self) -> int:
        return self._storage.occupied_count

    def cells(self) -> Iterator[Tuple[Coordinate, Occupant]]:
        """(coordinate, occupant) for every occupied cell."""
        return self._storage.items()

    def to_array(self) -> np.ndarray:
        """Dense int8 copy for display and hashing."""
        return self._storage.to_array()

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def apply_move(self, coord, occupant: Occupant) -> "Board":
        """
        Return a new Board with `occupant` placed at coord.

        Raises:
            IndexError: coord is not on the board.
            ValueError: the cell is taken, or occupant is EMPTY.
        """
        occupant = Occupant(occupant)
        if occupant == Occupant.EMPTY:
            raise ValueError("Cannot place an empty marker")
        if self._storage.get(coord) != Occupant.EMPTY:
            raise ValueError(f"Cell {tuple(coord)} is occupied")
        return Board(self._storage.set(coord, occupant))

    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._storage == other._storage

    def __hash__(self) -> int:
        return hash(self._storage)

    def __repr__(self) -> str:
        return (
            f"Board(dimensions={self.dimensions}, size={self.size}, "
            f"occupied={self.occupied_count}, storage={self.storage_kind!r})"
        )
