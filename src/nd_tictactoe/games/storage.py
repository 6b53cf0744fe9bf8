"""
Cell storage - persistent maps from coordinate to occupant.

Two interchangeable representations, picked by dimensionality:

    DenseStorage   D < SPARSE_DIMENSION_THRESHOLD
                   int8 ndarray of shape (L,)*D, O(1) access, L**D memory.
    SparseStorage  D >= SPARSE_DIMENSION_THRESHOLD
                   dict keyed by the row-major flat index of occupied cells,
                   memory proportional to the number of markers.

Both are immutable: set() returns a new storage and never touches the
receiver, so old snapshots stay valid forever.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Iterator, Optional, Tuple

import numpy as np

from nd_tictactoe.core.coordinates import (
    coordinate_key,
    is_valid_coordinate,
    key_to_coordinate,
    normalize,
)
from nd_tictactoe.core.types import Coordinate, Occupant

SPARSE_DIMENSION_THRESHOLD = 5


class CellStorage(ABC):
    """
    Abstract occupancy container for a size**dimensions grid.

    get() on an empty in-bounds cell returns Occupant.EMPTY. Any coordinate
    with the wrong arity or outside the grid raises IndexError.
    """

    __slots__ = ("_dimensions", "_size", "_count")

    kind: str = ""

    def __init__(self, dimensions: int, size: int, count: int = 0):
        self._dimensions = dimensions
        self._size = size
        self._count = count

    @property
    def dimensions(self) -> int:
        return self._dimensions

    @property
    def size(self) -> int:
        return self._size

    @property
    def total_cells(self) -> int:
        return self._size ** self._dimensions

    @property
    def occupied_count(self) -> int:
        """Number of non-empty cells, tracked incrementally."""
        return self._count

    def is_full(self) -> bool:
        return self._count >= self.total_cells

    def _check(self, coord) -> Coordinate:
        if not is_valid_coordinate(coord, self._dimensions, self._size):
            raise IndexError(
                f"Coordinate {coord!r} is not on a {self._dimensions}D board "
                f"of size {self._size}"
            )
        return normalize(coord)

    @abstractmethod
    def get(self, coord) -> Occupant:
        """Return the occupant at coord."""

    @abstractmethod
    def set(self, coord, occupant: Occupant) -> "CellStorage":
        """Return a new storage with coord set to occupant."""

    @abstractmethod
    def items(self) -> Iterator[Tuple[Coordinate, Occupant]]:
        """Yield (coordinate, occupant) for every occupied cell, row-major order."""

    @abstractmethod
    def to_array(self) -> np.ndarray:
        """Dense int8 copy of the grid, shape (size,)*dimensions."""

    def __eq__(self, other) -> bool:
        if not isinstance(other, CellStorage):
            return NotImplemented
        return (
            self._dimensions == other._dimensions
            and self._size == other._size
            and self._count == other._count
            and list(self.items()) == list(other.items())
        )

    def __hash__(self) -> int:
        return hash((self._dimensions, self._size, tuple(self.items())))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(dimensions={self._dimensions}, "
            f"size={self._size}, occupied={self._count})"
        )


class DenseStorage(CellStorage):
    """int8 ndarray storage; set() copies the array (copy-on-write)."""

    __slots__ = ("_cells",)

    kind = "dense"

    def __init__(
        self,
        dimensions: int,
        size: int,
        cells: Optional[np.ndarray] = None,
        count: int = 0,
    ):
        super().__init__(dimensions, size, count)
        if cells is None:
            cells = np.zeros((size,) * dimensions, dtype=np.int8)
        # Shared between snapshots, so never writable
        cells.flags.writeable = False
        self._cells = cells

    def get(self, coord) -> Occupant:
        return Occupant(int(self._cells[self._check(coord)]))

    def set(self, coord, occupant: Occupant) -> "DenseStorage":
        key = self._check(coord)
        occupant = Occupant(occupant)
        current = Occupant(int(self._cells[key]))
        if current == occupant:
            return self

        cells = self._cells.copy()
        cells[key] = occupant
        count = self._count + _delta(current, occupant)
        return DenseStorage(self._dimensions, self._size, cells, count)

    def items(self) -> Iterator[Tuple[Coordinate, Occupant]]:
        for idx in np.argwhere(self._cells != 0):
            coord = normalize(idx)
            yield coord, Occupant(int(self._cells[coord]))

    def to_array(self) -> np.ndarray:
        return self._cells.copy()


class SparseStorage(CellStorage):
    """Dict storage holding occupied cells only."""

    __slots__ = ("_cells",)

    kind = "sparse"

    def __init__(
        self,
        dimensions: int,
        size: int,
        cells: Optional[Dict[int, Occupant]] = None,
    ):
        cells = {} if cells is None else cells
        super().__init__(dimensions, size, len(cells))
        self._cells = cells

    def get(self, coord) -> Occupant:
        key = coordinate_key(self._check(coord), self._size)
        return self._cells.get(key, Occupant.EMPTY)

    def set(self, coord, occupant: Occupant) -> "SparseStorage":
        key = coordinate_key(self._check(coord), self._size)
        occupant = Occupant(occupant)
        if self._cells.get(key, Occupant.EMPTY) == occupant:
            return self

        cells = dict(self._cells)
        if occupant == Occupant.EMPTY:
            del cells[key]
        else:
            cells[key] = occupant
        return SparseStorage(self._dimensions, self._size, cells)

    def items(self) -> Iterator[Tuple[Coordinate, Occupant]]:
        for key in sorted(self._cells):
            yield key_to_coordinate(key, self._dimensions, self._size), self._cells[key]

    def to_array(self) -> np.ndarray:
        arr = np.zeros((self._size,) * self._dimensions, dtype=np.int8)
        for coord, occupant in self.items():
            arr[coord] = occupant
        return arr


def _delta(before: Occupant, after: Occupant) -> int:
    return int(after != Occupant.EMPTY) - int(before != Occupant.EMPTY)


def create_storage(dimensions: int, size: int) -> CellStorage:
    """Empty storage, dense below the dimension threshold and sparse at or above it."""
    if dimensions >= SPARSE_DIMENSION_THRESHOLD:
        return SparseStorage(dimensions, size)
    return DenseStorage(dimensions, size)
