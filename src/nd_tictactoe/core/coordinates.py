"""
Coordinate validation and canonical encoding.

A coordinate is a tuple of D non-negative ints, each < L. Sparse storage
keys cells by their row-major flat index, which is unique for every
in-bounds coordinate (no string joining, so (1, 23) and (12, 3) never
collide).
"""

from __future__ import annotations

import numbers
from itertools import product
from typing import Iterator, Sequence

import numpy as np

from nd_tictactoe.core.types import Coordinate


def _is_int(value) -> bool:
    # bool is an Integral, but True is not a coordinate
    return isinstance(value, (numbers.Integral, np.integer)) and not isinstance(
        value, (bool, np.bool_)
    )


def normalize(coord: Sequence[int]) -> Coordinate:
    """Return coord as a tuple of Python ints (accepts lists and numpy arrays)."""
    return tuple(int(c) for c in coord)


def as_tuple(coord):
    """Read an iterable coordinate into a tuple once; other values pass through."""
    if isinstance(coord, (tuple, str, bytes)):
        return coord
    try:
        return tuple(coord)
    except TypeError:
        return coord


def in_bounds(coord: Sequence[int], size: int) -> bool:
    """Return True if every component lies in [0, size)."""
    return all(0 <= c < size for c in coord)


def is_valid_coordinate(coord, dimensions: int, size: int) -> bool:
    """
    Return True if coord is a sequence of exactly `dimensions` integers,
    each inside [0, size).
    """
    if isinstance(coord, (str, bytes)):
        return False
    try:
        components = list(coord)
    except TypeError:
        return False

    if len(components) != dimensions:
        return False
    return all(_is_int(c) for c in components) and in_bounds(components, size)


def coordinate_key(coord: Sequence[int], size: int) -> int:
    """Row-major flat index of an in-bounds coordinate."""
    key = 0
    for c in coord:
        key = key * size + int(c)
    return key


def key_to_coordinate(key: int, dimensions: int, size: int) -> Coordinate:
    """Inverse of coordinate_key."""
    out = [0] * dimensions
    for i in range(dimensions - 1, -1, -1):
        key, out[i] = divmod(key, size)
    return tuple(out)


def iter_coordinates(dimensions: int, size: int) -> Iterator[Coordinate]:
    """Every coordinate of the size**dimensions grid, row-major order."""
    return product(range(size), repeat=dimensions)
