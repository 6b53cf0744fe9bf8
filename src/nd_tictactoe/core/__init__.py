"""
Core module - value types, coordinate validation and hashing.

This module provides the building blocks used throughout the rule engine.
"""

from nd_tictactoe.core.types import (
    Coordinate,
    Move,
    Occupant,
    Phase,
    PLAYERS,
    Settings,
)
from nd_tictactoe.core.coordinates import (
    as_tuple,
    coordinate_key,
    in_bounds,
    is_valid_coordinate,
    iter_coordinates,
    key_to_coordinate,
    normalize,
)
from nd_tictactoe.core.hashing import hash_board

__all__ = [
    # Types
    "Coordinate",
    "Move",
    "Occupant",
    "Phase",
    "PLAYERS",
    "Settings",
    # Coordinates
    "as_tuple",
    "coordinate_key",
    "in_bounds",
    "is_valid_coordinate",
    "iter_coordinates",
    "key_to_coordinate",
    "normalize",
    # Functions
    "hash_board",
]
