"""
Core types shared by the rule engine.

This module contains the value types used throughout nd_tictactoe:
- Occupant: what sits in a cell (int8 codes, 0 = empty)
- Phase: game lifecycle
- Settings: board dimensionality and side length
- Move: one entry of the move log
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Tuple

Coordinate = Tuple[int, ...]


class Occupant(IntEnum):
    """
    Cell occupant, stored as int8 in dense boards:
        0 = empty
        1 = player X
        2 = player O
    """

    EMPTY = 0
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: Optional[str]) -> "Occupant":
        """Parse 'X' / 'O' (or None / ' ' for empty)."""
        if symbol is None or symbol == " ":
            return cls.EMPTY
        try:
            return _FROM_SYMBOL[symbol.upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Unknown occupant symbol: {symbol!r}") from None


_SYMBOLS = {Occupant.EMPTY: " ", Occupant.X: "X", Occupant.O: "O"}
_FROM_SYMBOL = {"X": Occupant.X, "O": Occupant.O}

# The two players, in turn order
PLAYERS = (Occupant.X, Occupant.O)


class Phase(Enum):
    PLAYING = "playing"
    WON = "won"
    DRAWN = "draw"


@dataclass(frozen=True)
class Settings:
    """Board shape: `size` cells along each of `dimensions` axes."""

    dimensions: int
    size: int

    @property
    def total_cells(self) -> int:
        return self.size ** self.dimensions


@dataclass(frozen=True)
class Move:
    """
    A single placed marker.

    The move's sequence number is its index in the move log. `timestamp`
    is display-only and ignored by equality.
    """

    coordinate: Coordinate
    player: Occupant
    timestamp: Optional[float] = field(default=None, compare=False)
