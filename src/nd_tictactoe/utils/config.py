"""
Configuration and settings validation.

This is the settings boundary: dimension count and grid size are checked
here before they ever reach the rule engine.
"""

import numbers

from nd_tictactoe.core.types import Settings
from nd_tictactoe.games.storage import SPARSE_DIMENSION_THRESHOLD


# ---------------------------------------------------------------------------
# Supported ranges
# ---------------------------------------------------------------------------

MIN_DIMENSIONS = 2
MAX_DIMENSIONS = 8

MIN_SIZE = 2
MAX_SIZE = 6


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_DIMENSIONS = 4
DEFAULT_SIZE = 4


def _validate_int(value, name: str, low: int, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    value = int(value)
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")
    return value


def validate_dimensions(value) -> int:
    return _validate_int(value, "Dimensions", MIN_DIMENSIONS, MAX_DIMENSIONS)


def validate_size(value) -> int:
    return _validate_int(value, "Grid size", MIN_SIZE, MAX_SIZE)


class Config:
    """Validated game settings with sensible defaults."""

    def __init__(
        self,
        dimensions: int = DEFAULT_DIMENSIONS,
        size: int = DEFAULT_SIZE,
    ):
        self.dimensions = validate_dimensions(dimensions)
        self.size = validate_size(size)

    @property
    def settings(self) -> Settings:
        return Settings(self.dimensions, self.size)

    @property
    def uses_sparse_storage(self) -> bool:
        return self.dimensions >= SPARSE_DIMENSION_THRESHOLD

    def __repr__(self) -> str:
        return f"Config(dimensions={self.dimensions}, size={self.size})"


# Default configuration
DEFAULT_CONFIG = Config()
