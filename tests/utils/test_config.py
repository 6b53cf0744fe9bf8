"""
Tests for nd_tictactoe.utils.config

Tests settings validation at the configuration boundary.
"""

import numpy as np
import pytest

from nd_tictactoe.core.types import Settings
from nd_tictactoe.utils.config import (
    Config,
    DEFAULT_CONFIG,
    MAX_DIMENSIONS,
    MAX_SIZE,
    MIN_DIMENSIONS,
    MIN_SIZE,
    validate_dimensions,
    validate_size,
)


class TestValidateDimensions:
    """Dimension range checks."""

    @pytest.mark.parametrize("value", [MIN_DIMENSIONS, 4, MAX_DIMENSIONS])
    def test_accepts_range(self, value):
        assert validate_dimensions(value) == value

    @pytest.mark.parametrize("value", [0, 1, 9, -2])
    def test_rejects_out_of_range(self, value):
        with pytest.raises(ValueError, match="between 2 and 8"):
            validate_dimensions(value)

    @pytest.mark.parametrize("value", [2.0, "3", None, True])
    def test_rejects_non_integers(self, value):
        with pytest.raises(ValueError, match="integer"):
            validate_dimensions(value)

    def test_numpy_int(self):
        assert validate_dimensions(np.int64(3)) == 3


class TestValidateSize:
    """Grid size range checks."""

    @pytest.mark.parametrize("value", [MIN_SIZE, 3, MAX_SIZE])
    def test_accepts_range(self, value):
        assert validate_size(value) == value

    @pytest.mark.parametrize("value", [1, 7, 0])
    def test_rejects_out_of_range(self, value):
        with pytest.raises(ValueError, match="between 2 and 6"):
            validate_size(value)


class TestConfig:
    """Config class tests."""

    def test_default_config(self):
        config = Config()
        assert config.dimensions == 4
        assert config.size == 4
        assert DEFAULT_CONFIG.settings == config.settings

    def test_settings(self):
        assert Config(3, 5).settings == Settings(3, 5)

    def test_invalid_raises(self):
        with pytest.raises(ValueError):
            Config(dimensions=2, size=10)

    def test_sparse_flag(self):
        assert not Config(4, 3).uses_sparse_storage
        assert Config(5, 3).uses_sparse_storage
