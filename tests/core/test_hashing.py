"""
Tests for nd_tictactoe.core.hashing

Tests board fingerprints.
"""

import numpy as np

from nd_tictactoe.core.hashing import hash_board


class TestHashDeterminism:
    """Tests that hashing is deterministic."""

    def test_same_board_same_hash(self):
        """Identical boards produce identical hashes."""
        board = np.array([[1, 0, 2], [0, 1, 0], [2, 0, 1]], dtype=np.int8)
        assert hash_board(board) == hash_board(board.copy())

    def test_dtype_normalized(self):
        """Same occupancy in a wider dtype hashes the same."""
        board = np.array([[1, 0], [0, 2]], dtype=np.int8)
        assert hash_board(board) == hash_board(board.astype(np.int32))


class TestHashUniqueness:
    """Tests that different boards produce different hashes."""

    def test_different_boards_different_hash(self):
        board1 = np.array([[1, 0, 0], [0, 0, 0], [0, 0, 0]], dtype=np.int8)
        board2 = np.array([[0, 1, 0], [0, 0, 0], [0, 0, 0]], dtype=np.int8)
        assert hash_board(board1) != hash_board(board2)

    def test_shape_matters(self):
        """Empty 2x2x2 and empty 4x2 boards differ."""
        assert hash_board(np.zeros((2, 2, 2), dtype=np.int8)) != hash_board(
            np.zeros((4, 2), dtype=np.int8)
        )


class TestHashFormat:
    """Tests for hash format."""

    def test_hash_is_hex_string(self):
        h = hash_board(np.zeros((3, 3), dtype=np.int8))
        assert isinstance(h, str)
        assert len(h) == 16
        assert all(c in "0123456789abcdef" for c in h)
