"""
Board hashing utilities - optimized for int8 arrays.
"""

import hashlib
import numpy as np


def hash_board(board: np.ndarray) -> str:
    """
    Stable fingerprint of an occupancy array.

    Shape is mixed in so that boards with the same cells but a different
    (D, L) never share a hash.
    """
    board = np.ascontiguousarray(board, dtype=np.int8)
    h = hashlib.sha256(repr(board.shape).encode())
    h.update(board.tobytes())
    return h.hexdigest()[:16]
