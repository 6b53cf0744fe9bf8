"""
Factory functions for creating games and sessions.
"""

from typing import Optional

from nd_tictactoe.games.game_state import GameState
from nd_tictactoe.session import GameSession
from nd_tictactoe.utils.config import Config, DEFAULT_CONFIG


def create_game(config: Optional[Config] = None) -> GameState:
    """
    Create an initial game state.

    Args:
        config: Validated settings (default: DEFAULT_CONFIG)

    Returns:
        Empty board, X to move
    """
    config = config or DEFAULT_CONFIG
    return GameState.initial(config.dimensions, config.size)


def create_session(
    dimensions: Optional[int] = None,
    size: Optional[int] = None,
) -> GameSession:
    """
    Create a session from raw settings values.

    Raises:
        ValueError: dimensions or size is outside the supported range
    """
    config = Config(
        dimensions if dimensions is not None else DEFAULT_CONFIG.dimensions,
        size if size is not None else DEFAULT_CONFIG.size,
    )
    return GameSession(config)
