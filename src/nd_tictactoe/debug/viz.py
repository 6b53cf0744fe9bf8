"""
Terminal rendering for n^d boards.

A board is drawn as a sequence of 2D slices. The last two axes form the
rows and columns of each slice; the leading axes label the slice:

    [0, 1, *, *]
    ╭───┬───┬───╮
    │ X │   │ O │
    ├───┼───┼───┤
    ...
"""

from __future__ import annotations

import re
from itertools import product
from typing import Iterable, List, Optional, Sequence, Set, Tuple

import numpy as np

from nd_tictactoe.core.types import Occupant, Phase
from nd_tictactoe.games.board import Board
from nd_tictactoe.games.game_state import GameState

# ═══════════════════════════════════════════════════════════════════════════════
# ANSI Colors & Styling
# ═══════════════════════════════════════════════════════════════════════════════

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"

FG = {
    Occupant.X: "\033[38;5;201m",  # Magenta
    Occupant.O: "\033[38;5;51m",  # Cyan
}

BG_HIGHLIGHT = "\033[48;5;22m"  # Dark green

_ANSI_RE = re.compile(r"\033\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


# ═══════════════════════════════════════════════════════════════════════════════
# Slices
# ═══════════════════════════════════════════════════════════════════════════════

def _cell(value: int, color: bool, highlighted: bool) -> str:
    occupant = Occupant(int(value))
    text = occupant.symbol
    if not color:
        return text
    if occupant != Occupant.EMPTY:
        text = f"{BOLD}{FG[occupant]}{text}{RESET}"
    if highlighted:
        text = f"{BG_HIGHLIGHT}{text}{RESET}"
    return text


def render_slice(
    grid: np.ndarray,
    color: bool = True,
    highlight: Optional[Set[Tuple[int, int]]] = None,
) -> List[str]:
    """Box-drawn lines for a single 2D grid of occupant codes."""
    rows, cols = grid.shape
    highlight = highlight or set()
    top = "╭" + "┬".join(["───"] * cols) + "╮"
    mid = "├" + "┼".join(["───"] * cols) + "┤"
    bottom = "╰" + "┴".join(["───"] * cols) + "╯"

    lines = [top]
    for r in range(rows):
        cells = (_cell(grid[r, c], color, (r, c) in highlight) for c in range(cols))
        lines.append("│ " + " │ ".join(cells) + " │")
        if r < rows - 1:
            lines.append(mid)
    lines.append(bottom)
    return lines


def _slice_label(prefix: Sequence[int]) -> str:
    return "[" + ", ".join([str(p) for p in prefix] + ["*", "*"]) + "]"


def render_board(
    board: Board,
    color: bool = True,
    highlight: Iterable[Sequence[int]] = (),
    max_slices: int = 64,
) -> str:
    """
    Render every 2D slice of the board.

    When the board has more than `max_slices` slices only the occupied
    ones are drawn.
    """
    arr = board.to_array()
    marked = {tuple(c) for c in highlight}

    if arr.ndim == 0:
        return _cell(arr, color, () in marked)
    if arr.ndim == 1:
        arr = arr.reshape(1, -1)
        marked = {(0,) + c for c in marked}

    outer = arr.shape[:-2]
    prefixes = list(product(*(range(n) for n in outer)))
    skipped = 0
    if len(prefixes) > max_slices:
        kept = [p for p in prefixes if np.any(arr[p])]
        skipped = len(prefixes) - len(kept)
        prefixes = kept

    blocks: List[str] = []
    for prefix in prefixes:
        local = {c[-2:] for c in marked if c[:-2] == prefix}
        lines = render_slice(arr[prefix], color=color, highlight=local)
        if outer:
            lines.insert(0, _slice_label(prefix))
        blocks.append("\n".join(lines))

    if skipped:
        note = f"({skipped} empty slices not shown)"
        blocks.append(f"{DIM}{note}{RESET}" if color else note)
    return "\n\n".join(blocks)


def status_line(state: GameState) -> str:
    if state.phase is Phase.WON:
        return f"Player {state.winner.symbol} wins after {len(state.moves)} moves"
    if state.phase is Phase.DRAWN:
        return f"Draw after {len(state.moves)} moves"
    return f"Player {state.current_player.symbol} to move (move {len(state.moves) + 1})"


def state_string(state: GameState, color: bool = True, highlight: Iterable[Sequence[int]] = ()) -> str:
    """Board plus a one-line status."""
    return render_board(state.board, color=color, highlight=highlight) + "\n" + status_line(state)
