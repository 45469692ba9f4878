"""Fixed-size character screen buffer."""

from __future__ import annotations

import numpy as np

SCREEN_ROWS = 25
SCREEN_COLS = 80


class Screen:
    """Character grid that boards and status lines are drawn into."""

    def __init__(self, rows: int = SCREEN_ROWS, cols: int = SCREEN_COLS) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"Screen must be at least 1x1, got {rows}x{cols}.")
        self.rows = rows
        self.cols = cols
        self._cells = np.full((rows, cols), " ", dtype="<U1")

    def clear(self) -> None:
        self._cells[:, :] = " "

    def write(self, row: int, col: int, text: str) -> None:
        """Write text starting at ``(row, col)``; anything past the edge is dropped."""
        if not 0 <= row < self.rows or col >= self.cols:
            return
        for offset, char in enumerate(text):
            target = col + offset
            if target >= self.cols:
                break
            if target >= 0:
                self._cells[row, target] = char

    def char_at(self, row: int, col: int) -> str:
        return str(self._cells[row, col])

    def lines(self) -> list[str]:
        return ["".join(row) for row in self._cells]

    def render(self) -> str:
        return "\n".join(self.lines()) + "\n"


def board_span(width: int) -> int:
    """Return the column offset of the second of two side-by-side boards."""
    return max(SCREEN_COLS // 2, 3 * (width + 1) + 2)


def screen_size_for(width: int, height: int) -> tuple[int, int]:
    """Return ``(rows, cols)`` that fit two boards side by side plus status lines."""
    # Placement screens draw one row lower; label sits two rows under the grid.
    board_rows = 2 * height + 5
    return max(SCREEN_ROWS, board_rows), max(SCREEN_COLS, 2 * board_span(width))
