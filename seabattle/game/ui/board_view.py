"""Text rendering of boards into a screen buffer."""

from __future__ import annotations

from enum import StrEnum

from seabattle.game.app.commands import Alphabet
from seabattle.game.core.board import BoardState
from seabattle.game.core.models import Coord
from seabattle.game.ui.screen import Screen

_DIAGONALS: tuple[tuple[int, int], ...] = ((-1, -1), (1, 1), (-1, 1), (1, -1))


class CellMark(StrEnum):
    """Character shown for a single board cell."""

    WATER = " "
    MISS = "."
    HIT = "X"
    SHIP = "B"
    NEAR_HIT = "~"


def cell_mark(board: BoardState, coord: Coord, *, reveal: bool) -> CellMark:
    """Resolve the mark for one cell.

    Unfired cells diagonal to a hit ship cell get the near-hit halo, which is
    display feedback only.
    """
    if board.was_fired(coord):
        return CellMark.HIT if board.is_ship(coord) else CellMark.MISS
    for d_row, d_col in _DIAGONALS:
        corner = Coord(coord.row + d_row, coord.col + d_col)
        if board.was_fired(corner) and board.is_ship(corner):
            return CellMark.NEAR_HIT
    if reveal and board.is_ship(coord):
        return CellMark.SHIP
    return CellMark.WATER


def render_board(
    screen: Screen,
    board: BoardState,
    *,
    left: int,
    top: int,
    reveal: bool,
    alphabet: Alphabet,
) -> None:
    """Draw a board grid with labels and the remaining-parts status line.

    Layout per cell: mark at ``left + (x+1)*3``, ``|`` right of it, and a
    ``--+`` ruler on the row below.
    """
    for y in range(board.height):
        screen_row = top + y * 2 + 1
        screen.write(screen_row, left, str(y))
        for x in range(board.width):
            screen_col = left + (x + 1) * 3
            screen.write(top, screen_col, alphabet.column_label(x))
            mark = cell_mark(board, Coord(row=y, col=x), reveal=reveal)
            screen.write(screen_row, screen_col, f"{mark.value}|")
            screen.write(screen_row + 1, screen_col - 1, "--+")
    status_row = top + board.height * 2 + 2
    screen.write(status_row, left, status_line(board))


def status_line(board: BoardState) -> str:
    return f"Boat parts remain: {board.remaining_ship_cells()}"
