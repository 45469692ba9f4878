"""Board state representation and mutation helpers."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from seabattle.game.core.models import BOARD_HEIGHT, BOARD_WIDTH, Coord


@dataclass(slots=True, eq=False)
class BoardState:
    """Numpy-backed board state for one fleet.

    ``ships`` and ``fired`` are boolean grids indexed ``[row, col]``. Ship
    cells are only written by :meth:`try_place_ship`; fired cells never revert.
    """

    width: int = BOARD_WIDTH
    height: int = BOARD_HEIGHT
    ships: np.ndarray = field(init=False)
    fired: np.ndarray = field(init=False)
    ship_runs: list[tuple[Coord, Coord]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Board must be at least 1x1, got {self.width}x{self.height}.")
        self.ships = np.zeros((self.height, self.width), dtype=np.bool_)
        self.fired = np.zeros((self.height, self.width), dtype=np.bool_)

    def in_bounds(self, coord: Coord) -> bool:
        """Return whether the coordinate is in board bounds."""
        return 0 <= coord.row < self.height and 0 <= coord.col < self.width

    def try_place_ship(self, start: Coord, end: Coord) -> bool:
        """Place a straight ship run if it is in bounds and isolated from other ships.

        The run and its 8-neighbour halo must hold no ship cells. Nothing is
        written unless every check passes.
        """
        r0, r1 = sorted((start.row, end.row))
        c0, c1 = sorted((start.col, end.col))
        if r0 != r1 and c0 != c1:
            return False
        if r0 < 0 or c0 < 0 or r1 >= self.height or c1 >= self.width:
            return False
        # Off-board halo cells are water; slicing clips them away.
        halo = self.ships[max(r0 - 1, 0) : r1 + 2, max(c0 - 1, 0) : c1 + 2]
        if halo.any():
            return False
        self.ships[r0 : r1 + 1, c0 : c1 + 1] = True
        self.ship_runs.append((Coord(r0, c0), Coord(r1, c1)))
        return True

    def is_water(self, coord: Coord) -> bool:
        """Return whether the cell is off the board or holds no ship."""
        if not self.in_bounds(coord):
            return True
        return not bool(self.ships[coord.row, coord.col])

    def is_ship(self, coord: Coord) -> bool:
        return self.in_bounds(coord) and bool(self.ships[coord.row, coord.col])

    def was_fired(self, coord: Coord) -> bool:
        return self.in_bounds(coord) and bool(self.fired[coord.row, coord.col])

    def fire(self, coord: Coord) -> None:
        """Mark a cell as fired upon; off-board cells raise ``IndexError``."""
        if not self.in_bounds(coord):
            raise IndexError(f"Cell {coord} is outside the {self.width}x{self.height} board.")
        self.fired[coord.row, coord.col] = True

    def ship_cell_count(self) -> int:
        return int(np.count_nonzero(self.ships))

    def remaining_ship_cells(self) -> int:
        """Return the number of ship cells not yet fired upon."""
        return int(np.count_nonzero(self.ships & ~self.fired))

    def all_sunk(self) -> bool:
        """Return whether every ship cell has been fired upon."""
        return self.remaining_ship_cells() == 0
