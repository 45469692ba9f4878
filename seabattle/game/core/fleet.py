"""Fleet placement helpers and random fleet construction."""

from __future__ import annotations

import random
from collections.abc import Sequence

from seabattle.game.core.board import BoardState
from seabattle.game.core.models import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    DEFAULT_FLEET,
    Coord,
    Orientation,
    ShipSpec,
)


def placement_run(origin: Coord, orientation: Orientation, length: int) -> tuple[Coord, Coord]:
    """Compute the end cell of a ship run starting at ``origin``."""
    if orientation is Orientation.HORIZONTAL:
        return origin, Coord(origin.row, origin.col + length - 1)
    return origin, Coord(origin.row + length - 1, origin.col)


def run_length(start: Coord, end: Coord) -> int:
    """Return the number of cells along the longer axis of a run."""
    return max(abs(end.row - start.row), abs(end.col - start.col)) + 1


def fleet_cell_count(fleet: Sequence[ShipSpec] = DEFAULT_FLEET) -> int:
    """Return the number of ship cells a complete fleet occupies."""
    return sum(ship.length for ship in fleet)


def random_fleet_board(
    rng: random.Random,
    fleet: Sequence[ShipSpec] = DEFAULT_FLEET,
    *,
    width: int = BOARD_WIDTH,
    height: int = BOARD_HEIGHT,
    attempts: int = 400,
) -> BoardState:
    """Build a board with every fleet entry placed at a random legal spot."""
    for _ in range(attempts):
        board = _try_random_fill(rng, fleet, width, height)
        if board is not None:
            return board
    raise RuntimeError(f"Failed to place fleet on a {width}x{height} board.")


def _try_random_fill(
    rng: random.Random, fleet: Sequence[ShipSpec], width: int, height: int
) -> BoardState | None:
    board = BoardState(width=width, height=height)
    for ship in fleet:
        candidates = _candidate_runs(board, ship.length)
        rng.shuffle(candidates)
        if not any(board.try_place_ship(start, end) for start, end in candidates):
            return None
    return board


def _candidate_runs(board: BoardState, length: int) -> list[tuple[Coord, Coord]]:
    """Return every in-bounds run of ``length``; occupancy is left to the board."""
    candidates: list[tuple[Coord, Coord]] = []
    orientations = (Orientation.HORIZONTAL,) if length == 1 else tuple(Orientation)
    for orientation in orientations:
        for row in range(board.height):
            for col in range(board.width):
                start, end = placement_run(Coord(row, col), orientation, length)
                if board.in_bounds(end):
                    candidates.append((start, end))
    return candidates


def fleet_fits(
    fleet: Sequence[ShipSpec] = DEFAULT_FLEET,
    *,
    width: int = BOARD_WIDTH,
    height: int = BOARD_HEIGHT,
    seed: int = 0,
) -> bool:
    """Return whether a non-touching layout of the fleet was found on the board."""
    if fleet_cell_count(fleet) > width * height:
        return False
    try:
        random_fleet_board(random.Random(seed), fleet, width=width, height=height)
    except RuntimeError:
        return False
    return True
