from __future__ import annotations

import random

import numpy as np
import pytest

from seabattle.game.core.board import BoardState
from seabattle.game.core.models import Coord


def test_vertical_ship_then_adjacent_column_rejected_then_gap_column_accepted() -> None:
    board = BoardState()
    assert board.try_place_ship(Coord(0, 0), Coord(3, 0))
    assert not board.try_place_ship(Coord(0, 1), Coord(2, 1))
    assert board.try_place_ship(Coord(0, 2), Coord(2, 2))
    assert board.ship_cell_count() == 7


def test_single_cell_ship_in_corner_accepted() -> None:
    board = BoardState()
    assert board.try_place_ship(Coord(0, 0), Coord(0, 0))
    assert board.is_ship(Coord(0, 0))
    assert board.remaining_ship_cells() == 1


def test_ships_may_touch_board_edges() -> None:
    board = BoardState()
    assert board.try_place_ship(Coord(9, 6), Coord(9, 9))
    assert board.try_place_ship(Coord(0, 9), Coord(2, 9))


@pytest.mark.parametrize(
    ("start", "end"),
    [
        (Coord(4, 4), Coord(4, 4)),  # overlap
        (Coord(3, 3), Coord(3, 3)),  # corner touch
        (Coord(5, 5), Coord(5, 5)),  # corner touch
        (Coord(4, 5), Coord(4, 6)),  # side touch
        (Coord(0, 3), Coord(3, 3)),  # corner touch from a vertical run
    ],
)
def test_placement_rejected_when_touching_existing_ship(start: Coord, end: Coord) -> None:
    board = BoardState()
    assert board.try_place_ship(Coord(4, 4), Coord(4, 4))
    assert not board.try_place_ship(start, end)


@pytest.mark.parametrize(
    ("start", "end"),
    [
        (Coord(0, 8), Coord(0, 11)),
        (Coord(-1, 0), Coord(1, 0)),
        (Coord(8, 0), Coord(10, 0)),
        (Coord(0, 0), Coord(1, 1)),  # not a straight run
    ],
)
def test_placement_rejected_out_of_bounds_or_not_straight(start: Coord, end: Coord) -> None:
    board = BoardState()
    assert not board.try_place_ship(start, end)
    assert board.ship_cell_count() == 0


def test_rejected_placement_leaves_board_unchanged() -> None:
    board = BoardState()
    board.try_place_ship(Coord(2, 2), Coord(2, 5))
    board.fire(Coord(7, 7))
    ships_before = board.ships.copy()
    fired_before = board.fired.copy()
    runs_before = list(board.ship_runs)

    assert not board.try_place_ship(Coord(3, 0), Coord(3, 3))
    assert not board.try_place_ship(Coord(2, 7), Coord(2, 11))

    assert np.array_equal(board.ships, ships_before)
    assert np.array_equal(board.fired, fired_before)
    assert board.ship_runs == runs_before


def test_reversed_endpoints_describe_same_run() -> None:
    board = BoardState()
    assert board.try_place_ship(Coord(0, 3), Coord(0, 0))
    assert board.ship_runs == [(Coord(0, 0), Coord(0, 3))]
    assert board.ship_cell_count() == 4


def test_is_water_treats_off_board_as_water() -> None:
    board = BoardState()
    board.try_place_ship(Coord(0, 0), Coord(0, 1))
    assert board.is_water(Coord(-1, 0))
    assert board.is_water(Coord(0, 10))
    assert not board.is_water(Coord(0, 1))
    assert board.is_water(Coord(1, 1))
    assert not board.is_ship(Coord(-1, -1))


def test_fire_counts_first_hits_only() -> None:
    board = BoardState()
    board.try_place_ship(Coord(5, 5), Coord(5, 6))
    assert board.remaining_ship_cells() == 2

    board.fire(Coord(0, 0))
    assert board.remaining_ship_cells() == 2
    board.fire(Coord(5, 5))
    assert board.remaining_ship_cells() == 1
    board.fire(Coord(5, 5))
    assert board.remaining_ship_cells() == 1
    assert not board.all_sunk()

    board.fire(Coord(5, 6))
    assert board.remaining_ship_cells() == 0
    assert board.all_sunk()


def test_fire_is_idempotent() -> None:
    once = BoardState()
    twice = BoardState()
    for board in (once, twice):
        board.try_place_ship(Coord(1, 1), Coord(1, 3))
    once.fire(Coord(1, 2))
    twice.fire(Coord(1, 2))
    twice.fire(Coord(1, 2))
    assert np.array_equal(once.fired, twice.fired)
    assert np.array_equal(once.ships, twice.ships)


def test_single_ship_surrounded_by_misses_then_sunk() -> None:
    board = BoardState()
    assert board.try_place_ship(Coord(5, 5), Coord(5, 5))
    for row in (4, 5, 6):
        for col in (4, 5, 6):
            if (row, col) == (5, 5):
                continue
            board.fire(Coord(row, col))
    assert board.remaining_ship_cells() == 1
    board.fire(Coord(5, 5))
    assert board.remaining_ship_cells() == 0
    assert board.all_sunk()


def test_empty_board_counts_as_sunk() -> None:
    assert BoardState().all_sunk()


def test_board_supports_custom_dimensions() -> None:
    board = BoardState(width=4, height=3)
    assert board.ships.shape == (3, 4)
    assert board.try_place_ship(Coord(2, 0), Coord(2, 3))
    assert not board.try_place_ship(Coord(3, 0), Coord(3, 0))


def test_board_rejects_empty_dimensions() -> None:
    with pytest.raises(ValueError):
        BoardState(width=0, height=10)


@pytest.mark.parametrize("cell", [Coord(-1, -1), Coord(0, -1), Coord(10, 0), Coord(3, 10)])
def test_fire_off_board_raises_without_wrapping(cell: Coord) -> None:
    board = BoardState()
    with pytest.raises(IndexError):
        board.fire(cell)
    assert not board.fired.any()


def _runs_touch(first: tuple[Coord, Coord], second: tuple[Coord, Coord]) -> bool:
    (a0, a1), (b0, b1) = first, second
    return (
        b0.row <= a1.row + 1
        and a0.row <= b1.row + 1
        and b0.col <= a1.col + 1
        and a0.col <= b1.col + 1
    )


@pytest.mark.parametrize("seed", [0, 3, 11, 2024])
def test_random_runs_never_leave_touching_ships(seed: int) -> None:
    rng = random.Random(seed)
    board = BoardState(width=8, height=7)
    for _ in range(300):
        start = Coord(rng.randrange(-1, 9), rng.randrange(-1, 10))
        end = Coord(start.row + rng.choice((0, 0, 1, 3)), start.col + rng.choice((0, 0, 2, -1)))
        ships_before = board.ships.copy()
        runs_before = list(board.ship_runs)

        placed = board.try_place_ship(start, end)

        if placed:
            assert len(board.ship_runs) == len(runs_before) + 1
        else:
            assert np.array_equal(board.ships, ships_before)
            assert board.ship_runs == runs_before

        expected = np.zeros_like(board.ships)
        for index, run in enumerate(board.ship_runs):
            low, high = run
            expected[low.row : high.row + 1, low.col : high.col + 1] = True
            assert low.row == high.row or low.col == high.col
            for other in board.ship_runs[index + 1 :]:
                assert not _runs_touch(run, other)
        assert np.array_equal(board.ships, expected)
    assert board.ship_runs
