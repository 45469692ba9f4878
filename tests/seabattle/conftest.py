from __future__ import annotations

import random

import pytest

from seabattle.game.core.models import Coord
from seabattle.game.core.rules import GameSession, Player, create_session, place_ship

# Standard fleet laid out on rows 0, 2 and 4 with one-cell gaps.
STANDARD_LAYOUT: tuple[tuple[Coord, Coord], ...] = (
    (Coord(0, 0), Coord(0, 3)),
    (Coord(0, 5), Coord(0, 7)),
    (Coord(2, 0), Coord(2, 2)),
    (Coord(2, 4), Coord(2, 5)),
    (Coord(2, 7), Coord(2, 8)),
    (Coord(4, 0), Coord(4, 1)),
    (Coord(4, 3), Coord(4, 3)),
    (Coord(4, 5), Coord(4, 5)),
    (Coord(4, 7), Coord(4, 7)),
    (Coord(4, 9), Coord(4, 9)),
)


def place_standard_fleets(session: GameSession) -> None:
    for player in Player:
        for start, end in STANDARD_LAYOUT:
            assert place_ship(session, player, start, end)


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def placed_session() -> GameSession:
    session = create_session()
    place_standard_fleets(session)
    return session


@pytest.fixture
def standard_layout() -> tuple[tuple[Coord, Coord], ...]:
    return STANDARD_LAYOUT
