"""Shot outcome evaluation (hit/miss/game over)."""

from __future__ import annotations

from dataclasses import dataclass

from seabattle.game.core.board import BoardState
from seabattle.game.core.models import Coord, ShotResult


@dataclass(frozen=True, slots=True)
class ShotOutcome:
    """Result of firing at one cell."""

    result: ShotResult
    game_ended: bool


def resolve_shot(board: BoardState, coord: Coord) -> ShotOutcome:
    """Fire at ``coord`` and report whether it hit and whether the fleet is gone."""
    was_ship = board.is_ship(coord)
    board.fire(coord)
    return ShotOutcome(
        result=ShotResult.HIT if was_ship else ShotResult.MISS,
        game_ended=board.all_sunk(),
    )
