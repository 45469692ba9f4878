"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

BOARD_WIDTH = 10
BOARD_HEIGHT = 10


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class ShotResult(StrEnum):
    """Result of a single shot."""

    MISS = "MISS"
    HIT = "HIT"
    INVALID = "INVALID"


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate; ``col`` is x and ``row`` is y."""

    row: int
    col: int

    @property
    def x(self) -> int:
        return self.col

    @property
    def y(self) -> int:
        return self.row


@dataclass(frozen=True, slots=True)
class ShipSpec:
    """Named ship entry of a fleet."""

    name: str
    length: int

    def __post_init__(self) -> None:
        if self.length < 1:
            raise ValueError(f"Ship {self.name!r} must have length >= 1, got {self.length}.")


DEFAULT_FLEET: tuple[ShipSpec, ...] = (
    ShipSpec("battleship", 4),
    ShipSpec("destroyer1", 3),
    ShipSpec("destroyer2", 3),
    ShipSpec("cruiser1", 2),
    ShipSpec("cruiser2", 2),
    ShipSpec("cruiser3", 2),
    ShipSpec("sailboat1", 1),
    ShipSpec("sailboat2", 1),
    ShipSpec("sailboat3", 1),
    ShipSpec("sailboat4", 1),
)
