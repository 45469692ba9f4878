"""Placement progress, turn resolution and win detection for a two-player session."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum, StrEnum

from seabattle.game.core.board import BoardState
from seabattle.game.core.fleet import run_length
from seabattle.game.core.models import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    DEFAULT_FLEET,
    Coord,
    ShipSpec,
    ShotResult,
)
from seabattle.game.core.shot_resolution import resolve_shot

logger = logging.getLogger(__name__)


class GamePhase(StrEnum):
    """Session lifecycle."""

    PLACING = "PLACING"
    PLAYING = "PLAYING"
    GAME_OVER = "GAME_OVER"


class Player(IntEnum):
    """Seat index of a player."""

    FIRST = 0
    SECOND = 1

    @property
    def opponent(self) -> Player:
        return Player(1 - self.value)


@dataclass(frozen=True, slots=True)
class TurnPolicy:
    """Decides who fires next after a shot that did not end the game."""

    auto_replay_on_hit: bool = True
    always_switch_turn: bool = False
    switch_on_miss: bool = True

    @classmethod
    def standard(cls) -> TurnPolicy:
        return cls()

    @classmethod
    def development(cls) -> TurnPolicy:
        """Policy that never passes the turn."""
        return cls(auto_replay_on_hit=True, always_switch_turn=False, switch_on_miss=False)


@dataclass(frozen=True, slots=True)
class TurnResult:
    """Outcome of a session-level fire command."""

    result: ShotResult
    game_ended: bool
    next_turn: Player


@dataclass(slots=True)
class GameSession:
    """Runtime game session state.

    ``boards[p]`` is the board player ``p`` fires at. It is populated by the
    opponent during placement.
    """

    boards: tuple[BoardState, BoardState]
    fleet: tuple[ShipSpec, ...] = DEFAULT_FLEET
    policy: TurnPolicy = field(default_factory=TurnPolicy.standard)
    phase: GamePhase = GamePhase.PLACING
    turn: Player = Player.FIRST
    winner: Player | None = None
    placed: list[int] = field(default_factory=lambda: [0, 0])
    history: list[str] = field(default_factory=list)

    def target_board(self, player: Player) -> BoardState:
        return self.boards[player]

    def placement_board(self, player: Player) -> BoardState:
        return self.boards[player.opponent]


def create_session(
    fleet: Sequence[ShipSpec] = DEFAULT_FLEET,
    *,
    width: int = BOARD_WIDTH,
    height: int = BOARD_HEIGHT,
    policy: TurnPolicy | None = None,
) -> GameSession:
    """Create an empty session waiting for both fleets to be placed."""
    if not fleet:
        raise ValueError("Fleet must contain at least one ship.")
    return GameSession(
        boards=(BoardState(width=width, height=height), BoardState(width=width, height=height)),
        fleet=tuple(fleet),
        policy=policy or TurnPolicy.standard(),
    )


def next_ship(session: GameSession, player: Player) -> ShipSpec | None:
    """Return the fleet entry the player still has to place, if any."""
    index = session.placed[player]
    if index >= len(session.fleet):
        return None
    return session.fleet[index]


def place_ship(session: GameSession, player: Player, start: Coord, end: Coord) -> bool:
    """Place the player's next fleet entry; the run must match its length."""
    if session.phase is not GamePhase.PLACING:
        return False
    ship = next_ship(session, player)
    if ship is None or run_length(start, end) != ship.length:
        return False
    if not session.placement_board(player).try_place_ship(start, end):
        logger.debug("placement_rejected player=%s ship=%s", player.name, ship.name)
        return False

    session.placed[player] += 1
    logger.info("ship_placed player=%s ship=%s start=%s end=%s", player.name, ship.name, start, end)
    if all(count == len(session.fleet) for count in session.placed):
        session.phase = GamePhase.PLAYING
        session.turn = Player.FIRST
        logger.info("placement_complete ship_cells=%d", session.boards[0].ship_cell_count())
    return True


def next_turn(player: Player, result: ShotResult, policy: TurnPolicy) -> Player:
    """Apply the turn-passing rule to a shot that did not end the game."""
    if policy.always_switch_turn:
        return player.opponent
    if result is ShotResult.HIT:
        return player if policy.auto_replay_on_hit else player.opponent
    return player.opponent if policy.switch_on_miss else player


def fire(session: GameSession, coord: Coord) -> TurnResult:
    """Resolve the current player's shot at their target board."""
    shooter = session.turn
    board = session.target_board(shooter)
    if session.phase is not GamePhase.PLAYING or not board.in_bounds(coord):
        return TurnResult(ShotResult.INVALID, session.phase is GamePhase.GAME_OVER, shooter)

    outcome = resolve_shot(board, coord)
    session.history.append(
        f"Player {shooter.value + 1} fired at ({coord.row}, {coord.col}): {outcome.result.value.lower()}."
    )
    logger.info(
        "shot player=%s row=%d col=%d result=%s remaining=%d",
        shooter.name,
        coord.row,
        coord.col,
        outcome.result.value,
        board.remaining_ship_cells(),
    )

    if outcome.game_ended:
        session.phase = GamePhase.GAME_OVER
        session.winner = shooter
        session.history.append(f"Player {shooter.value + 1} wins.")
        logger.info("game_over winner=%s", shooter.name)
        return TurnResult(outcome.result, True, shooter)

    session.turn = next_turn(shooter, outcome.result, session.policy)
    return TurnResult(outcome.result, False, session.turn)
