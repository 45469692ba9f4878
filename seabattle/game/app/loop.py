"""Terminal game loop: placement phase, battle phase and final reveal."""

from __future__ import annotations

import logging
import random

from seabattle.game.app.commands import (
    CommandError,
    format_coord,
    normalize,
    parse_placement,
    parse_target,
    random_placement_command,
)
from seabattle.game.app.console import Console
from seabattle.game.core.models import ShipSpec
from seabattle.game.core.rules import (
    GamePhase,
    GameSession,
    Player,
    TurnPolicy,
    create_session,
    fire,
    next_ship,
    place_ship,
)
from seabattle.game.infra.config import GameConfig
from seabattle.game.ui.board_view import render_board
from seabattle.game.ui.screen import Screen, board_span, screen_size_for

logger = logging.getLogger(__name__)

# Random placement gives up after this many rejected commands for one ship.
DEV_PLACEMENT_ATTEMPTS = 10_000


class InputClosedError(RuntimeError):
    """Raised when the input stream keeps failing."""


class FatalInputError(RuntimeError):
    """Raised when generated input in dev mode cannot be used."""


class GameLoop:
    """Drive one full game over a console."""

    def __init__(self, config: GameConfig, console: Console, rng: random.Random | None = None) -> None:
        self._config = config
        self._console = console
        self._rng = rng if rng is not None else random.Random(config.seed)
        self._alphabet = config.alphabet
        rows, cols = screen_size_for(config.width, config.height)
        self._screen = Screen(rows, cols)
        self._right_board_left = board_span(config.width)
        self._read_failures = 0
        policy = TurnPolicy.development() if config.dev_mode else TurnPolicy.standard()
        self.session: GameSession = create_session(
            config.fleet, width=config.width, height=config.height, policy=policy
        )

    def run(self) -> GameSession:
        """Play placement and battle to completion and return the finished session."""
        logger.info(
            "game_start board=%dx%d alphabet=%s dev_mode=%s",
            self._config.width,
            self._config.height,
            self._alphabet.name,
            self._config.dev_mode,
        )
        self._placement_phase()
        self._battle_phase()
        self._final_reveal()
        return self.session

    def _player_name(self, player: Player) -> str:
        return self._config.players[player]

    def _placement_phase(self) -> None:
        for player in Player:
            while (ship := next_ship(self.session, player)) is not None:
                self._place_one(player, ship)

    def _place_one(self, player: Player, ship: ShipSpec) -> None:
        board = self.session.placement_board(player)
        prompt = f"{self._player_name(player)}, {ship.name} ({ship.length})> "
        attempts = 0
        while True:
            self._screen.clear()
            render_board(self._screen, board, left=2, top=2, reveal=True, alphabet=self._alphabet)
            self._console.show(self._screen)

            if self._config.dev_mode:
                attempts += 1
                if attempts > DEV_PLACEMENT_ATTEMPTS:
                    raise FatalInputError(f"could not place {ship.name} after {DEV_PLACEMENT_ATTEMPTS} attempts")
                text = random_placement_command(
                    self._rng, self._alphabet, width=self._config.width, height=self._config.height
                )
                self._console.message(f"{prompt}{text}")
            else:
                read = self._read(prompt)
                if read is None:
                    continue
                text = read

            try:
                start, end = parse_placement(
                    text,
                    self._alphabet,
                    ship.length,
                    width=self._config.width,
                    height=self._config.height,
                )
            except CommandError as exc:
                if self._config.dev_mode:
                    raise FatalInputError(f"bad input {normalize(text)!r}") from exc
                logger.debug("placement_bad_input player=%s text=%r error=%s", player.name, text, exc)
                self._console.message(f"BAD INPUT {normalize(text)!r}")
                self._console.pause(self._config.message_delay)
                continue

            if place_ship(self.session, player, start, end):
                return
            if not self._config.dev_mode:
                self._console.message("CONFLICT")
                self._console.pause(self._config.message_delay)

    def _battle_phase(self) -> None:
        while self.session.phase is GamePhase.PLAYING:
            self._render_battle(reveal=self._config.dev_mode)
            player = self.session.turn
            text = self._read(f"{self._player_name(player)}> ")
            if text is None:
                continue
            try:
                coord = parse_target(
                    text, self._alphabet, width=self._config.width, height=self._config.height
                )
            except CommandError as exc:
                logger.debug("target_bad_input player=%s text=%r error=%s", player.name, text, exc)
                continue
            logger.debug("target player=%s cell=%s", player.name, format_coord(coord, self._alphabet))
            fire(self.session, coord)

    def _final_reveal(self) -> None:
        self._render_battle(reveal=True)
        if self.session.winner is not None:
            self._console.message(f"{self._player_name(self.session.winner)} wins!")

    def _render_battle(self, *, reveal: bool) -> None:
        self._screen.clear()
        render_board(
            self._screen,
            self.session.boards[Player.FIRST],
            left=0,
            top=0,
            reveal=reveal,
            alphabet=self._alphabet,
        )
        render_board(
            self._screen,
            self.session.boards[Player.SECOND],
            left=self._right_board_left,
            top=0,
            reveal=reveal,
            alphabet=self._alphabet,
        )
        self._console.show(self._screen)

    def _read(self, prompt: str) -> str | None:
        try:
            text = self._console.prompt(prompt)
        except (EOFError, OSError) as exc:
            self._read_failures += 1
            logger.warning("input_read_failed count=%d error=%s", self._read_failures, exc)
            if self._read_failures >= self._config.max_read_failures:
                raise InputClosedError(
                    f"input failed {self._read_failures} times in a row"
                ) from exc
            return None
        self._read_failures = 0
        return text
