"""Text command parsing for targets and ship placements."""

from __future__ import annotations

import random
from dataclasses import dataclass

from seabattle.game.core.fleet import placement_run
from seabattle.game.core.models import BOARD_HEIGHT, BOARD_WIDTH, Coord, Orientation


class CommandError(ValueError):
    """Raised for malformed player commands."""


@dataclass(frozen=True, slots=True)
class Alphabet:
    """Column letters and direction symbols used for one session."""

    name: str
    columns: str
    right: str
    down: str

    def column_label(self, col: int) -> str:
        return self.columns[col]


ALPHABETS: dict[str, Alphabet] = {
    "latin": Alphabet(name="latin", columns="ABCDEFGHIJ", right="R", down="D"),
    # Cyrillic column set skips Й; directions are "право" (right) and "вниз" (down).
    "cyrillic": Alphabet(name="cyrillic", columns="АБВГДЕЖЗИК", right="П", down="В"),
}


def resolve_alphabet(name: str) -> Alphabet:
    """Look up a built-in alphabet by name."""
    key = name.strip().lower()
    try:
        return ALPHABETS[key]
    except KeyError:
        known = ", ".join(sorted(ALPHABETS))
        raise ValueError(f"Unknown alphabet {name!r}; expected one of: {known}.") from None


def normalize(text: str) -> str:
    return text.strip().upper()


def parse_target(
    text: str,
    alphabet: Alphabet,
    *,
    width: int = BOARD_WIDTH,
    height: int = BOARD_HEIGHT,
) -> Coord:
    """Parse a column letter followed by a row number, e.g. ``C7``."""
    command = normalize(text)
    return _parse_cell(command, command, alphabet, width, height)


def parse_placement(
    text: str,
    alphabet: Alphabet,
    length: int,
    *,
    width: int = BOARD_WIDTH,
    height: int = BOARD_HEIGHT,
) -> tuple[Coord, Coord]:
    """Parse a placement like ``A0R`` into the start and end cells of the run.

    The end cell is derived from ``length`` and may lie off the board; the
    board rejects such runs. Length-1 ships may omit the direction.
    """
    command = normalize(text)
    if not command:
        raise CommandError("Empty command.")
    direction = command[-1]
    if direction == alphabet.right:
        orientation = Orientation.HORIZONTAL
        cell_text = command[:-1]
    elif direction == alphabet.down:
        orientation = Orientation.VERTICAL
        cell_text = command[:-1]
    elif length == 1:
        orientation = Orientation.HORIZONTAL
        cell_text = command
    else:
        raise CommandError(f"Bad direction in {command!r}; use {alphabet.right} or {alphabet.down}.")
    origin = _parse_cell(cell_text, command, alphabet, width, height)
    return placement_run(origin, orientation, length)


def random_placement_command(
    rng: random.Random,
    alphabet: Alphabet,
    *,
    width: int = BOARD_WIDTH,
    height: int = BOARD_HEIGHT,
) -> str:
    """Build a random, well-formed placement command."""
    column = alphabet.columns[rng.randrange(width)]
    row = rng.randrange(height)
    direction = rng.choice((alphabet.right, alphabet.down))
    return f"{column}{row}{direction}"


def format_coord(coord: Coord, alphabet: Alphabet) -> str:
    """Render a coordinate in command notation."""
    return f"{alphabet.column_label(coord.col)}{coord.row}"


def _parse_cell(cell_text: str, command: str, alphabet: Alphabet, width: int, height: int) -> Coord:
    if len(cell_text) < 2:
        raise CommandError(f"Command {command!r} is too short.")
    letter, digits = cell_text[0], cell_text[1:]
    col = alphabet.columns.find(letter)
    if col < 0 or col >= width:
        raise CommandError(f"Unknown column {letter!r}.")
    if not (digits.isascii() and digits.isdigit()):
        raise CommandError(f"Bad row {digits!r}.")
    row = int(digits)
    if row >= height:
        raise CommandError(f"Row {row} is off the board.")
    return Coord(row=row, col=col)
