"""Terminal console port used by the game loop."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable
from typing import TextIO

from seabattle.game.ui.screen import Screen

ANSI_CLEAR = "\x1b[H\x1b[2J"


class Console:
    """Line-oriented terminal I/O with screen clearing."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        *,
        clear_sequence: str = ANSI_CLEAR,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._clear_sequence = clear_sequence
        self._sleep = sleep

    def show(self, screen: Screen) -> None:
        self._stdout.write(self._clear_sequence)
        self._stdout.write(screen.render())
        self._stdout.flush()

    def prompt(self, text: str) -> str:
        """Print a prompt and read one line; raises ``EOFError`` at end of input."""
        self._stdout.write(text)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError("input stream closed")
        return line.rstrip("\r\n")

    def message(self, text: str) -> None:
        self._stdout.write(f"{text}\n")
        self._stdout.flush()

    def pause(self, seconds: float) -> None:
        if seconds > 0:
            self._sleep(seconds)
