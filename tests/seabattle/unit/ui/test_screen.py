from __future__ import annotations

import pytest

from seabattle.game.ui.screen import Screen, board_span, screen_size_for


def test_write_clips_at_edges() -> None:
    screen = Screen(rows=2, cols=5)
    screen.write(0, 3, "abcdef")
    screen.write(1, -2, "xyz")
    screen.write(5, 0, "ignored")
    assert screen.lines() == ["   ab", "z    "]


def test_clear_resets_buffer() -> None:
    screen = Screen(rows=1, cols=3)
    screen.write(0, 0, "abc")
    screen.clear()
    assert screen.render() == "   \n"
    assert screen.char_at(0, 1) == " "


def test_default_size_fits_default_board() -> None:
    assert screen_size_for(10, 10) == (25, 80)
    assert board_span(10) == 40


def test_large_boards_grow_the_screen() -> None:
    rows, cols = screen_size_for(10, 15)
    assert rows == 35
    assert cols == 80


def test_screen_rejects_empty_size() -> None:
    with pytest.raises(ValueError):
        Screen(rows=0, cols=10)
