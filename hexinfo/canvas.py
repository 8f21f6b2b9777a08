"""An in-memory character grid that the dashboard is drawn onto."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

HLINE = "\u2500"
VLINE = "\u2502"
TOP_LEFT = "\u250c"
TOP_RIGHT = "\u2510"
BOTTOM_LEFT = "\u2514"
BOTTOM_RIGHT = "\u2518"
TEE_LEFT = "\u251c"
TEE_RIGHT = "\u2524"


class Color(IntEnum):
    """Cell colours; BOLD and BRIGHT are attributes OR-ed onto a colour."""

    DEFAULT = 0
    BLACK = 1
    RED = 2
    GREEN = 3
    YELLOW = 4
    BLUE = 5
    MAGENTA = 6
    CYAN = 7
    WHITE = 8
    BOLD = 0x0100
    BRIGHT = 0x4000


@dataclass(frozen=True)
class Cell:
    """One character with its foreground and background."""

    ch: str
    fg: int
    bg: int


_BLANK = Cell(" ", Color.DEFAULT, Color.DEFAULT)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class Canvas:
    """A fixed-size grid of cells; drawing outside it is silently clipped."""

    def __init__(self, width: int, height: int) -> None:
        self.width = max(width, 0)
        self.height = max(height, 0)
        self.cells: list[list[Cell]] = []
        self.clear()

    def clear(self) -> None:
        """Reset every cell to a blank in default colours."""
        self.cells = [[_BLANK] * self.width for _ in range(self.height)]

    def set_cell(self, x: int, y: int, ch: str | int, fg: int, bg: int) -> None:
        """Place one character; coordinates off the grid are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            char = chr(ch) if isinstance(ch, int) else ch
            self.cells[y][x] = Cell(char, fg, bg)

    def print_at(self, text: str, x: int, y: int, fg: int, bg: int) -> None:
        """Write ``text`` left to right starting at ``(x, y)``."""
        for offset, ch in enumerate(text):
            self.set_cell(x + offset, y, ch, fg, bg)

    def print_centered(
        self, text: str, x: int, y: int, width: int, fg: int, bg: int
    ) -> None:
        """Write ``text`` centred within a span of ``width`` starting at ``x``."""
        start = x + _trunc_div(width - len(text), 2)
        self.print_at(text, start, y, fg, bg)

    def draw_box(
        self, x: int, y: int, width: int, height: int, title: str, fg: int
    ) -> None:
        """Draw a filled, bordered box on black with an optional centred title."""
        bg = Color.BLACK
        for row in range(height):
            for column in range(width):
                self.set_cell(x + column, y + row, " ", fg, bg)

        right, bottom = x + width - 1, y + height - 1
        self.set_cell(x, y, TOP_LEFT, fg, bg)
        self.set_cell(right, y, TOP_RIGHT, fg, bg)
        self.set_cell(x, bottom, BOTTOM_LEFT, fg, bg)
        self.set_cell(right, bottom, BOTTOM_RIGHT, fg, bg)
        for column in range(x + 1, right):
            self.set_cell(column, y, HLINE, fg, bg)
            self.set_cell(column, bottom, HLINE, fg, bg)
        for row in range(y + 1, bottom):
            self.set_cell(x, row, VLINE, fg, bg)
            self.set_cell(right, row, VLINE, fg, bg)

        if title:
            title_x = x + _trunc_div(width - len(title) - 2, 2)
            self.set_cell(title_x, y, TEE_LEFT, fg, bg)
            self.print_at(title, title_x + 1, y, fg | Color.BOLD, bg)
            self.set_cell(title_x + len(title) + 1, y, TEE_RIGHT, fg, bg)

    def draw_separator(self, x: int, y: int, width: int, fg: int, bg: int) -> None:
        """Draw a horizontal rule with tee ends."""
        self.set_cell(x, y, TEE_LEFT, fg, bg)
        for column in range(x + 1, x + width - 1):
            self.set_cell(column, y, HLINE, fg, bg)
        self.set_cell(x + width - 1, y, TEE_RIGHT, fg, bg)

    def draw_ascii_art(
        self,
        art: Sequence[str],
        x: int,
        y: int,
        width: int,
        height: int,
        fg: int,
    ) -> None:
        """Centre art vertically inside a box's interior, clipping to it."""
        start_y = max(y + 1 + _trunc_div(height - 2 - len(art), 2), y + 1)
        start_x = x + 1
        for row, line in enumerate(art):
            if start_y + row >= y + height - 1:
                break
            for column, ch in enumerate(line):
                if start_x + column >= x + width - 1:
                    break
                self.set_cell(start_x + column, start_y + row, ch, fg, Color.BLACK)

    def text_rows(self) -> list[str]:
        """The characters of each row, without colour information."""
        return ["".join(cell.ch for cell in row) for row in self.cells]