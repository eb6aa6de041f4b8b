"""ANSI terminal renderer for the field."""

from __future__ import annotations

from typing import TextIO

from ecofield.domain.cell import Cell
from ecofield.domain.field import Field

ESC = "\x1b"
CURSOR_HOME = f"{ESC}[0;0H"
CLEAR_SCREEN = f"{ESC}[2J"
CLEAR_SCROLLBACK = f"{ESC}[3J"
RESET_STYLE = f"{ESC}[0m"

# SGR foreground codes for coloured kinds
CELL_COLOR_CODES: dict[Cell, int] = {
    Cell.PLANT: 32,
    Cell.WATER: 34,
    Cell.VIRUS: 31,
    Cell.FUNGUS: 35,
}

CELL_SYMBOLS: dict[Cell, str] = {
    Cell.DEAD: " ",
    Cell.FOOD: ".",
    Cell.PLANT: "$",
    Cell.WATER: "~",
    Cell.VIRUS: "*",
    Cell.FUNGUS: "%",
}


def _glyph(cell: Cell) -> str:
    code = CELL_COLOR_CODES.get(cell)
    symbol = CELL_SYMBOLS[cell]
    if code is None:
        return symbol
    return f"{ESC}[{code}m{symbol}{RESET_STYLE}"


CELL_GLYPHS: dict[Cell, str] = {cell: _glyph(cell) for cell in Cell}


def format_field(field: Field) -> str:
    """One frame: cursor home, then each row newline-terminated."""
    lines = ["".join(CELL_GLYPHS[cell] for cell in row) + "\n" for row in field.rows()]
    return CURSOR_HOME + "".join(lines)


def draw_field(out: TextIO, field: Field) -> None:
    """Write one frame and flush once."""
    out.write(format_field(field))
    out.flush()


def format_status(epoch: int, average_fps: float) -> str:
    return f"Epoch: {epoch}, average FPS: {average_fps:.1f}\n"


def draw_status(out: TextIO, epoch: int, average_fps: float) -> None:
    out.write(format_status(epoch, average_fps))
    out.flush()


def prepare_output(out: TextIO) -> None:
    """Clear scrollback and screen before the first frame."""
    out.write(CLEAR_SCROLLBACK + CURSOR_HOME + CLEAR_SCREEN)
    out.flush()


def cleanup_output(out: TextIO) -> None:
    """Reset styling and clear the screen."""
    out.write(RESET_STYLE + CLEAR_SCROLLBACK + CURSOR_HOME + CLEAR_SCREEN)
    out.flush()
