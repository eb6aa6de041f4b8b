"""Terminal output: ANSI frames, status line, and interrupt cleanup."""

from ecofield.render.signals import install_termination_handler, make_termination_handler
from ecofield.render.terminal import (
    CELL_GLYPHS,
    cleanup_output,
    draw_field,
    draw_status,
    format_field,
    prepare_output,
)

__all__ = [
    "CELL_GLYPHS",
    "cleanup_output",
    "draw_field",
    "draw_status",
    "format_field",
    "install_termination_handler",
    "make_termination_handler",
    "prepare_output",
]
