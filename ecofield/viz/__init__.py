"""Static image rendering of fields."""

from ecofield.viz.render import CELL_COLORS, render_field_snapshot

__all__ = ["CELL_COLORS", "render_field_snapshot"]
