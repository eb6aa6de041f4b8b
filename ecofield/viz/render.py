"""Matplotlib rendering of field snapshots."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.image import AxesImage
from matplotlib.patches import Patch

from ecofield.domain.cell import Cell
from ecofield.domain.field import Field

# Indexed by Cell value; hues follow the terminal colours.
CELL_COLORS: dict[Cell, str] = {
    Cell.DEAD: "#FFFFFF",
    Cell.FOOD: "#C8B68E",
    Cell.PLANT: "#2CA02C",
    Cell.VIRUS: "#D62728",
    Cell.WATER: "#1F77B4",
    Cell.FUNGUS: "#B23AB2",
}
GRID_LINE_COLOR = "#DDDDDD"


def _cell_cmap() -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete colormap with one bin per cell kind."""
    cmap = ListedColormap([CELL_COLORS[cell] for cell in Cell])
    bounds = [value - 0.5 for value in range(len(Cell) + 1)]
    norm = BoundaryNorm(bounds, cmap.N)
    return cmap, norm


def _build_legend_handles() -> list[Patch]:
    return [
        Patch(facecolor=CELL_COLORS[cell], edgecolor="gray", label=cell.name.capitalize())
        for cell in Cell
    ]


def _draw_cell_grid(ax: plt.Axes, grid: np.ndarray, grid_lines: bool) -> AxesImage:
    """imshow the grid on *ax*, optionally with thin cell borders."""
    cmap, norm = _cell_cmap()
    img = ax.imshow(grid, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    if grid_lines:
        h, w = grid.shape
        for x in range(w + 1):
            ax.axvline(x - 0.5, color=GRID_LINE_COLOR, linewidth=0.5)
        for y in range(h + 1):
            ax.axhline(y - 0.5, color=GRID_LINE_COLOR, linewidth=0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    return img


def render_field_snapshot(
    field: Field,
    output_path: Path,
    *,
    title: str | None = None,
    dpi: int = 100,
) -> Path:
    """Save the field as a PNG with a per-kind legend."""
    output_path = Path(output_path)
    if output_path.suffix.lower() != ".png":
        raise ValueError(f"snapshot path must end in .png, got {output_path.name!r}")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Cell borders only help on small fields.
    grid_lines = max(field.height, field.width) <= 50
    fig_w = max(4.0, field.width / 10.0)
    fig_h = max(3.0, field.height / 10.0) + 0.8
    fig, ax = plt.subplots(figsize=(fig_w, fig_h))
    try:
        _draw_cell_grid(ax, np.asarray(field.cells), grid_lines)
        if title:
            ax.set_title(title)
        ax.legend(
            handles=_build_legend_handles(),
            loc="upper center",
            bbox_to_anchor=(0.5, -0.02),
            ncol=len(Cell),
            frameon=False,
            fontsize="small",
        )
        fig.savefig(output_path, dpi=dpi, bbox_inches="tight")
    finally:
        plt.close(fig)
    return output_path
