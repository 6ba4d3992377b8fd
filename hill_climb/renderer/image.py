"""Raster rendering of an elevation grid with an optional route overlay."""

from typing import Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from hill_climb.grid import Grid
from hill_climb.position import Position
from hill_climb.types import MAX_ELEVATION

DEFAULT_CELL_SIZE = 8
LOW_SHADE = 32
HIGH_SHADE = 232

RGB = Tuple[int, int, int]
ROUTE_COLOR: RGB = (220, 40, 40)
START_COLOR: RGB = (40, 120, 220)
GOAL_COLOR: RGB = (40, 200, 80)

UInt8Array = npt.NDArray[np.uint8]


def shade_elevations(grid: Grid) -> UInt8Array:
    """Map elevations linearly onto ``[LOW_SHADE, HIGH_SHADE]``; shape ``(h, w, 3)``."""
    elevations = grid.as_array().astype(np.float32)
    shades = LOW_SHADE + elevations * ((HIGH_SHADE - LOW_SHADE) / MAX_ELEVATION)
    gray = np.rint(shades).astype(np.uint8)
    return np.stack([gray, gray, gray], axis=-1)


def render_image(
    grid: Grid,
    route: Optional[Sequence[Position]] = None,
    cell_size: int = DEFAULT_CELL_SIZE,
) -> Image.Image:
    """
    Renders the grid as an RGB image, one ``cell_size`` square per cell.
    Route cells are painted ``ROUTE_COLOR``; start and goal get outlined.
    """
    if cell_size <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_size}")

    pixels = shade_elevations(grid)
    for pos in route or ():
        pixels[pos.y, pos.x] = ROUTE_COLOR

    # Upscale each cell into a cell_size x cell_size block
    scaled = np.repeat(np.repeat(pixels, cell_size, axis=0), cell_size, axis=1)
    img = Image.fromarray(scaled)

    draw = ImageDraw.Draw(img)
    for pos, color in ((grid.start, START_COLOR), (grid.goal, GOAL_COLOR)):
        x0, y0 = pos.x * cell_size, pos.y * cell_size
        draw.rectangle(
            [x0, y0, x0 + cell_size - 1, y0 + cell_size - 1], outline=color
        )
    return img


class ElevationRenderer:
    cell_size: int

    def __init__(self, cell_size: int = DEFAULT_CELL_SIZE):
        self.cell_size = cell_size

    def render(
        self, grid: Grid, route: Optional[Sequence[Position]] = None
    ) -> Image.Image:
        return render_image(grid, route=route, cell_size=self.cell_size)
