"""Rendering helpers for grids and routes.

``text`` draws a route as arrow glyphs over the map; ``image`` produces a PIL
image with elevation shading and the route highlighted.
"""

from .image import ElevationRenderer, render_image
from .text import render_route_text

__all__ = ["ElevationRenderer", "render_image", "render_route_text"]
