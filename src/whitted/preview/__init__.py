"""Preview module for the render target and image output.

Components:
    canvas: Taichi-field pixel canvas the camera renders into
    export: PPM (P3/P6) encoding and PNG export via Pillow

Example:
    >>> from src.whitted.preview import Canvas, save_png
    >>> canvas = camera.render(world)
    >>> save_png(canvas, "output.png")
"""

from src.whitted.preview.canvas import Canvas
from src.whitted.preview.export import (
    save_png,
    save_ppm,
    to_p6_ppm,
    to_ppm,
)

__all__ = [
    # Render target
    "Canvas",
    # Export functions
    "to_ppm",
    "to_p6_ppm",
    "save_ppm",
    "save_png",
]
