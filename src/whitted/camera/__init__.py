"""Camera module for primary ray generation and rendering.

Components:
    camera: Pinhole camera mapping pixel centres to world-space rays, with
        row-by-row rendering and progress reporting
"""

from .camera import Camera, ProgressCallback

__all__ = [
    "Camera",
    "ProgressCallback",
]
