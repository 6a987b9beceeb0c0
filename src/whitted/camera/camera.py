"""Pinhole camera that maps canvas pixels to world-space rays.

The camera sits at the origin of its own space looking down -z, with the
image plane one unit in front of it at z = -1. The camera transform (usually
built with ``view_transform``) is the world-to-camera matrix; its inverse
carries image-plane points and the eye back into the world.

The visible extent of the image plane follows from the field of view (the
horizontal one when the canvas is landscape, the vertical one when portrait):

    half_view = tan(field_of_view / 2)
    aspect    = hsize / vsize
    aspect >= 1:  half_width = half_view,          half_height = half_view / aspect
    aspect <  1:  half_width = half_view * aspect, half_height = half_view
    pixel_size = 2 * half_width / hsize

Pixel (0, 0) is the top-left corner of the canvas. Rays pass through pixel
centres, so +x in pixel space runs toward -x on the image plane (the camera
looks toward -z and its left is +x).

Example:
    >>> import math
    >>> from src.whitted.camera.camera import Camera
    >>> from src.whitted.core.transforms import view_transform
    >>> from src.whitted.core.tup import point, vector
    >>> camera = Camera(200, 125, math.pi / 2).with_transform(
    ...     view_transform(point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0))
    ... )
    >>> round(camera.pixel_size, 5)
    0.01
    >>> canvas = camera.render(world)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Generator
from typing import TYPE_CHECKING

from src.whitted.core.matrix import Mat4
from src.whitted.core.ray import Ray
from src.whitted.core.tup import point
from src.whitted.scene.world import MAX_BOUNCES

if TYPE_CHECKING:
    from src.whitted.preview.canvas import Canvas
    from src.whitted.scene.world import World

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (rows_completed, total_rows)
ProgressCallback = Callable[[int, int], None]

_ORIGIN = point(0.0, 0.0, 0.0)


class Camera:
    """A pinhole camera producing one primary ray per pixel.

    Attributes:
        hsize: Canvas width in pixels.
        vsize: Canvas height in pixels.
        field_of_view: Angle in radians spanned by the longer canvas axis.
        transform: World-to-camera transform.
        log_progress: Whether ``render`` logs its percentage complete.
        half_width: Half the width of the image plane in camera units.
        half_height: Half the height of the image plane in camera units.
        pixel_size: Width (and height) of one pixel on the image plane.
    """

    def __init__(
        self,
        hsize: int,
        vsize: int,
        field_of_view: float,
        transform: Mat4 | None = None,
        log_progress: bool = False,
    ) -> None:
        """Create a camera.

        Args:
            hsize: Canvas width in pixels, at least 1.
            vsize: Canvas height in pixels, at least 1.
            field_of_view: Field of view in radians, in (0, pi).
            transform: World-to-camera transform. Defaults to the identity,
                which looks from the origin toward -z.
            log_progress: Log render progress through this module's logger.

        Raises:
            ValueError: If a dimension is not positive or the field of view
                is outside (0, pi).
        """
        if hsize < 1 or vsize < 1:
            raise ValueError(f"Camera dimensions must be positive, got {hsize}x{vsize}")
        if not 0.0 < field_of_view < math.pi:
            raise ValueError(f"Field of view must be in (0, pi), got {field_of_view}")

        self._hsize = hsize
        self._vsize = vsize
        self._field_of_view = field_of_view
        self._transform = transform if transform is not None else Mat4.identity()
        self._log_progress = log_progress

        half_view = math.tan(field_of_view / 2.0)
        aspect = hsize / vsize
        if aspect >= 1.0:
            self._half_width = half_view
            self._half_height = half_view / aspect
        else:
            self._half_width = half_view * aspect
            self._half_height = half_view
        self._pixel_size = self._half_width * 2.0 / hsize

    @property
    def hsize(self) -> int:
        return self._hsize

    @property
    def vsize(self) -> int:
        return self._vsize

    @property
    def field_of_view(self) -> float:
        return self._field_of_view

    @property
    def transform(self) -> Mat4:
        return self._transform

    @property
    def log_progress(self) -> bool:
        return self._log_progress

    @property
    def half_width(self) -> float:
        return self._half_width

    @property
    def half_height(self) -> float:
        return self._half_height

    @property
    def pixel_size(self) -> float:
        return self._pixel_size

    def with_transform(self, transform: Mat4) -> Camera:
        """Return a copy of this camera with a different transform."""
        return Camera(
            self._hsize, self._vsize, self._field_of_view, transform, self._log_progress
        )

    def with_progress_logging(self, enabled: bool = True) -> Camera:
        """Return a copy of this camera that logs render progress."""
        return Camera(self._hsize, self._vsize, self._field_of_view, self._transform, enabled)

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Build the world-space ray through the centre of pixel (px, py).

        Args:
            px: Pixel column, 0 at the left edge.
            py: Pixel row, 0 at the top edge.

        Returns:
            A ray from the eye with a unit direction.
        """
        x_offset = (px + 0.5) * self._pixel_size
        y_offset = (py + 0.5) * self._pixel_size
        world_x = self._half_width - x_offset
        world_y = self._half_height - y_offset

        inverse = self._transform.inverse()
        pixel = inverse @ point(world_x, world_y, -1.0)
        origin = inverse @ _ORIGIN
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)

    def render_progressive(
        self, world: World, canvas: Canvas
    ) -> Generator[tuple[int, int], None, None]:
        """Render into ``canvas`` one row at a time.

        The canvas must be at least ``hsize`` x ``vsize``. Control returns to
        the caller after every row, which lets a preview refresh or the
        render be abandoned part way.

        Args:
            world: The world to trace rays into.
            canvas: Render target to fill.

        Yields:
            ``(rows_completed, total_rows)`` after each row.

        Raises:
            ValueError: If the canvas is smaller than the camera.
        """
        if canvas.width < self._hsize or canvas.height < self._vsize:
            raise ValueError(
                f"Canvas ({canvas.width}x{canvas.height}) is smaller than "
                f"camera ({self._hsize}x{self._vsize})"
            )

        for py in range(self._vsize):
            for px in range(self._hsize):
                ray = self.ray_for_pixel(px, py)
                canvas.set_pixel(px, py, world.color_at(ray, MAX_BOUNCES))
            yield py + 1, self._vsize

    def render(self, world: World, callback: ProgressCallback | None = None) -> Canvas:
        """Render the world to a new canvas of ``hsize`` x ``vsize``.

        Args:
            world: The world to trace rays into.
            callback: Optional callback invoked after each row with
                ``(rows_completed, total_rows)``.

        Returns:
            The rendered canvas.

        Example:
            >>> def progress(done, total):
            ...     print(f"{done}/{total} rows")
            >>> canvas = camera.render(world, callback=progress)
        """
        # Imported here so the camera can be used without initialising Taichi
        from src.whitted.preview.canvas import Canvas

        canvas = Canvas(self._hsize, self._vsize)
        last_percent = -1
        for rows_done, total in self.render_progressive(world, canvas):
            if callback is not None:
                callback(rows_done, total)
            if self._log_progress:
                percent = rows_done * 100 // total
                if percent != last_percent:
                    logger.info("%d%% complete", percent)
                    last_percent = percent
        return canvas

    def __repr__(self) -> str:
        return (
            f"Camera(hsize={self._hsize}, vsize={self._vsize}, "
            f"field_of_view={self._field_of_view!r})"
        )
