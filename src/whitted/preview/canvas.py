"""Pixel canvas backed by a Taichi field.

The canvas is the render target the camera writes into. Pixels live in a
``ti.Vector.field(3, ti.f32)`` indexed ``[x, y]`` with ``(0, 0)`` at the
top-left, so the image can be handed straight to Taichi kernels (for
quantisation, or a GGUI window) without a copy. Colors are stored linear and
unclamped; clamping only happens when the canvas is quantised to bytes.

Taichi must be initialised (``ti.init``) before a Canvas is constructed.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.whitted.materials.color import Color
    >>> from src.whitted.preview.canvas import Canvas
    >>> canvas = Canvas(10, 20)
    >>> canvas.set_pixel(2, 3, Color(1.0, 0.0, 0.0))
    >>> canvas.pixel_at(2, 3)
    Color(red=1.0, green=0.0, blue=0.0)
"""

# Kernel parameter annotations are read by Taichi at class definition time,
# so this module must not use postponed evaluation of annotations.
from collections.abc import Iterator

import numpy as np
import numpy.typing as npt
import taichi as ti

from src.whitted.materials.color import Color


@ti.data_oriented
class Canvas:
    """A width x height grid of linear RGB colors, initially black.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
    """

    def __init__(self, width: int, height: int) -> None:
        """Allocate a black canvas.

        Args:
            width: Width in pixels, at least 1.
            height: Height in pixels, at least 1.

        Raises:
            ValueError: If either dimension is smaller than 1.
        """
        if width < 1 or height < 1:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = ti.Vector.field(3, dtype=ti.f32, shape=(width, height))
        self._pixels.fill(0.0)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) is outside the {self._width}x{self._height} canvas"
            )

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Write a color to the pixel at column ``x``, row ``y``.

        Raises:
            IndexError: If the coordinates fall outside the canvas.
        """
        self._check_bounds(x, y)
        self._pixels[x, y] = [color.red, color.green, color.blue]

    def pixel_at(self, x: int, y: int) -> Color:
        """Read the color at column ``x``, row ``y``.

        Raises:
            IndexError: If the coordinates fall outside the canvas.
        """
        self._check_bounds(x, y)
        value = self._pixels[x, y]
        return Color(float(value[0]), float(value[1]), float(value[2]))

    def fill(self, color: Color) -> None:
        """Set every pixel to ``color``."""
        self._fill_kernel(color.red, color.green, color.blue)

    @ti.kernel
    def _fill_kernel(self, r: ti.f32, g: ti.f32, b: ti.f32):
        for x, y in self._pixels:
            self._pixels[x, y] = ti.Vector([r, g, b])

    def pixels(self) -> Iterator[tuple[int, int, Color]]:
        """Iterate over every pixel in row-major order.

        Yields:
            ``(x, y, color)`` for each pixel, left to right then top to bottom.
        """
        image = self.to_numpy()
        for y in range(self._height):
            for x in range(self._width):
                r, g, b = image[y, x]
                yield x, y, Color(float(r), float(g), float(b))

    def to_numpy(self) -> npt.NDArray[np.float32]:
        """Copy the canvas into a ``(height, width, 3)`` float32 array."""
        return np.ascontiguousarray(np.transpose(self._pixels.to_numpy(), (1, 0, 2)))

    def to_uint8(self) -> npt.NDArray[np.uint8]:
        """Quantise the canvas to 8-bit channels.

        Each channel is clamped to [0, 1], scaled to [0, 255] and rounded
        half up.

        Returns:
            Array of shape ``(height, width, 3)`` with dtype uint8.
        """
        out = np.zeros((self._height, self._width, 3), dtype=np.uint8)
        self._quantize(out)
        return out

    @ti.kernel
    def _quantize(self, out: ti.types.ndarray()):
        for x, y in self._pixels:
            c = self._pixels[x, y]
            for k in ti.static(range(3)):
                v = ti.min(ti.max(c[k], 0.0), 1.0)
                out[y, x, k] = ti.cast(ti.floor(v * 255.0 + 0.5), ti.u8)

    def __repr__(self) -> str:
        return f"Canvas({self._width}, {self._height})"
