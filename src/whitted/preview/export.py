"""Image export utilities for rendered canvases.

Supported formats:
    - PPM, plain text (P3) with lines wrapped to at most 70 characters
    - PPM, binary (P6)
    - PNG (8-bit RGB via Pillow)

All formats share the same quantisation: channels are clamped to [0, 1] and
scaled to 0..255 with round-half-up, by ``Canvas.to_uint8``. No gamma or
tone mapping is applied; canvas colors are written as-is.

Example:
    >>> from src.whitted.preview.canvas import Canvas
    >>> from src.whitted.preview.export import save_png, to_ppm
    >>> canvas = Canvas(5, 3)
    >>> to_ppm(canvas).splitlines()[:3]
    ['P3', '5 3', '255']
    >>> save_png(canvas, "output.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image as PILImage

if TYPE_CHECKING:
    from src.whitted.preview.canvas import Canvas

# Maximum channel value written in PPM headers
PPM_MAX_VALUE = 255

# Plain PPM readers are only required to accept lines this long
PPM_LINE_WIDTH = 70


def _wrap_values(values: list[str], width: int = PPM_LINE_WIDTH) -> list[str]:
    """Pack space-separated values into lines of at most ``width`` chars."""
    lines: list[str] = []
    current = ""
    for value in values:
        if not current:
            current = value
        elif len(current) + 1 + len(value) <= width:
            current = f"{current} {value}"
        else:
            lines.append(current)
            current = value
    if current:
        lines.append(current)
    return lines


def to_ppm(canvas: Canvas) -> str:
    """Encode a canvas as plain-text PPM (P3).

    Each image row starts on a new line; rows longer than 70 characters
    are wrapped at a space. The output ends with a newline.

    Args:
        canvas: The canvas to encode.

    Returns:
        The PPM document.
    """
    image = canvas.to_uint8()
    lines = ["P3", f"{canvas.width} {canvas.height}", str(PPM_MAX_VALUE)]
    for row in image:
        lines.extend(_wrap_values([str(int(v)) for v in row.reshape(-1)]))
    return "\n".join(lines) + "\n"


def to_p6_ppm(canvas: Canvas) -> bytes:
    """Encode a canvas as binary PPM (P6)."""
    header = f"P6\n{canvas.width} {canvas.height}\n{PPM_MAX_VALUE}\n".encode("ascii")
    return header + canvas.to_uint8().tobytes()


def save_ppm(canvas: Canvas, filepath: str | Path, *, binary: bool = False) -> None:
    """Write a canvas to a PPM file.

    Args:
        canvas: The canvas to save.
        filepath: Output file path.
        binary: Write P6 instead of plain-text P3.
    """
    path = Path(filepath)
    if binary:
        path.write_bytes(to_p6_ppm(canvas))
    else:
        path.write_text(to_ppm(canvas), encoding="ascii")


def save_png(canvas: Canvas, filepath: str | Path) -> None:
    """Write a canvas to an 8-bit RGB PNG file.

    Args:
        canvas: The canvas to save.
        filepath: Output file path (should end in .png).
    """
    pil_image = PILImage.fromarray(canvas.to_uint8())
    pil_image.save(filepath)
