"""RGB color arithmetic.

Colors are unbounded floats: lighting routinely produces channels above 1.0
and those values are only clamped when a canvas is quantised to bytes.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.whitted.core.tup import nearly_eq


@dataclass(frozen=True, eq=False)
class Color:
    """An RGB color with float channels.

    Attributes:
        red: Red channel (1.0 is full intensity).
        green: Green channel.
        blue: Blue channel.
    """

    red: float
    green: float
    blue: float

    @classmethod
    def from_hex(cls, value: int) -> Color:
        """Create a color from a 0xRRGGBB integer."""
        return cls(
            ((value >> 16) & 0xFF) / 255.0,
            ((value >> 8) & 0xFF) / 255.0,
            (value & 0xFF) / 255.0,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            nearly_eq(self.red, other.red)
            and nearly_eq(self.green, other.green)
            and nearly_eq(self.blue, other.blue)
        )

    def __add__(self, other: Color) -> Color:
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Color) -> Color:
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: Color | float) -> Color:
        # Color * Color is the Hadamard product used to tint light by a surface.
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return Color(self.red * other, self.green * other, self.blue * other)

    def __rmul__(self, scalar: float) -> Color:
        return Color(self.red * scalar, self.green * scalar, self.blue * scalar)

    def __iter__(self):
        yield self.red
        yield self.green
        yield self.blue


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)
CYAN = Color(0.0, 1.0, 1.0)
MAGENTA = Color(1.0, 0.0, 1.0)
YELLOW = Color(1.0, 1.0, 0.0)
OLIVE = Color.from_hex(0x808000)
