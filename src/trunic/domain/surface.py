"""Raster surfaces with a logical coordinate origin.

Pillow images always start at pixel (0, 0). A Surface pairs an image with
the logical coordinate of its top-left pixel, so a line can be drawn at
(0, 0) onto an image whose bounds were grown outward for stroke padding.
"""

import math
from dataclasses import dataclass
from typing import Any

from PIL import Image, ImageColor


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle, half-open on the max edges.

    Attributes:
        x0: Left edge
        y0: Top edge
        x1: Right edge (exclusive)
        y1: Bottom edge (exclusive)
    """

    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    def is_empty(self) -> bool:
        """Check if the rectangle contains no points."""
        return self.x0 >= self.x1 or self.y0 >= self.y1

    def contains(self, x: float, y: float) -> bool:
        """Check if a point lies inside the rectangle."""
        return self.x0 <= x < self.x1 and self.y0 <= y < self.y1

    def inset(self, n: float) -> "Rect":
        """Shrink by ``n`` on every side; a negative ``n`` grows the rectangle."""
        return Rect(self.x0 + n, self.y0 + n, self.x1 - n, self.y1 - n)

    def translate(self, dx: float, dy: float) -> "Rect":
        return Rect(self.x0 + dx, self.y0 + dy, self.x1 + dx, self.y1 + dy)

    def union(self, other: "Rect") -> "Rect":
        """Smallest rectangle containing both; empty operands are ignored."""
        if self.is_empty():
            return other
        if other.is_empty():
            return self
        return Rect(
            min(self.x0, other.x0),
            min(self.y0, other.y0),
            max(self.x1, other.x1),
            max(self.y1, other.y1),
        )

    def snapped(self) -> "Rect":
        """Round outward to whole pixels."""
        return Rect(
            math.floor(self.x0),
            math.floor(self.y0),
            math.ceil(self.x1),
            math.ceil(self.y1),
        )


@dataclass(frozen=True)
class Surface:
    """A Pillow image placed at a logical origin.

    The image object itself is mutable; drawing writes into it in place.

    Attributes:
        image: Backing Pillow image
        origin: Logical coordinate of the image's top-left pixel
    """

    image: Image.Image
    origin: tuple[int, int] = (0, 0)

    @classmethod
    def blank(cls, bounds: Rect, background: str = "white", mode: str = "RGB") -> "Surface":
        """Allocate a surface covering ``bounds`` filled with ``background``.

        Args:
            bounds: Logical area to cover (rounded outward to pixels)
            background: Fill color
            mode: Pillow image mode

        Returns:
            New Surface whose bounds equal the snapped rectangle
        """
        snapped = bounds.snapped()
        size = (max(0, int(snapped.width)), max(0, int(snapped.height)))
        image = Image.new(mode, size, ImageColor.getcolor(background, mode))
        return cls(image=image, origin=(int(snapped.x0), int(snapped.y0)))

    @property
    def bounds(self) -> Rect:
        ox, oy = self.origin
        width, height = self.image.size
        return Rect(ox, oy, ox + width, oy + height)

    @property
    def mode(self) -> str:
        return self.image.mode

    def pixel(self, x: int, y: int) -> Any:
        """Read the pixel at logical coordinates (x, y).

        Raises:
            IndexError: If the point is outside the surface
        """
        if not self.bounds.contains(x, y):
            raise IndexError(f"({x}, {y}) outside surface bounds {self.bounds}")
        ox, oy = self.origin
        return self.image.getpixel((x - ox, y - oy))
