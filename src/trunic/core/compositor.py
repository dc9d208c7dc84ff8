"""Stacking single-line surfaces into one document image."""

from collections.abc import Iterable
from typing import Any

from PIL import Image, ImageColor

from trunic.domain import Rect, Surface


class LineStack:
    """Independently sized line surfaces stacked top to bottom.

    Lines are placed with no gap, starting at y = 0; each keeps its own
    height and its own horizontal extent. The stack is immutable once built.

    Example:
        stack = LineStack([first, second])
        document = stack.to_surface()
    """

    def __init__(self, lines: Iterable[Surface], background: str = "white") -> None:
        """Initialize the stack.

        Args:
            lines: Line surfaces in reading order
            background: Color reported outside every line
        """
        self._lines: tuple[Surface, ...] = tuple(lines)
        self.background = background

        placed: list[Rect] = []
        top = 0
        for line in self._lines:
            own = line.bounds
            placed.append(Rect(own.x0, top, own.x1, top + own.height))
            top += own.height
        self._placed: tuple[Rect, ...] = tuple(placed)

    @property
    def lines(self) -> tuple[Surface, ...]:
        return self._lines

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def mode(self) -> str:
        """Image mode of the composite (that of the first line)."""
        if not self._lines:
            return "RGB"
        return self._lines[0].mode

    def placements(self) -> tuple[Rect, ...]:
        """Rectangle each line occupies in composite coordinates."""
        return self._placed

    def bounds(self) -> Rect:
        """Union of all placed line rectangles."""
        result = Rect(0, 0, 0, 0)
        for rect in self._placed:
            result = result.union(rect)
        return result

    def pixel(self, x: int, y: int) -> Any:
        """Sample the composite at (x, y).

        Args:
            x: Composite x coordinate
            y: Composite y coordinate

        Returns:
            The pixel of the line covering the point, or the background
            color when no line does
        """
        for line, rect in zip(self._lines, self._placed):
            if rect.contains(x, y):
                own = line.bounds
                return line.pixel(x - rect.x0 + own.x0, y - rect.y0 + own.y0)
        return ImageColor.getcolor(self.background, self.mode)

    def to_surface(self) -> Surface:
        """Materialize the stack into a single surface.

        Raises:
            ValueError: If the stack has no lines
        """
        if not self._lines:
            raise ValueError("cannot compose an empty line stack")

        bounds = self.bounds()
        image = Image.new(
            self.mode,
            (int(bounds.width), int(bounds.height)),
            ImageColor.getcolor(self.background, self.mode),
        )
        for line, rect in zip(self._lines, self._placed):
            image.paste(line.image, (int(rect.x0 - bounds.x0), int(rect.y0 - bounds.y0)))

        return Surface(image=image, origin=(int(bounds.x0), int(bounds.y0)))
