"""Vector path types for rune glyphs.

This module defines the geometric types used to describe glyph shapes:
- Point: A 2D point with curve type information
- PointType: Enum for point type on a path
- GlyphPath: An immutable recording of fontTools pen commands

Glyph paths live in a normalized unit cell 2 units wide and about 6.5 units
tall, with y pointing down. They are built once and shared read-only.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from fontTools.misc.transform import Transform
from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.recordingPen import RecordingPen
from fontTools.pens.transformPen import TransformPen

PenCommand = tuple[str, tuple[tuple[float, float], ...]]


class PointType(Enum):
    """Point type on a path.

    - ON_CURVE: Point on the actual outline
    - OFF_CURVE_CUBIC: Cubic Bezier control point
    """

    ON_CURVE = auto()
    OFF_CURVE_CUBIC = auto()


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space with curve metadata.

    Attributes:
        x: X coordinate
        y: Y coordinate
        point_type: Type of point (on-curve or control point)
    """

    x: float
    y: float
    point_type: PointType = PointType.ON_CURVE

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass(frozen=True)
class GlyphPath:
    """An immutable vector shape made of lines and cubic curves.

    The path is stored as the command list a fontTools ``RecordingPen``
    produces, so any pen can consume it through :meth:`draw`.

    Attributes:
        commands: Tuple of ``(operator, points)`` pen commands
    """

    commands: tuple[PenCommand, ...] = ()

    @classmethod
    def from_recording(cls, value: Iterable[tuple[str, Any]]) -> "GlyphPath":
        """Freeze the ``value`` list of a RecordingPen.

        Args:
            value: Pen commands as recorded by ``RecordingPen``

        Returns:
            GlyphPath holding tuple copies of the commands
        """
        return cls(tuple((op, tuple(tuple(pt) for pt in args)) for op, args in value))

    @classmethod
    def union(cls, *paths: "GlyphPath") -> "GlyphPath":
        """Concatenate paths in order into a single path."""
        commands: list[PenCommand] = []
        for path in paths:
            commands.extend(path.commands)
        return cls(tuple(commands))

    def __add__(self, other: "GlyphPath") -> "GlyphPath":
        return GlyphPath.union(self, other)

    def is_empty(self) -> bool:
        """Check whether the path has no drawing commands."""
        return not self.commands

    def draw(self, pen: Any) -> None:
        """Replay the path into a fontTools pen.

        Args:
            pen: Any object implementing the fontTools pen protocol
        """
        for op, args in self.commands:
            getattr(pen, op)(*args)

    def transformed(self, transform: Transform) -> "GlyphPath":
        """Return a copy of the path with an affine transform applied.

        Args:
            transform: fontTools affine transform

        Returns:
            New transformed GlyphPath
        """
        recording = RecordingPen()
        self.draw(TransformPen(recording, transform))
        return GlyphPath.from_recording(recording.value)

    def bounds(self) -> tuple[float, float, float, float] | None:
        """Calculate the tight bounding box of the path.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y), or None for an empty path
        """
        pen = BoundsPen(None)
        self.draw(pen)
        return pen.bounds
