"""Stroking vector paths onto Pillow images.

Paths are replayed into a flattening pen that turns lines and cubic curves
into polylines, which are then stroked with Pillow. Round caps and joins are
produced by stamping a disc at every polyline vertex.
"""

from typing import Any

from fontTools.pens.basePen import BasePen
from PIL import Image, ImageDraw

from trunic.core._bezier import flatten_cubic
from trunic.domain import GlyphPath, Point, PointType

Polyline = list[tuple[float, float]]


class PolylinePen(BasePen):
    """A fontTools pen that records flattened polylines.

    Example:
        pen = PolylinePen(tolerance=0.25)
        path.draw(pen)
        for line in pen.polylines:
            ...
    """

    def __init__(self, tolerance: float = 0.25) -> None:
        super().__init__(glyphSet=None)
        self.tolerance = tolerance
        self.polylines: list[Polyline] = []
        self._current: Polyline = []

    def _flush(self) -> None:
        if self._current:
            self.polylines.append(self._current)
        self._current = []

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self._flush()
        self._current = [tuple(pt)]

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self._current.append(tuple(pt))

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        start = self._getCurrentPoint()
        points = flatten_cubic(
            [
                Point(*start),
                Point(*pt1, PointType.OFF_CURVE_CUBIC),
                Point(*pt2, PointType.OFF_CURVE_CUBIC),
                Point(*pt3),
            ],
            self.tolerance,
        )
        self._current.extend(p.to_tuple() for p in points[1:])

    def _closePath(self) -> None:
        if self._current and self._current[0] != self._current[-1]:
            self._current.append(self._current[0])
        self._flush()

    def _endPath(self) -> None:
        self._flush()


def flatten(path: GlyphPath, tolerance: float = 0.25) -> list[Polyline]:
    """Flatten a path into polylines.

    Args:
        path: Path to flatten, already in device coordinates
        tolerance: Maximum deviation from curves, in device units

    Returns:
        One polyline per subpath
    """
    pen = PolylinePen(tolerance)
    path.draw(pen)
    pen.endPath()
    return pen.polylines


def stroke_polylines(
    draw: ImageDraw.ImageDraw,
    polylines: list[Polyline],
    width: float,
    fill: Any = 255,
) -> None:
    """Stroke polylines with round caps and round joins.

    Args:
        draw: Pillow drawing context
        polylines: Polylines in pixel coordinates
        width: Stroke width in pixels
        fill: Ink value for the image mode
    """
    line_width = max(1, round(width))
    radius = width / 2

    for line in polylines:
        if len(line) >= 2:
            draw.line(line, fill=fill, width=line_width, joint="curve")
        for x, y in line:
            draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=fill)


def stroke_path(
    mask: Image.Image,
    path: GlyphPath,
    width: float,
    tolerance: float = 0.25,
) -> None:
    """Stroke a device-space path into an ``L`` coverage mask.

    Args:
        mask: Grayscale image receiving full-intensity ink
        path: Path in the mask's pixel coordinates
        width: Stroke width in pixels
        tolerance: Curve flattening tolerance in pixels
    """
    stroke_polylines(ImageDraw.Draw(mask), flatten(path, tolerance), width)
