"""The process-wide glyph table.

Letter glyphs come from segment masks over the shared lattice; punctuation
and the reversing circle are parametric shapes placed in the same unit cell.
The table is built once, on first use, and is read-only afterwards.
"""

from collections.abc import Iterator, Mapping, Sequence
from functools import cache
from types import MappingProxyType

from fontTools.misc.transform import Transform
from fontTools.pens.recordingPen import RecordingPen
from PIL import Image

from trunic.core._bezier import arc_to_cubics
from trunic.core.lattice import CELL_HEIGHT, CELL_WIDTH, segment_path
from trunic.core.phonemes import (
    CIRCLE,
    CONSONANT_MASKS,
    PREFIXES,
    SPACE,
    SYMBOLS,
    VOWEL_MASKS,
)
from trunic.core.raster import stroke_path
from trunic.domain import GlyphPath, Rect
from trunic.exceptions import GlyphNotFoundError

DOT_RADIUS = 0.12
CIRCLE_RADIUS = 0.35


def _line(pen: RecordingPen, start: tuple[float, float], end: tuple[float, float]) -> None:
    pen.moveTo(start)
    pen.lineTo(end)
    pen.endPath()


def _arc(
    pen: RecordingPen,
    center: tuple[float, float],
    radius: tuple[float, float],
    start: float,
    sweep: float,
    close: bool = False,
) -> None:
    curves = arc_to_cubics(center[0], center[1], radius[0], radius[1], start, sweep)
    pen.moveTo(curves[0][0].to_tuple())
    for _, c1, c2, end in curves:
        pen.curveTo(c1.to_tuple(), c2.to_tuple(), end.to_tuple())
    if close:
        pen.closePath()
    else:
        pen.endPath()


def _circle(pen: RecordingPen, center: tuple[float, float], radius: float) -> None:
    _arc(pen, center, (radius, radius), 0.0, 360.0, close=True)


def _symbol_paths() -> dict[str, GlyphPath]:
    shapes: dict[str, RecordingPen] = {tag: RecordingPen() for tag in (*SYMBOLS, CIRCLE)}

    _circle(shapes["."], (1.0, 5.6), DOT_RADIUS)

    _circle(shapes[","], (1.0, 5.4), DOT_RADIUS)
    _line(shapes[","], (1.1, 5.5), (0.75, 6.3))

    _line(shapes["!"], (1.0, 0.5), (1.0, 4.2))
    _circle(shapes["!"], (1.0, 5.6), DOT_RADIUS)

    _arc(shapes["?"], (1.0, 1.3), (0.75, 0.8), 180.0, 225.0)
    _line(shapes["?"], (1.0 + 0.75 * 0.7071, 1.3 + 0.8 * 0.7071), (1.0, 2.8))
    _line(shapes["?"], (1.0, 2.8), (1.0, 4.2))
    _circle(shapes["?"], (1.0, 5.6), DOT_RADIUS)

    _line(shapes["-"], (0.4, 3.0), (1.6, 3.0))

    # Hangs just below the bottom vertex of the lattice.
    _circle(shapes[CIRCLE], (1.0, 6.0 + CIRCLE_RADIUS), CIRCLE_RADIUS)

    return {tag: GlyphPath.from_recording(pen.value) for tag, pen in shapes.items()}


class GlyphTable:
    """Immutable mapping from phoneme tag to glyph path.

    Also a glyph source for the renderer: :meth:`draw_cell` overlays the
    paths of a cell's tags in one shared transformed space and strokes them.

    Example:
        table = get_glyph_table()
        path = table.lookup("t")
    """

    def __init__(self, paths: Mapping[str, GlyphPath]) -> None:
        """Initialize the table.

        Args:
            paths: Glyph path for every tag; copied and frozen
        """
        self._paths = MappingProxyType(dict(paths))

    def lookup(self, tag: str) -> GlyphPath:
        """Return the glyph path of a tag.

        Raises:
            GlyphNotFoundError: If tag is outside the vocabulary. Reaching
                this from tokenizer output is a bug.
        """
        try:
            return self._paths[tag]
        except KeyError:
            raise GlyphNotFoundError(tag) from None

    def __getitem__(self, tag: str) -> GlyphPath:
        return self.lookup(tag)

    def __contains__(self, tag: object) -> bool:
        return tag in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(self._paths)

    @property
    def prefixes(self) -> tuple[str, ...]:
        """Tags that may be matched in input text, longest first."""
        return tuple(p for p in PREFIXES if p in self._paths)

    def path_for(self, tags: Sequence[str]) -> GlyphPath:
        """Union the glyph paths of tags, in order."""
        return GlyphPath.union(*(self.lookup(tag) for tag in tags))

    def draw_cell(
        self,
        mask: Image.Image,
        tags: Sequence[str],
        box: Rect,
        thickness: float,
        tolerance: float = 0.25,
    ) -> None:
        """Stroke one rune cell into a coverage mask.

        Args:
            mask: ``L`` image receiving ink
            tags: Tags of the cell, drawn overlaid
            box: Pixel rectangle the unit cell maps onto
            thickness: Stroke width in pixels
            tolerance: Curve flattening tolerance in pixels
        """
        path = self.path_for(tags)
        transform = Transform().translate(box.x0, box.y0).scale(
            box.width / CELL_WIDTH,
            box.height / CELL_HEIGHT,
        )
        stroke_path(mask, path.transformed(transform), thickness, tolerance)


def build_glyph_table() -> GlyphTable:
    """Construct the glyph table from the mask tables and symbol shapes."""
    paths: dict[str, GlyphPath] = {}
    for tag, mask in CONSONANT_MASKS.items():
        paths[tag] = segment_path(mask)
    for tag, mask in VOWEL_MASKS.items():
        paths[tag] = segment_path(mask)
    paths.update(_symbol_paths())
    paths[SPACE] = GlyphPath()
    return GlyphTable(paths)


@cache
def get_glyph_table() -> GlyphTable:
    """Get the shared glyph table, building it on first use."""
    return build_glyph_table()
