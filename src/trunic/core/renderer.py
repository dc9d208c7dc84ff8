"""Layout and stroking of a single line of runes.

The renderer owns an append-only list of rune cells and draws them at a
fixed horizontal pitch. Ink is collected in a supersampled coverage mask,
filtered down to the destination resolution and pasted in the stroke color,
so overlapping strokes within a cell join cleanly.
"""

import math

from PIL import Image, ImageColor

from trunic.config import RenderConfig
from trunic.core.glyphs import get_glyph_table
from trunic.core.sources import GlyphSource
from trunic.core.tokenizer import split_words, tokenize
from trunic.domain import EMPTY_CELL, Rect, RuneCell, Surface

LETTER_WIDTH_RATIO = 0.6


class Renderer:
    """Draws a document of rune cells onto surfaces.

    A renderer is not safe for concurrent appends; give each document its
    own instance.

    Example:
        renderer = Renderer()
        renderer.append("hɛloʊ")
        surface = Surface.blank(renderer.bounds().inset(-20))
        renderer.draw_to(surface)
    """

    def __init__(
        self,
        config: RenderConfig | None = None,
        source: GlyphSource | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            config: Presentation settings (defaults when None)
            source: Glyph backend (the shared vector glyph table when None)
        """
        self.config = config or RenderConfig()
        self.source: GlyphSource = source if source is not None else get_glyph_table()
        self._cells: list[RuneCell] = []

    @property
    def cells(self) -> tuple[RuneCell, ...]:
        """Snapshot of the document."""
        return tuple(self._cells)

    @property
    def letter_height(self) -> float:
        return self.config.text_height * self.config.scale

    @property
    def letter_width(self) -> float:
        return LETTER_WIDTH_RATIO * self.letter_height

    @property
    def pitch(self) -> float:
        """Horizontal distance between the left edges of adjacent cells."""
        return self.letter_width + self.config.kerning * self.config.scale

    @property
    def stroke_width(self) -> float:
        return self.config.thickness * self.config.scale

    def append(self, text: str) -> None:
        """Append IPA text to the document.

        Unsupported characters are dropped, the remaining text is split into
        words on whitespace, and each word is tokenized into cells. One empty
        cell separates consecutive words, including the first new word from
        anything already in the document. Text that normalizes to nothing is
        a no-op.

        Args:
            text: IPA text
        """
        for word in split_words(text):
            if self._cells:
                self._cells.append(EMPTY_CELL)
            self._cells.extend(tokenize(word))

    def append_rune(self, *tags: str) -> None:
        """Append one cell drawn by overlaying the given tags.

        Tags are not validated here; an unknown tag surfaces as
        ``GlyphNotFoundError`` when the document is drawn.
        """
        self._cells.append(RuneCell(tuple(tags)))

    def size(self) -> tuple[int, int]:
        """Return the content size for the current cell count.

        Stroke thickness is not included; callers pad before rasterizing.
        """
        width = math.ceil(len(self._cells) * self.pitch)
        height = math.ceil(self.letter_height)
        return (max(0, width), height)

    def bounds(self) -> Rect:
        """Return the content rectangle with its origin at (0, 0)."""
        width, height = self.size()
        return Rect(0, 0, width, height)

    def cell_box(self, index: int, x: float = 0.0, y: float = 0.0) -> Rect:
        """Logical rectangle occupied by cell ``index`` when drawn at (x, y)."""
        left = x + index * self.pitch
        return Rect(left, y, left + self.letter_width, y + self.letter_height)

    def draw_to(self, surface: Surface, x: float = 0.0, y: float = 0.0) -> None:
        """Draw the document with its top-left corner at logical (x, y).

        Coordinates are logical, so the result does not depend on where the
        surface's own bounds start.

        Args:
            surface: Destination; written in place
            x: Logical x of the first cell's left edge
            y: Logical y of the cells' top edge

        Raises:
            GlyphNotFoundError: If a cell holds a tag the source lacks
        """
        factor = self.config.supersample
        width, height = surface.image.size
        if width == 0 or height == 0:
            return

        ox, oy = surface.origin
        mask = Image.new("L", (width * factor, height * factor), 0)

        for i, cell in enumerate(self._cells):
            if cell.is_empty():
                continue

            box = self.cell_box(i, x - ox, y - oy)
            self.source.draw_cell(
                mask,
                cell.tags,
                Rect(box.x0 * factor, box.y0 * factor, box.x1 * factor, box.y1 * factor),
                self.stroke_width * factor,
                self.config.flatten_tolerance * factor,
            )

        if factor > 1:
            mask = mask.resize((width, height), resample=Image.Resampling.BOX)

        ink = ImageColor.getcolor(self.config.color, surface.mode)
        surface.image.paste(ink, (0, 0), mask)
