"""Domain models for trunic.

This module contains the value types shared by the tokenizer, the glyph
sources and the renderer. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Independent of how glyphs are finally rasterized

Key classes:
- Point: A 2D point with curve metadata
- GlyphPath: Immutable vector shape of one phoneme tag
- RuneCell: Ordered tags drawn together in one character slot
- TagClass: Phonetic class of a tag
- Rect: Axis-aligned rectangle
- Surface: A Pillow image with a logical origin
"""

from trunic.domain.path import GlyphPath, Point, PointType
from trunic.domain.rune import EMPTY_CELL, RuneCell, TagClass
from trunic.domain.surface import Rect, Surface

__all__: list[str] = [
    # Enums
    "PointType",
    "TagClass",
    # Core types
    "EMPTY_CELL",
    "GlyphPath",
    "Point",
    "Rect",
    "RuneCell",
    "Surface",
]
