"""Core algorithms for trunic.

This module contains the core algorithms for:

- Phoneme vocabulary and tag classification
- Glyph construction from the shared segment lattice
- Tokenization (longest-prefix segmentation and cell pairing)
- Rune layout and stroking
- Multi-line composition

All services except the Renderer's cell buffer are:
- Stateless (safe to share between documents)
- Pure (no side effects beyond drawing into a caller-supplied surface)

The document-level orchestrator lives in :mod:`trunic.core.processor`.

Key functions:
- normalize: Drop everything that is not a phoneme tag
- tokenize: Group phoneme tags into rune cells
- get_glyph_table: Shared vector glyph table

Key classes:
- GlyphTable: Tag to glyph-path lookup, vector glyph source
- GlyphSource: Protocol shared by the vector and bitmap backends
- Renderer: Lays out and strokes one line of cells
- LineStack: Stacks line surfaces into one document
"""

from trunic.core.compositor import LineStack
from trunic.core.glyphs import GlyphTable, build_glyph_table, get_glyph_table
from trunic.core.lattice import SEGMENTS, segment_path, selected_segments
from trunic.core.phonemes import (
    CIRCLE,
    PREFIXES,
    SPACE,
    is_consonant,
    is_letter,
    is_symbol,
    is_vowel,
    tag_class,
)
from trunic.core.renderer import Renderer
from trunic.core.sources import GlyphSource
from trunic.core.tokenizer import (
    cut_valid_prefix,
    normalize,
    split_words,
    tokenize,
    valid_prefixes,
)

__all__ = [
    "CIRCLE",
    # Glyph classes
    "GlyphSource",
    "GlyphTable",
    # Compositor classes
    "LineStack",
    "PREFIXES",
    # Renderer classes
    "Renderer",
    "SEGMENTS",
    "SPACE",
    # Glyph functions
    "build_glyph_table",
    # Tokenizer functions
    "cut_valid_prefix",
    "get_glyph_table",
    "is_consonant",
    "is_letter",
    "is_symbol",
    "is_vowel",
    "normalize",
    "segment_path",
    "selected_segments",
    "split_words",
    "tag_class",
    "tokenize",
    "valid_prefixes",
]
