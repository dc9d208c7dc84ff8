"""The shared segment lattice from which letter glyphs are assembled.

Every consonant and vowel draws a subset of the same 14 line segments on the
same lattice, which keeps the whole alphabet visually consistent. The unit
cell is 2 wide; y grows downward::

        (1,0)
       /  |  \\
    (0,1) |  (2,1)
      |  (1,2)
      |   |
    (0,3)-+--(2,3)      midline
    (0,4)(1,4)
      |  / | \\
    (0,5) |  (2,5)
       \\  |  /
        (1,6)
"""

from fontTools.pens.recordingPen import RecordingPen

from trunic.domain.path import GlyphPath

CELL_WIDTH = 2.0
CELL_HEIGHT = 6.5

LatticePoint = tuple[float, float]

# Order matters: segment k is selected by bit (13 - k) of a mask.
SEGMENTS: tuple[tuple[LatticePoint, LatticePoint], ...] = (
    # Outer edges (vowels), upper half
    ((1, 0), (0, 1)),
    ((1, 0), (2, 1)),
    ((0, 1), (0, 3)),
    # Midline
    ((0, 3), (2, 3)),
    # Outer edges (vowels), lower half
    ((0, 4), (0, 5)),
    ((0, 5), (1, 6)),
    ((1, 6), (2, 5)),
    # Inner spokes (consonants), upper half
    ((1, 2), (0, 1)),
    ((1, 0), (1, 2)),
    ((1, 2), (2, 1)),
    ((1, 2), (1, 3)),
    # Inner spokes (consonants), lower half
    ((0, 5), (1, 4)),
    ((1, 4), (1, 6)),
    ((1, 4), (2, 5)),
)

MASK_BITS = len(SEGMENTS)
FULL_MASK = (1 << MASK_BITS) - 1


def selected_segments(mask: int) -> list[tuple[LatticePoint, LatticePoint]]:
    """List the lattice segments enabled by a mask.

    Args:
        mask: Segment bitmask; the most significant bit selects segment 0

    Returns:
        Enabled segments in lattice order

    Raises:
        ValueError: If the mask has bits beyond the lattice
    """
    if mask < 0 or mask > FULL_MASK:
        raise ValueError(f"mask {mask:#x} does not fit {MASK_BITS} segments")

    return [
        segment
        for k, segment in enumerate(SEGMENTS)
        if mask & (1 << (MASK_BITS - 1 - k))
    ]


def segment_path(mask: int) -> GlyphPath:
    """Build the glyph path for a letter mask.

    Each enabled segment becomes its own open subpath.

    Args:
        mask: Segment bitmask

    Returns:
        GlyphPath of the selected segments
    """
    pen = RecordingPen()
    for start, end in selected_segments(mask):
        pen.moveTo(start)
        pen.lineTo(end)
        pen.endPath()
    return GlyphPath.from_recording(pen.value)
