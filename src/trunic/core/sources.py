"""The capability shared by every glyph backend.

The renderer only knows how to place cells; turning a cell's tags into ink
is delegated to a glyph source. Two sources exist: the vector
:class:`~trunic.core.glyphs.GlyphTable` and the legacy bitmap
:class:`~trunic.io.sprites.SpriteSheet`.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from PIL import Image

from trunic.domain import Rect


@runtime_checkable
class GlyphSource(Protocol):
    """Resolves phoneme tags to drawable ink."""

    def __contains__(self, tag: object) -> bool:
        """Return True if the source has a glyph for tag."""
        ...

    def draw_cell(
        self,
        mask: Image.Image,
        tags: Sequence[str],
        box: Rect,
        thickness: float,
        tolerance: float = 0.25,
    ) -> None:
        """Draw the overlaid glyphs of one cell into an ``L`` coverage mask.

        Raises:
            GlyphNotFoundError: If any tag has no glyph
        """
        ...
