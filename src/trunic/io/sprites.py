"""Legacy bitmap glyph source backed by a sprite sheet.

A sprite sheet is a grid image with one glyph per cell, tags placed
row-major in :data:`~trunic.core.phonemes.SHEET_ORDER`. It answers the same
tag vocabulary as the vector glyph table and is drawn by overlaying sprites
with a per-pixel maximum, the bitmap counterpart of stroking overlapping
paths.

Key classes:
- SpriteSheet: Slice a sheet into per-tag coverage sprites and draw cells
"""

import math
from collections.abc import Iterator, Sequence
from pathlib import Path
from types import MappingProxyType

from PIL import Image, ImageChops, ImageOps, UnidentifiedImageError

from trunic.config import SpriteSheetConfig
from trunic.core.glyphs import GlyphTable
from trunic.core.phonemes import SHEET_ORDER, SPACE
from trunic.domain import Rect
from trunic.exceptions import (
    GlyphNotFoundError,
    SpriteSheetLayoutError,
    SpriteSheetLoadError,
)


def cell_origin(index: int, layout: SpriteSheetConfig) -> tuple[int, int]:
    """Top-left pixel of sheet cell ``index``."""
    col = index % layout.columns
    row = index // layout.columns
    return (
        layout.margin + col * (layout.cell_width + layout.gap),
        layout.margin + row * (layout.cell_height + layout.gap),
    )


def sheet_size(layout: SpriteSheetConfig, count: int = len(SHEET_ORDER)) -> tuple[int, int]:
    """Minimum sheet size holding ``count`` cells."""
    rows = math.ceil(count / layout.columns)
    columns = min(count, layout.columns)
    return (
        2 * layout.margin + columns * layout.cell_width + max(0, columns - 1) * layout.gap,
        2 * layout.margin + rows * layout.cell_height + max(0, rows - 1) * layout.gap,
    )


def _coverage(image: Image.Image) -> Image.Image:
    """Extract ink coverage: alpha when present, else inverted luminance."""
    if "A" in image.getbands():
        alpha = image.getchannel("A")
        if alpha.getextrema() != (255, 255):
            return alpha
    return ImageOps.invert(image.convert("L"))


class SpriteSheet:
    """Glyph source that draws cells from a bitmap sprite sheet.

    Example:
        sheet = SpriteSheet.load(Path("runes.png"))
        renderer = Renderer(source=sheet)
    """

    def __init__(self, image: Image.Image, layout: SpriteSheetConfig | None = None) -> None:
        """Slice a sheet image into sprites.

        Args:
            image: Sheet image
            layout: Grid layout (defaults when None)

        Raises:
            SpriteSheetLayoutError: If the image is too small for the layout
        """
        self.layout = layout or SpriteSheetConfig()

        needed = sheet_size(self.layout)
        if image.width < needed[0] or image.height < needed[1]:
            raise SpriteSheetLayoutError(
                f"sheet is {image.width}x{image.height}, layout needs at least "
                f"{needed[0]}x{needed[1]} for {len(SHEET_ORDER)} glyphs"
            )

        ink = _coverage(image)
        sprites: dict[str, Image.Image] = {}
        for index, tag in enumerate(SHEET_ORDER):
            x, y = cell_origin(index, self.layout)
            sprites[tag] = ink.crop((x, y, x + self.layout.cell_width, y + self.layout.cell_height))
        # The space tag is not on the sheet; it draws nothing.
        sprites[SPACE] = Image.new("L", (self.layout.cell_width, self.layout.cell_height), 0)
        self._sprites = MappingProxyType(sprites)

    @classmethod
    def load(cls, path: Path, layout: SpriteSheetConfig | None = None) -> "SpriteSheet":
        """Load a sprite sheet from an image file.

        Raises:
            SpriteSheetLoadError: If the file cannot be read as an image
            SpriteSheetLayoutError: If the image does not fit the layout
        """
        try:
            with Image.open(path) as image:
                image.load()
                return cls(image, layout)
        except (OSError, UnidentifiedImageError) as e:
            raise SpriteSheetLoadError(str(path), str(e)) from e

    @classmethod
    def from_glyphs(
        cls,
        table: GlyphTable,
        layout: SpriteSheetConfig | None = None,
        thickness: float = 5.0,
        supersample: int = 4,
    ) -> "SpriteSheet":
        """Render vector glyphs into a new sprite sheet.

        Args:
            table: Vector glyph table to rasterize
            layout: Grid layout (defaults when None)
            thickness: Stroke width in sheet pixels
            supersample: Anti-aliasing factor

        Returns:
            SpriteSheet whose ``image`` can be saved as an asset
        """
        layout = layout or SpriteSheetConfig()
        size = sheet_size(layout)
        mask = Image.new("L", (size[0] * supersample, size[1] * supersample), 0)

        for index, tag in enumerate(SHEET_ORDER):
            x, y = cell_origin(index, layout)
            box = Rect(
                x + layout.padding,
                y + layout.padding,
                x + layout.cell_width - layout.padding,
                y + layout.cell_height - layout.padding,
            )
            table.draw_cell(
                mask,
                [tag],
                Rect(box.x0 * supersample, box.y0 * supersample, box.x1 * supersample, box.y1 * supersample),
                thickness * supersample,
                0.25 * supersample,
            )

        if supersample > 1:
            mask = mask.resize(size, resample=Image.Resampling.BOX)

        sheet = Image.new("RGBA", size, (0, 0, 0, 0))
        sheet.putalpha(mask)
        return cls(sheet, layout)

    @property
    def image(self) -> Image.Image:
        """Reassemble the sheet as black ink on a transparent background."""
        size = sheet_size(self.layout)
        alpha = Image.new("L", size, 0)
        for index, tag in enumerate(SHEET_ORDER):
            alpha.paste(self._sprites[tag], cell_origin(index, self.layout))
        sheet = Image.new("RGBA", size, (0, 0, 0, 0))
        sheet.putalpha(alpha)
        return sheet

    def lookup(self, tag: str) -> Image.Image:
        """Return the coverage sprite of a tag.

        Raises:
            GlyphNotFoundError: If tag is not on the sheet
        """
        try:
            return self._sprites[tag]
        except KeyError:
            raise GlyphNotFoundError(tag) from None

    def __contains__(self, tag: object) -> bool:
        return tag in self._sprites

    def __iter__(self) -> Iterator[str]:
        return iter(self._sprites)

    def __len__(self) -> int:
        return len(self._sprites)

    def draw_cell(
        self,
        mask: Image.Image,
        tags: Sequence[str],
        box: Rect,
        thickness: float,
        tolerance: float = 0.25,
    ) -> None:
        """Overlay the sprites of one cell into a coverage mask.

        The sprite's padded glyph area is stretched onto ``box``. Stroke
        weight comes from the bitmap itself, so ``thickness`` and
        ``tolerance`` are ignored.
        """
        sprites = [self.lookup(tag) for tag in tags]
        if not sprites:
            return

        pad = self.layout.padding
        sx = box.width / max(1, self.layout.cell_width - 2 * pad)
        sy = box.height / max(1, self.layout.cell_height - 2 * pad)
        target = Rect(
            box.x0 - pad * sx,
            box.y0 - pad * sy,
            box.x1 + pad * sx,
            box.y1 + pad * sy,
        ).snapped()
        size = (max(1, int(target.width)), max(1, int(target.height)))
        region = (int(target.x0), int(target.y0), int(target.x1), int(target.y1))

        ink = mask.crop(region)
        for sprite in sprites:
            ink = ImageChops.lighter(ink, sprite.resize(size, resample=Image.Resampling.BILINEAR))
        mask.paste(ink, region)
