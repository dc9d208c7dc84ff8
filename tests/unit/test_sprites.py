"""Unit tests for the bitmap sprite-sheet glyph source."""

import pytest
from PIL import Image, ImageChops, ImageDraw, ImageOps

from trunic.config import RenderConfig, SpriteSheetConfig
from trunic.core.glyphs import get_glyph_table
from trunic.core.phonemes import CIRCLE, PREFIXES, SHEET_ORDER, SPACE
from trunic.core.renderer import Renderer
from trunic.core.sources import GlyphSource
from trunic.core.tokenizer import tokenize
from trunic.domain import Rect, Surface
from trunic.exceptions import (
    GlyphNotFoundError,
    SpriteSheetError,
    SpriteSheetLayoutError,
    SpriteSheetLoadError,
)
from trunic.io.sprites import SpriteSheet, cell_origin, sheet_size


@pytest.fixture(scope="module")
def sheet() -> SpriteSheet:
    """Sprite sheet rendered from the vector glyphs."""
    return SpriteSheet.from_glyphs(get_glyph_table())


def ink_bbox(surface: Surface) -> tuple[int, int, int, int] | None:
    return ImageOps.invert(surface.image.convert("L")).getbbox()


class TestLayout:
    """Tests for sheet geometry."""

    def test_sheet_order(self):
        assert len(SHEET_ORDER) == 51
        assert SHEET_ORDER[-1] == CIRCLE
        assert SPACE not in SHEET_ORDER

    def test_default_sheet_size(self):
        # 51 glyphs in 6 columns need 9 rows.
        assert sheet_size(SpriteSheetConfig()) == (6 * 64 + 5 * 4, 9 * 92 + 8 * 4)

    def test_cell_origin(self):
        layout = SpriteSheetConfig()
        assert cell_origin(0, layout) == (0, 0)
        assert cell_origin(5, layout) == (5 * 68, 0)
        assert cell_origin(7, layout) == (68, 96)

    def test_margin(self):
        layout = SpriteSheetConfig(margin=3)
        assert cell_origin(0, layout) == (3, 3)
        assert sheet_size(layout, count=1) == (64 + 6, 92 + 6)


class TestSpriteSheet:
    """Tests for building and reading sprite sheets."""

    def test_same_tags_as_vector_table(self, sheet):
        assert set(sheet) == set(get_glyph_table())
        assert len(sheet) == len(get_glyph_table())

    def test_glyphs_have_ink(self, sheet):
        for tag in SHEET_ORDER:
            assert sheet.lookup(tag).getbbox() is not None, tag

    def test_space_is_blank(self, sheet):
        assert SPACE in sheet
        assert sheet.lookup(SPACE).getbbox() is None

    def test_unknown_tag(self, sheet):
        assert "x" not in sheet
        with pytest.raises(GlyphNotFoundError):
            sheet.lookup("x")

    def test_is_glyph_source(self, sheet):
        assert isinstance(sheet, GlyphSource)

    def test_image_round_trip(self, sheet):
        reread = SpriteSheet(sheet.image)
        for tag in SHEET_ORDER:
            diff = ImageChops.difference(reread.lookup(tag), sheet.lookup(tag))
            assert diff.getbbox() is None, tag

    def test_load_from_file(self, sheet, tmp_path):
        path = tmp_path / "runes.png"
        sheet.image.save(path)
        loaded = SpriteSheet.load(path)
        assert len(loaded) == len(sheet)

    def test_opaque_sheet_uses_luminance(self):
        layout = SpriteSheetConfig()
        image = Image.new("RGB", sheet_size(layout), "white")
        x, y = cell_origin(0, layout)
        ImageDraw.Draw(image).rectangle((x + 20, y + 20, x + 40, y + 60), fill="black")
        opaque = SpriteSheet(image, layout)
        assert opaque.lookup(SHEET_ORDER[0]).getbbox() is not None
        assert opaque.lookup(SHEET_ORDER[1]).getbbox() is None

    def test_sheet_too_small(self):
        with pytest.raises(SpriteSheetLayoutError):
            SpriteSheet(Image.new("RGB", (100, 100), "white"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(SpriteSheetLoadError) as exc_info:
            SpriteSheet.load(tmp_path / "missing.png")
        assert "missing.png" in exc_info.value.path

    def test_not_an_image(self, tmp_path):
        path = tmp_path / "runes.png"
        path.write_text("not a png")
        with pytest.raises(SpriteSheetError):
            SpriteSheet.load(path)


class TestDrawCell:
    """Tests for drawing cells from sprites."""

    def test_every_tokenized_pair_resolves(self, sheet):
        mask = Image.new("L", (64, 92), 0)
        box = Rect(10, 10, 54, 82)
        for a in PREFIXES:
            for b in PREFIXES:
                for cell in tokenize(a + b):
                    sheet.draw_cell(mask, cell.tags, box, 5.0)

    def test_unknown_tag(self, sheet):
        mask = Image.new("L", (64, 92), 0)
        with pytest.raises(GlyphNotFoundError):
            sheet.draw_cell(mask, ["t", "x"], Rect(10, 10, 54, 82), 5.0)

    def test_overlay_keeps_both_glyphs(self, sheet):
        box = Rect(10, 10, 54, 82)
        alone = Image.new("L", (64, 92), 0)
        sheet.draw_cell(alone, ["t"], box, 5.0)
        paired = Image.new("L", (64, 92), 0)
        sheet.draw_cell(paired, ["ə", "t", CIRCLE], box, 5.0)
        # Per-pixel maximum: the pair covers everything "t" alone does.
        assert ImageChops.subtract(alone, paired).getbbox() is None
        assert ImageChops.difference(alone, paired).getbbox() is not None

    def test_matches_vector_rendering(self, sheet):
        """Both backends put the same runes in the same place."""
        config = RenderConfig()
        vector = Renderer(config)
        bitmap = Renderer(config, source=sheet)
        for renderer in (vector, bitmap):
            renderer.append("hɛloʊ ət")

        bounds = vector.bounds().inset(-20)
        vector_surface = Surface.blank(bounds)
        bitmap_surface = Surface.blank(bounds)
        vector.draw_to(vector_surface)
        bitmap.draw_to(bitmap_surface)

        expected = ink_bbox(vector_surface)
        actual = ink_bbox(bitmap_surface)
        assert expected is not None and actual is not None
        for a, b in zip(expected, actual):
            assert abs(a - b) <= 6
