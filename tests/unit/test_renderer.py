"""Unit tests for single-line layout and drawing."""

import math

import pytest
from PIL import ImageChops, ImageOps

from trunic.config import RenderConfig
from trunic.core.phonemes import CIRCLE
from trunic.core.renderer import LETTER_WIDTH_RATIO, Renderer
from trunic.domain import EMPTY_CELL, Rect, RuneCell, Surface
from trunic.exceptions import GlyphNotFoundError


class RecordingSource:
    """Glyph source that records the boxes it is asked to draw."""

    def __init__(self):
        self.calls = []

    def __contains__(self, tag):
        return True

    def draw_cell(self, mask, tags, box, thickness, tolerance=0.25):
        self.calls.append((tuple(tags), box, thickness))


def ink_bbox(surface: Surface) -> Rect | None:
    """Logical bounding box of non-background pixels on a white surface."""
    bbox = ImageOps.invert(surface.image.convert("L")).getbbox()
    if bbox is None:
        return None
    ox, oy = surface.origin
    return Rect(bbox[0] + ox, bbox[1] + oy, bbox[2] + ox, bbox[3] + oy)


class TestLayout:
    """Tests for cell metrics and document size."""

    def test_default_metrics(self):
        renderer = Renderer()
        assert renderer.letter_height == 72
        assert renderer.letter_width == pytest.approx(LETTER_WIDTH_RATIO * 72)
        assert renderer.pitch == pytest.approx(43.2)
        assert renderer.stroke_width == 5

    def test_scale_multiplies_everything(self):
        renderer = Renderer(RenderConfig(scale=2, kerning=3))
        assert renderer.letter_height == 144
        assert renderer.pitch == pytest.approx(0.6 * 144 + 6)
        assert renderer.stroke_width == 10

    def test_empty_document(self):
        renderer = Renderer()
        assert renderer.cells == ()
        assert renderer.size() == (0, 72)
        assert renderer.bounds() == Rect(0, 0, 0, 72)

    @pytest.mark.parametrize("count", [1, 2, 5, 12])
    @pytest.mark.parametrize("kerning", [0.0, 4.0, -6.5])
    def test_width_is_count_times_pitch(self, count, kerning):
        config = RenderConfig(kerning=kerning)
        renderer = Renderer(config)
        for _ in range(count):
            renderer.append_rune("t")
        width, height = renderer.size()
        assert width == math.ceil(count * (0.6 * 72 + kerning))
        assert height == 72

    def test_width_independent_of_tags(self):
        a = Renderer()
        a.append("tə sə!")
        b = Renderer()
        for tags in (("ʃ",), ("ə", "t", CIRCLE), (), ("!",)):
            b.append_rune(*tags)
        assert len(a.cells) == len(b.cells) == 4
        assert a.size() == b.size()

    def test_width_never_negative(self):
        renderer = Renderer(RenderConfig(kerning=-100))
        renderer.append("təsə")
        assert renderer.size()[0] == 0

    def test_cell_box(self):
        renderer = Renderer(RenderConfig(text_height=65))
        assert renderer.cell_box(0) == Rect(0, 0, 39, 65)
        assert renderer.cell_box(2, 10, 5) == Rect(88, 5, 127, 70)

    def test_bounds_start_at_origin(self):
        renderer = Renderer()
        renderer.append("hɛloʊ")
        assert renderer.bounds() == Rect(0, 0, 87, 72)


class TestAppend:
    """Tests for building a document from text."""

    def test_append_tokenizes(self):
        renderer = Renderer()
        renderer.append("təs")
        assert renderer.cells == (RuneCell(("t", "ə")), RuneCell(("s",)))

    def test_words_separated_by_one_empty_cell(self):
        renderer = Renderer()
        renderer.append("tə   sə")
        assert renderer.cells == (RuneCell(("t", "ə")), EMPTY_CELL, RuneCell(("s", "ə")))

    def test_append_twice_inserts_one_empty_cell(self):
        renderer = Renderer()
        renderer.append("tə")
        renderer.append("s")
        assert renderer.cells == (RuneCell(("t", "ə")), EMPTY_CELL, RuneCell(("s",)))

    def test_append_twice_with_surrounding_spaces(self):
        renderer = Renderer()
        renderer.append("tə ")
        renderer.append(" s")
        assert list(renderer.cells).count(EMPTY_CELL) == 1

    def test_empty_text_is_noop(self):
        renderer = Renderer()
        renderer.append("tə")
        before = renderer.cells
        renderer.append("")
        renderer.append("123")
        renderer.append("   ")
        assert renderer.cells == before

    def test_noop_append_does_not_lead_with_space(self):
        renderer = Renderer()
        renderer.append("1")
        renderer.append("t")
        assert renderer.cells == (RuneCell(("t",)),)

    @pytest.mark.parametrize("text", ["t\tə", "t\nə", "t\u00a0ə"])
    def test_only_space_separates_words(self, text):
        # Other whitespace is not a tag, so it is dropped before splitting.
        renderer = Renderer()
        renderer.append(text)
        assert renderer.cells == (RuneCell(("t", "ə")),)

    def test_unknown_characters_do_not_split_words(self):
        renderer = Renderer()
        renderer.append("t1ə")
        assert renderer.cells == (RuneCell(("t", "ə")),)

    def test_append_rune(self):
        renderer = Renderer()
        renderer.append_rune("ə", "t", CIRCLE)
        renderer.append_rune()
        assert renderer.cells == (RuneCell(("ə", "t", CIRCLE)), EMPTY_CELL)

    def test_cells_is_a_snapshot(self):
        renderer = Renderer()
        renderer.append("t")
        snapshot = renderer.cells
        renderer.append("s")
        assert snapshot == (RuneCell(("t",)),)


class TestDrawTo:
    """Tests for drawing a document onto a surface."""

    def test_ink_inside_padded_bounds(self):
        renderer = Renderer()
        renderer.append("hɛloʊ wɝld")
        surface = Surface.blank(renderer.bounds().inset(-20))
        renderer.draw_to(surface)

        ink = ink_bbox(surface)
        assert ink is not None
        grown = renderer.bounds().inset(-renderer.stroke_width)
        assert ink.x0 >= grown.x0
        assert ink.y0 >= grown.y0
        assert ink.x1 <= grown.x1
        assert ink.y1 <= grown.y1

    def test_draws_in_stroke_color(self):
        renderer = Renderer(RenderConfig(color="red"))
        renderer.append("tə")
        surface = Surface.blank(renderer.bounds().inset(-20))
        renderer.draw_to(surface)
        colors = {color for _, color in surface.image.getcolors(maxcolors=1 << 16)}
        assert (255, 0, 0) in colors
        assert (255, 255, 255) in colors

    def test_grayscale_surface(self):
        renderer = Renderer()
        renderer.append("t")
        surface = Surface.blank(renderer.bounds().inset(-20), mode="L")
        renderer.draw_to(surface)
        assert surface.image.getextrema() == (0, 255)

    def test_empty_cells_draw_nothing(self):
        renderer = Renderer()
        renderer.append_rune()
        renderer.append_rune()
        surface = Surface.blank(renderer.bounds().inset(-20))
        renderer.draw_to(surface)
        assert ink_bbox(surface) is None

    def test_empty_cells_keep_their_slot(self):
        source = RecordingSource()
        renderer = Renderer(RenderConfig(supersample=1, text_height=65), source=source)
        renderer.append("t sə")
        renderer.draw_to(Surface.blank(renderer.bounds()))
        assert [tags for tags, _, _ in source.calls] == [("t",), ("s", "ə")]
        assert [box.x0 for _, box, _ in source.calls] == [0, 78]

    def test_boxes_scaled_for_supersampling(self):
        source = RecordingSource()
        renderer = Renderer(RenderConfig(supersample=4, text_height=65), source=source)
        renderer.append("t")
        renderer.draw_to(Surface.blank(renderer.bounds().inset(-20)))
        (_, box, thickness), = source.calls
        assert box == Rect(80, 80, 80 + 4 * 39, 80 + 4 * 65)
        assert thickness == 20

    def test_draw_offset(self):
        renderer = Renderer()
        renderer.append("t")
        surface = Surface.blank(Rect(0, 0, 200, 150))
        renderer.draw_to(surface, 100, 50)
        ink = ink_bbox(surface)
        assert ink is not None
        assert ink.x0 >= 100 - renderer.stroke_width
        assert ink.y0 >= 50 - renderer.stroke_width

    def test_origin_invariance(self):
        """The same logical drawing lands on the same logical pixels."""
        renderer = Renderer(RenderConfig(text_height=65))
        renderer.append("təs")
        width, height = renderer.size()

        a = Surface.blank(Rect(-20, -20, width + 20, height + 20))
        b = Surface.blank(Rect(-50, -7, width + 30, height + 40))
        renderer.draw_to(a)
        renderer.draw_to(b)

        common = (-20, -7, width + 20, height + 20)
        crop_a = a.image.crop((common[0] - a.origin[0], common[1] - a.origin[1],
                               common[2] - a.origin[0], common[3] - a.origin[1]))
        crop_b = b.image.crop((common[0] - b.origin[0], common[1] - b.origin[1],
                               common[2] - b.origin[0], common[3] - b.origin[1]))
        diff = ImageChops.difference(crop_a.convert("L"), crop_b.convert("L"))
        assert diff.getextrema()[1] <= 40

    def test_unknown_tag_raises(self):
        renderer = Renderer()
        renderer.append_rune("x")
        surface = Surface.blank(renderer.bounds().inset(-20))
        with pytest.raises(GlyphNotFoundError):
            renderer.draw_to(surface)

    def test_zero_sized_surface(self):
        renderer = Renderer()
        renderer.append("t")
        renderer.draw_to(Surface.blank(Rect(0, 0, 0, 0)))
