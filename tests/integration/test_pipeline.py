"""Integration tests for rendering whole documents.

These tests run the real tokenizer, glyph table and rasterizer end to end
and check the composed PNG.
"""

from unittest.mock import Mock

import pytest
from PIL import Image, ImageOps

from trunic.config import OutputConfig, RenderConfig, SpriteSheetConfig, TrunicSettings
from trunic.core.glyphs import GlyphTable, get_glyph_table
from trunic.core.processor import DocumentProcessor, create_glyph_source
from trunic.domain import Rect
from trunic.exceptions import GlyphNotFoundError, SpriteSheetLoadError
from trunic.io import SpriteSheet


@pytest.fixture
def processor() -> DocumentProcessor:
    return DocumentProcessor(TrunicSettings())


def ink_rows(image: Image.Image) -> list[int]:
    """Row indices that contain ink on a white background."""
    mask = ImageOps.invert(image.convert("L"))
    width, height = mask.size
    return [y for y in range(height) if mask.crop((0, y, width, y + 1)).getbbox()]


class TestDocument:
    """Tests for multi-line documents."""

    def test_three_lines(self, processor, tmp_path):
        output = tmp_path / "doc.png"
        stats = processor.process(["hɛloʊ", "", "wɝld!"], output)

        assert stats.lines_rendered == 3
        assert stats.empty_lines == 1
        assert stats.cells_drawn == 6
        assert stats.duration_seconds >= 0

        with Image.open(output) as image:
            # Widest line: 4 cells at 43.2px plus 20px padding each side.
            assert image.size == (213, 336)
            assert image.mode == "RGB"
            rows = ink_rows(image)

        # The blank middle line draws nothing.
        assert rows
        assert not [y for y in rows if 112 <= y < 224]
        assert any(y < 112 for y in rows)
        assert any(y >= 224 for y in rows)

    def test_lines_do_not_overlap(self, processor):
        stack = processor.render_lines(["tə", "sə"])
        first, second = stack.placements()
        assert first.y1 == second.y0

    def test_empty_document_writes_nothing(self, processor, tmp_path):
        output = tmp_path / "doc.png"
        stats = processor.process([], output)
        assert stats.lines_rendered == 0
        assert not output.exists()

    def test_unsupported_text_renders_blank_line(self, processor):
        surface = processor.render_line("123")
        assert surface.bounds == Rect(-20, -20, 20, 92)
        assert processor.render_logger.stats.empty_lines == 1


class TestRenderLine:
    """Tests for single-line surfaces."""

    def test_bounds_include_padding(self, processor):
        surface = processor.render_line("hɛloʊ")
        assert surface.bounds == Rect(-20, -20, 107, 92)

    def test_zero_padding(self):
        settings = TrunicSettings(output=OutputConfig(padding=0))
        surface = DocumentProcessor(settings).render_line("hɛloʊ")
        assert surface.bounds == Rect(0, 0, 87, 72)

    def test_scale(self):
        settings = TrunicSettings(render=RenderConfig(scale=2))
        surface = DocumentProcessor(settings).render_line("t")
        # 144px cell plus 40px padding above and below.
        assert surface.image.size[1] == 224

    def test_background(self):
        settings = TrunicSettings(output=OutputConfig(background="yellow"))
        surface = DocumentProcessor(settings).render_line("t")
        assert surface.image.getpixel((0, 0)) == (255, 255, 0)


class TestTranscription:
    """Tests for transcribing lines before rendering."""

    def test_transcriber_applied(self):
        transcriber = Mock()
        transcriber.transcribe.side_effect = lambda text: {"hello": "hɛloʊ"}.get(text, text)
        processor = DocumentProcessor(TrunicSettings(), transcriber=transcriber)

        stack = processor.render_lines(["hello", "tə"])

        assert len(stack) == 2
        assert processor.render_logger.stats.transcribed_lines == 1
        assert processor.render_logger.stats.cells_drawn == 3


class TestGlyphSources:
    """Tests for the vector and bitmap backends in the pipeline."""

    def test_default_source_is_vector(self):
        assert create_glyph_source(SpriteSheetConfig()) is get_glyph_table()

    def test_sprite_sheet_source(self, tmp_path):
        path = tmp_path / "runes.png"
        SpriteSheet.from_glyphs(get_glyph_table()).image.save(path)
        settings = TrunicSettings(sprites=SpriteSheetConfig(path=path))
        processor = DocumentProcessor(settings)
        assert isinstance(processor.source, SpriteSheet)

        output = tmp_path / "doc.png"
        stats = processor.process(["hɛloʊ wɝld!"], output)
        assert stats.cells_drawn == 6
        with Image.open(output) as image:
            assert ink_rows(image)

    def test_missing_sprite_sheet(self, tmp_path):
        settings = TrunicSettings(sprites=SpriteSheetConfig(path=tmp_path / "missing.png"))
        with pytest.raises(SpriteSheetLoadError):
            DocumentProcessor(settings)

    def test_incomplete_glyph_table(self, tmp_path):
        table = get_glyph_table()
        partial = GlyphTable({tag: table.lookup(tag) for tag in table if tag != "t"})
        processor = DocumentProcessor(TrunicSettings(), source=partial)
        output = tmp_path / "doc.png"

        processor.process(["sə"], tmp_path / "ok.png")
        with pytest.raises(GlyphNotFoundError) as exc_info:
            processor.process(["tə"], output)
        assert exc_info.value.tag == "t"
        assert not output.exists()
