"""Document rendering orchestration.

This module coordinates the full pipeline for a multi-line document:
transcription, tokenization, layout, stroking, stacking and PNG output.
Lines are rendered sequentially, each by its own Renderer.

Key components:
- DocumentProcessor: Main orchestrator class
- create_glyph_source: Pick the vector or bitmap backend from settings
"""

import time
from collections.abc import Iterable
from pathlib import Path

import structlog

from trunic.config import SpriteSheetConfig, TrunicSettings
from trunic.core.compositor import LineStack
from trunic.core.glyphs import get_glyph_table
from trunic.core.renderer import Renderer
from trunic.core.sources import GlyphSource
from trunic.core.tokenizer import normalize
from trunic.domain import Surface
from trunic.io import SpriteSheet, Transcriber, create_transcriber, write_png
from trunic.utils import RenderLogger, RenderStats


def create_glyph_source(config: SpriteSheetConfig) -> GlyphSource:
    """Return the sprite sheet named in config, or the vector glyph table.

    Raises:
        SpriteSheetError: If the configured sheet cannot be used
    """
    if config.path is None:
        return get_glyph_table()
    return SpriteSheet.load(config.path, config)


class DocumentProcessor:
    """Orchestrates rendering of a document, one line at a time.

    Manages the complete workflow:
    1. Transcribe each line into IPA (if a transcriber is configured)
    2. Tokenize it into rune cells with a fresh Renderer
    3. Draw it onto a padded white surface
    4. Stack the line surfaces and write the PNG

    Example:
        processor = DocumentProcessor(TrunicSettings())
        stats = processor.process(["hɛloʊ"], output=Path("hello.png"))
    """

    def __init__(
        self,
        config: TrunicSettings,
        transcriber: Transcriber | None = None,
        source: GlyphSource | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the processor.

        Args:
            config: Application settings
            transcriber: Text-to-IPA backend (built from config when None)
            source: Glyph backend (built from config when None)
            logger: Structured logger (the ``trunic`` logger when None)
        """
        self.config = config
        self.transcriber = transcriber or create_transcriber(config.transcriber)
        self.source = source if source is not None else create_glyph_source(config.sprites)
        self.logger = logger or structlog.get_logger("trunic")
        self.render_logger = RenderLogger(self.logger)

    @property
    def padding(self) -> float:
        """Margin added around every line so strokes are not clipped."""
        if self.config.output.padding is not None:
            return self.config.output.padding * self.config.render.scale
        return 4 * self.config.render.thickness * self.config.render.scale

    def render_line(self, text: str, index: int = 0) -> Surface:
        """Render one line of text onto its own surface.

        Args:
            text: Line of input text
            index: Line number, for logging

        Returns:
            Surface covering the line's content bounds plus padding

        Raises:
            TranscriptionError: If transcription fails
            GlyphNotFoundError: If the glyph source lacks a tag
        """
        start = time.time()
        self.render_logger.log_line_start(index, text)

        ipa = self.transcriber.transcribe(text)
        if ipa != text:
            self.render_logger.log_transcription(index, text, ipa)

        normalized = normalize(ipa)
        if len(normalized) != len(ipa):
            self.render_logger.log_dropped_text(index, ipa, normalized)

        renderer = Renderer(self.config.render, self.source)
        renderer.append(ipa)

        surface = Surface.blank(
            renderer.bounds().inset(-self.padding),
            background=self.config.output.background,
        )
        renderer.draw_to(surface, 0, 0)

        cells = sum(1 for cell in renderer.cells if not cell.is_empty())
        self.render_logger.log_line_complete(
            index,
            cells=cells,
            size=surface.image.size,
            duration_ms=(time.time() - start) * 1000,
        )
        return surface

    def render_lines(self, lines: Iterable[str]) -> LineStack:
        """Render every line and stack the results top to bottom."""
        surfaces = []
        for index, text in enumerate(lines):
            try:
                surfaces.append(self.render_line(text, index))
            except Exception as e:
                self.render_logger.log_line_error(index, e)
                raise
        return LineStack(surfaces, background=self.config.output.background)

    def process(self, lines: Iterable[str], output: Path | None = None) -> RenderStats:
        """Render a document and write it as PNG.

        Nothing is written when there are no input lines.

        Args:
            lines: Input text, one record per line
            output: Destination file; None writes to stdout

        Returns:
            RenderStats for the run
        """
        stats = self.render_logger.stats
        stats.start_time = time.time()

        stack = self.render_lines(lines)
        if len(stack) > 0:
            written = write_png(stack.to_surface(), output)
            self.logger.info(
                "Image written",
                output=str(output) if output else "<stdout>",
                bytes=written,
                lines=len(stack),
            )
        else:
            self.logger.info("No input lines; nothing written")

        stats.end_time = time.time()
        return stats
