"""I/O layer for trunic.

This module handles everything that crosses the process boundary: reading
input lines, writing PNG output, loading legacy sprite sheets and calling
external transcription services.

Key classes and functions:
- read_lines / open_input: Line-oriented text input
- write_png: Encode a surface and write it to a file or stdout
- SpriteSheet: Bitmap glyph source
- Transcriber, create_transcriber: Text-to-IPA backends
"""

from trunic.io.reader import open_input, read_lines
from trunic.io.sprites import SpriteSheet
from trunic.io.transcriber import (
    GeminiTranscriber,
    NoopTranscriber,
    Transcriber,
    create_transcriber,
)
from trunic.io.writer import encode_png, write_png

__all__ = [
    "GeminiTranscriber",
    "NoopTranscriber",
    "SpriteSheet",
    "Transcriber",
    "create_transcriber",
    "encode_png",
    "open_input",
    "read_lines",
    "write_png",
]
