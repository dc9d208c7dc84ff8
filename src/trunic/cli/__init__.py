"""Command-line interface for trunic.

This module provides the CLI using Typer with rich output for
user-friendly feedback on stderr.

Key features:
- PNG output to a file or stdout
- Vector or bitmap glyph backends
- Tokenization inspection
- Sprite sheet export
"""

from trunic.cli.app import cli, main

__all__ = ["cli", "main"]
