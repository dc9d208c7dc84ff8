"""CLI application entry point for trunic.

This module provides the main CLI interface using Typer.
"""

import sys
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from trunic import __version__
from trunic.cli.output import (
    console,
    print_cells,
    print_error,
    print_header,
    print_internal_error,
    print_nothing_to_do,
    print_settings,
    print_step,
    print_success,
)
from trunic.config import (
    LoggingConfig,
    OutputConfig,
    RenderConfig,
    SpriteSheetConfig,
    TranscriberConfig,
    TrunicSettings,
)
from trunic.core import get_glyph_table, normalize, tokenize
from trunic.core.phonemes import SHEET_ORDER
from trunic.core.processor import DocumentProcessor
from trunic.exceptions import InvariantError, TrunicError
from trunic.io import SpriteSheet, open_input, read_lines
from trunic.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="trunic",
    help="Render IPA text as Trunic runes.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Trunic[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render IPA text as Trunic runes."""


@app.command()
def render(
    input_file: Annotated[
        Path | None,
        typer.Argument(
            help="Text file with one line per record (default: stdin)",
            show_default=False,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output PNG path (default: stdout)",
        ),
    ] = None,
    color: Annotated[
        str,
        typer.Option("--color", "-c", help="Stroke color"),
    ] = "black",
    height: Annotated[
        float,
        typer.Option("--height", help="Rune cell height in pixels", min=1.0),
    ] = 72.0,
    thickness: Annotated[
        float,
        typer.Option("--thickness", "-t", help="Stroke thickness in pixels", min=0.1),
    ] = 5.0,
    kerning: Annotated[
        float,
        typer.Option("--kerning", "-k", help="Extra space between runes (negative tightens)"),
    ] = 0.0,
    scale: Annotated[
        float,
        typer.Option("--scale", "-s", help="Output resolution multiplier", min=0.1, max=16.0),
    ] = 1.0,
    padding: Annotated[
        float | None,
        typer.Option("--padding", help="Margin around each line (default: 4x thickness)", min=0.0),
    ] = None,
    sprites: Annotated[
        Path | None,
        typer.Option("--sprites", help="Draw from a bitmap sprite sheet instead of vector glyphs"),
    ] = None,
    transcriber: Annotated[
        str,
        typer.Option("--transcriber", help="Transcribe plain text to IPA first (none|gemini)"),
    ] = "",
    model: Annotated[
        str,
        typer.Option("--model", help="Model used by the transcriber"),
    ] = "gemini-2.5-flash-lite",
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Verbose console output"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Render IPA text to a PNG image, one row of runes per input line.

    Characters that are not part of the Trunic phoneme set are skipped.

    Example:
        echo "hɛloʊ wɝld" | trunic render -o hello.png
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if output is None and sys.stdout.isatty():
        print_error(
            "Refusing to write PNG data to a terminal",
            details="Use --output/-o or redirect stdout to a file.",
        )
        raise typer.Exit(code=1)

    try:
        settings = TrunicSettings(
            render=RenderConfig(
                color=color,
                text_height=height,
                thickness=thickness,
                kerning=kerning,
                scale=scale,
            ),
            output=OutputConfig(padding=padding),
            sprites=SpriteSheetConfig(path=sprites),
            transcriber=TranscriberConfig(name=transcriber, model=model),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "ERROR",
            ),
        )
    except ValidationError as e:
        first = e.errors()[0]
        print_error("Invalid option", details=f"{'.'.join(map(str, first['loc']))}: {first['msg']}")
        raise typer.Exit(code=1) from None

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)
        print_settings(
            height=height,
            thickness=thickness,
            kerning=kerning,
            scale=scale,
            backend="bitmap" if sprites else "vector",
        )

    try:
        processor = DocumentProcessor(settings, logger=logger)

        if not quiet:
            print_step("Rendering")

        with open_input(input_file) as stream:
            stats = processor.process(read_lines(stream), output)

        if stats.lines_rendered == 0:
            if not quiet:
                print_nothing_to_do()
            raise typer.Exit(code=0)

        if not quiet:
            print_success(
                output=str(output) if output else "<stdout>",
                total_time_s=stats.duration_seconds,
                lines=stats.lines_rendered,
                cells=stats.cells_drawn,
                empty_lines=stats.empty_lines,
                avg_time_ms=stats.avg_line_time_ms if verbose else None,
            )

    except InvariantError as e:
        print_internal_error(str(e))
        raise typer.Exit(code=2)
    except TrunicError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


@app.command("tokenize")
def tokenize_command(
    text: Annotated[
        list[str] | None,
        typer.Argument(help="IPA text (default: read lines from stdin)", show_default=False),
    ] = None,
) -> None:
    """Show how IPA text is split into rune cells.

    Each argument is treated as one line.
    """
    try:
        if text:
            lines = list(text)
        else:
            with open_input(None) as stream:
                lines = list(read_lines(stream))
    except TrunicError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    for index, line in enumerate(lines, start=1):
        print_cells(index, normalize(line), list(tokenize(line)))


@app.command()
def sheet(
    output: Annotated[
        Path,
        typer.Argument(help="Where to write the sprite sheet PNG", show_default=False),
    ],
    thickness: Annotated[
        float,
        typer.Option("--thickness", "-t", help="Stroke thickness in pixels", min=0.1),
    ] = 5.0,
) -> None:
    """Export the vector glyphs as a sprite sheet for the bitmap backend."""
    layout = SpriteSheetConfig()
    try:
        sprite_sheet = SpriteSheet.from_glyphs(get_glyph_table(), layout, thickness=thickness)
        sprite_sheet.image.save(output, format="PNG")
    except OSError as e:
        print_error(f"Could not write sprite sheet: {e}")
        raise typer.Exit(code=1)

    console.print(
        f"[bold green]✓[/bold green] {len(SHEET_ORDER)} glyphs "
        f"({layout.columns} columns) written to {output}"
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
