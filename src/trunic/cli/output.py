"""Rich console output helpers for the CLI.

All console output goes to stderr; stdout is reserved for PNG data.
"""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from trunic.core.phonemes import CIRCLE
from trunic.domain import RuneCell

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Trunic[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_settings(height: float, thickness: float, kerning: float, scale: float, backend: str) -> None:
    """Print the effective presentation settings."""
    console.print(
        f"  {height:g}px cells {SYM_DOT} {thickness:g}px strokes {SYM_DOT} "
        f"kerning {kerning:g} {SYM_DOT} x{scale:g} {SYM_DOT} {backend} glyphs"
    )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output: str,
    total_time_s: float,
    lines: int,
    cells: int,
    empty_lines: int,
    avg_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output: Output file path or stream name
        total_time_s: Total rendering time in seconds
        lines: Number of lines rendered
        cells: Number of non-empty rune cells drawn
        empty_lines: Lines that produced no runes
        avg_time_ms: Average rendering time per line in milliseconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output, style="bold")
    console.print(line)

    console.print(
        f"  {lines} lines {SYM_DOT} {cells} runes {SYM_DOT} {empty_lines} without runes"
    )

    if avg_time_ms is not None:
        console.print(f"  {avg_time_ms:.1f}ms avg per line")


def print_nothing_to_do() -> None:
    """Print notice for empty input."""
    console.print(f"\n{SYM_DOT} No input lines; nothing written")


def print_cells(index: int, normalized: str, cells: Sequence[RuneCell]) -> None:
    """Print the tokenization of one line.

    Args:
        index: Line number (1-based)
        normalized: Normalized IPA text
        cells: Rune cells of the line
    """
    table = Table(title=f"Line {index}: {normalized!r}", show_header=True, title_justify="left")
    table.add_column("#", justify="right")
    table.add_column("Tags")
    table.add_column("Reversed", justify="center")

    for i, cell in enumerate(cells):
        tags = " ".join(cell.tags) if not cell.is_empty() else "[dim](space)[/dim]"
        reversed_mark = SYM_OK if CIRCLE in cell.tags else ""
        table.add_row(str(i), tags, reversed_mark)

    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_internal_error(message: str) -> None:
    """Print an internal-error message (a bug, not bad input)."""
    console.print(f"\n[bold red]{SYM_ERR} Internal error:[/bold red] {message}")
    console.print("  This is a bug in trunic; please report it with the input that caused it.")
