"""Logging utilities for Trunic."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_FILE_HANDLER = "trunic-file"
_CONSOLE_HANDLER = "trunic-console"


@dataclass
class RenderStats:
    """Statistics from a rendering run."""

    lines_rendered: int = 0
    empty_lines: int = 0
    cells_drawn: int = 0
    transcribed_lines: int = 0
    line_times_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate rendering duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_line_time_ms(self) -> float | None:
        if not self.line_times_ms:
            return None
        return sum(self.line_times_ms) / len(self.line_times_ms)


def _replace_handler(root: logging.Logger, handler: logging.Handler, name: str) -> None:
    for existing in list(root.handlers):
        if existing.get_name() == name:
            root.removeHandler(existing)
            existing.close()
    handler.set_name(name)
    root.addHandler(handler)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Console output goes to stderr so that a PNG written to stdout stays
    intact. Calling this again replaces the handlers installed before.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _replace_handler(root_logger, file_handler, _FILE_HANDLER)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    _replace_handler(root_logger, console_handler, _CONSOLE_HANDLER)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("trunic")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RenderLogger:
    """Logger for tracking rendering progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = RenderStats()

    def log_line_start(self, index: int, text: str) -> None:
        """Log start of line rendering."""
        self._logger.debug("Rendering line", line=index, text=text)

    def log_transcription(self, index: int, text: str, ipa: str) -> None:
        """Log a line rewritten into IPA."""
        self._logger.debug("Line transcribed", line=index, text=text, ipa=ipa)
        self._stats.transcribed_lines += 1

    def log_line_complete(
        self,
        index: int,
        cells: int,
        size: tuple[int, int],
        duration_ms: float,
    ) -> None:
        """Log a successfully rendered line."""
        self._logger.info(
            "Line rendered",
            line=index,
            cells=cells,
            width=size[0],
            height=size[1],
            duration_ms=round(duration_ms, 2),
        )
        self._stats.lines_rendered += 1
        self._stats.cells_drawn += cells
        self._stats.line_times_ms.append(duration_ms)
        if cells == 0:
            self._stats.empty_lines += 1

    def log_dropped_text(self, index: int, text: str, normalized: str) -> None:
        """Log input characters that matched no phoneme tag."""
        self._logger.debug(
            "Unsupported characters dropped",
            line=index,
            original_length=len(text),
            kept_length=len(normalized),
        )

    def log_line_error(self, index: int, error: Exception) -> None:
        """Log a line that could not be rendered."""
        self._logger.error(
            "Line rendering failed",
            line=index,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> RenderStats:
        """Get current rendering statistics."""
        return self._stats
