"""Tests for logging utilities."""

import logging
from unittest.mock import Mock

import pytest

from trunic.utils import RenderLogger, RenderStats, configure_logging


@pytest.fixture
def restore_root_handlers():
    """Remove handlers added to the root logger during a test."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestRenderStats:
    """Tests for RenderStats."""

    def test_duration(self):
        stats = RenderStats(start_time=10.0, end_time=12.5)
        assert stats.duration_seconds == 2.5

    def test_duration_unfinished(self):
        assert RenderStats(start_time=10.0).duration_seconds == 0.0

    def test_average_line_time(self):
        assert RenderStats().avg_line_time_ms is None
        assert RenderStats(line_times_ms=[2.0, 4.0]).avg_line_time_ms == 3.0


class TestRenderLogger:
    """Tests for RenderLogger counters."""

    def test_line_complete(self):
        logger = Mock()
        render_logger = RenderLogger(logger)
        render_logger.log_line_complete(0, cells=3, size=(150, 112), duration_ms=1.234)
        render_logger.log_line_complete(1, cells=0, size=(40, 112), duration_ms=0.5)

        stats = render_logger.stats
        assert stats.lines_rendered == 2
        assert stats.cells_drawn == 3
        assert stats.empty_lines == 1
        assert stats.line_times_ms == [1.234, 0.5]

        kwargs = logger.info.call_args_list[0].kwargs
        assert kwargs["width"] == 150
        assert kwargs["duration_ms"] == 1.23

    def test_transcription_counted(self):
        render_logger = RenderLogger(Mock())
        render_logger.log_transcription(0, "hello", "hɛloʊ")
        assert render_logger.stats.transcribed_lines == 1

    def test_line_error(self):
        logger = Mock()
        RenderLogger(logger).log_line_error(4, ValueError("boom"))
        logger.error.assert_called_once()
        kwargs = logger.error.call_args.kwargs
        assert kwargs == {"line": 4, "error": "boom", "error_type": "ValueError"}


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_console_handler_replaced(self, restore_root_handlers):
        configure_logging()
        configure_logging(console_level="DEBUG")
        named = [h for h in restore_root_handlers.handlers if h.get_name() == "trunic-console"]
        assert len(named) == 1
        assert named[0].level == logging.DEBUG

    def test_quiet_only_errors(self, restore_root_handlers):
        configure_logging(console_level="DEBUG", quiet=True)
        (handler,) = [
            h for h in restore_root_handlers.handlers if h.get_name() == "trunic-console"
        ]
        assert handler.level == logging.ERROR

    def test_log_file(self, restore_root_handlers, tmp_path):
        log_file = tmp_path / "trunic.log"
        logger = configure_logging(log_file=log_file)
        logger.info("Rendering", lines=2)
        for handler in restore_root_handlers.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "Logging initialized" in content
        assert "Rendering" in content
