"""
Tests for the structured category logger and its singleton helpers.
"""

import io

from zoomline.models.enums import LogCategory, LogLevel
from zoomline.utils.logger import (
    Colors, Logger, configure_logger, get_category_logger, get_logger,
)


class TestSingleton:

    def test_get_logger_is_singleton(self):
        assert get_logger() is get_logger()

    def test_configure_preserves_instance(self):
        original = get_logger()
        configured = configure_logger(LogLevel.WARN, use_colors=False, stream=io.StringIO())
        assert configured is original
        assert get_logger().min_level == LogLevel.WARN

    def test_bound_logger_follows_configuration(self):
        bound = get_category_logger(LogCategory.ZOOM)
        stream = io.StringIO()
        configure_logger(LogLevel.ERROR, use_colors=False, stream=stream)

        bound.warn("hidden")
        bound.error("shown")

        output = stream.getvalue()
        assert "hidden" not in output
        assert "shown" in output


class TestFormat:

    def test_line_layout(self):
        stream = io.StringIO()
        Logger(LogLevel.DEBUG, use_colors=False, stream=stream).info(LogCategory.CONFIG, "Loaded")

        line = stream.getvalue().rstrip("\n")
        assert line.startswith("[")
        assert line[10:] == " CONFIG    ✓ Loaded"

    def test_details_tree(self):
        stream = io.StringIO()
        logger = Logger(LogLevel.DEBUG, use_colors=False, stream=stream)
        logger.log(LogCategory.ZOOM, "Lookback", LogLevel.WARN, details=["first"], depth=5, region="r3")

        lines = stream.getvalue().splitlines()
        assert "⚠ Lookback" in lines[0]
        assert lines[1:] == [
            "           ├─ first",
            "           ├─ depth: 5",
            "           └─ region: r3",
        ]

    def test_colors(self):
        stream = io.StringIO()
        Logger(LogLevel.DEBUG, use_colors=True, stream=stream).error(LogCategory.SYSTEM, "boom")
        assert Colors.RED in stream.getvalue()
        assert Colors.RESET in stream.getvalue()

    def test_level_filter(self):
        stream = io.StringIO()
        logger = Logger(LogLevel.INFO, use_colors=False, stream=stream)
        logger.debug(LogCategory.EASING, "noise")
        assert stream.getvalue() == ""
        assert not logger.is_enabled_for(LogLevel.DEBUG)
        assert logger.is_enabled_for(LogLevel.ERROR)


class TestBoundLogger:

    def test_levels_use_bound_category(self):
        stream = io.StringIO()
        bound = Logger(LogLevel.DEBUG, use_colors=False, stream=stream).for_category(LogCategory.CURSOR)

        bound.debug("one")
        bound.error("two", samples=3)

        lines = stream.getvalue().splitlines()
        assert "CURSOR" in lines[0] and "· one" in lines[0]
        assert "CURSOR" in lines[1] and "✗ two" in lines[1]
        assert lines[2].endswith("└─ samples: 3")
