import sys
from datetime import datetime
from typing import Iterable, List, Optional, TextIO
from zoomline.models.enums import LogLevel, LogCategory


class Colors:
    """ANSI escape codes"""
    RESET = '\033[0m'
    DIM = '\033[2m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_MAGENTA = '\033[95m'
    BRIGHT_CYAN = '\033[96m'
    BRIGHT_WHITE = '\033[97m'
    BRIGHT_YELLOW = '\033[93m'


CATEGORY_COLORS = {
    LogCategory.CONFIG: Colors.CYAN,
    LogCategory.ZOOM: Colors.BRIGHT_CYAN,
    LogCategory.EASING: Colors.MAGENTA,
    LogCategory.CURSOR: Colors.BRIGHT_BLUE,
    LogCategory.AUTO_ZOOM: Colors.BRIGHT_YELLOW,
    LogCategory.SERIALIZATION: Colors.BRIGHT_MAGENTA,
    LogCategory.SYSTEM: Colors.BRIGHT_WHITE,
}

# level -> (priority, symbol, color)
LEVEL_STYLES = {
    LogLevel.DEBUG: (0, '·', Colors.DIM),
    LogLevel.INFO: (1, '✓', Colors.GREEN),
    LogLevel.WARN: (2, '⚠', Colors.YELLOW),
    LogLevel.ERROR: (3, '✗', Colors.RED),
}

CATEGORY_WIDTH = 9
DETAIL_INDENT = " " * 11


class Logger:
    """
    Category logger writing one compact line per event

    Format:
    [HH:MM:SS] CATEGORY · Message
               ├─ key: value
               └─ key: value

    Example:
    [14:23:45] ZOOM      ⚠ Zoom lookback depth exceeded, using full frame
               ├─ time_ms: 1600
               └─ depth: 5
    """

    def __init__(
        self,
        min_level: LogLevel = LogLevel.INFO,
        use_colors: bool = True,
        stream: Optional[TextIO] = None
    ):
        """
        Args:
            min_level: Events below this level are dropped
            use_colors: ANSI colors (disable when writing to files)
            stream: Output stream (None = sys.stderr at write time)
        """
        self.min_level = min_level
        self.use_colors = use_colors
        self.stream = stream

    def is_enabled_for(self, level: LogLevel) -> bool:
        return LEVEL_STYLES[level][0] >= LEVEL_STYLES[self.min_level][0]

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{Colors.RESET}" if self.use_colors else text

    def _detail_lines(self, details: Iterable[str]) -> List[str]:
        details = list(details)
        lines = []
        for index, detail in enumerate(details):
            branch = "└─" if index == len(details) - 1 else "├─"
            lines.append(f"{DETAIL_INDENT}{self._paint(branch, Colors.DIM)} {detail}")
        return lines

    def log(
        self,
        category: LogCategory,
        message: str,
        level: LogLevel = LogLevel.INFO,
        details: Optional[list] = None,
        **kwargs
    ):
        """
        Write an event if level passes the filter

        Args:
            category: Subsystem the event belongs to
            message: Headline text
            level: Severity
            details: Free-form detail lines
            **kwargs: Rendered as "key: value" detail lines after details
        """
        if not self.is_enabled_for(level):
            return

        _, symbol, color = LEVEL_STYLES[level]
        head = " ".join((
            datetime.now().strftime('[%H:%M:%S]'),
            self._paint(category.name.ljust(CATEGORY_WIDTH), CATEGORY_COLORS.get(category, Colors.WHITE)),
            self._paint(symbol, color),
            self._paint(message, color),
        ))
        extra = [f"{key}: {value}" for key, value in kwargs.items()]

        out = self.stream if self.stream is not None else sys.stderr
        for line in [head] + self._detail_lines(list(details or []) + extra):
            out.write(line + "\n")

    def debug(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.DEBUG, **kw)
    def info(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.INFO, **kw)
    def warn(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.WARN, **kw)
    def error(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.ERROR, **kw)

    def for_category(self, category: LogCategory) -> 'BoundLogger':
        return BoundLogger(self, category)


class BoundLogger:
    """Logger with a fixed category, used as the module-level `log` object"""

    def __init__(self, base: Logger, category: LogCategory):
        self._base = base
        self._category = category

    def debug(self, message: str, **kw): self._base.log(self._category, message, LogLevel.DEBUG, **kw)
    def info(self, message: str, **kw): self._base.log(self._category, message, LogLevel.INFO, **kw)
    def warn(self, message: str, **kw): self._base.log(self._category, message, LogLevel.WARN, **kw)
    def error(self, message: str, **kw): self._base.log(self._category, message, LogLevel.ERROR, **kw)


_logger = Logger()


def get_logger() -> Logger:
    return _logger


def get_category_logger(category: LogCategory) -> BoundLogger:
    return _logger.for_category(category)


def configure_logger(
    min_level: LogLevel = LogLevel.INFO,
    use_colors: bool = True,
    stream: Optional[TextIO] = None
) -> Logger:
    """
    Reconfigure the shared logger in place

    Module-level bound loggers hold the same instance and see the change.
    """
    _logger.min_level = min_level
    _logger.use_colors = use_colors
    _logger.stream = stream
    return _logger
