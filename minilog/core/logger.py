"""
Leveled logger with swappable output, formatter and threshold.

Usage:

    log = Logger()
    log.debug("Test log %d", 1)
    # 26-07-19:10:08:203 (MainThread:140...) [DEBUG] main.py:<module>:2 - Test log 1

    log.set_format(simple_formatter)
    log.debug("Test log %d", 2)
    # DEBUG - Test log 2
"""

from typing import Optional

from .caller import CallerInfo, capture_caller_info
from .formatting import Formatter, default_formatter
from .levels import Level
from .sinks import OutputSink, stdout_sink


class Logger:
    """
    Formats and emits leveled messages with caller metadata.

    The three settings are independent references; replacing one takes effect
    on the next call. No lock spans them, so a call racing with a writer may
    see any mix of old and new values.
    """

    def __init__(self,
                 output: Optional[OutputSink] = None,
                 formatter: Optional[Formatter] = None,
                 level: Level = Level.DEBUG):
        self._output = output if output is not None else stdout_sink
        self._formatter = formatter if formatter is not None else default_formatter
        self._level = level

    @property
    def output(self) -> OutputSink:
        return self._output

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    @property
    def level(self) -> Level:
        return self._level

    def set_output(self, output: OutputSink):
        self._output = output

    def set_format(self, formatter: Formatter):
        self._formatter = formatter

    def set_level(self, level: Level):
        self._level = level

    def get_level(self) -> Level:
        return self._level

    def is_loggable(self, level: Level) -> bool:
        """Check whether a call at ``level`` would currently produce output."""
        return self._level.ordinal >= level.ordinal

    def _emit(self, level: Level, info: CallerInfo, message: str):
        self._output(self._formatter(level, info, message))

    def _log(self, level: Level, template: str, args: tuple):
        if not self.is_loggable(level):
            return
        info = capture_caller_info(owner=self)
        self._emit(level, info, template % args)

    def trace(self, template: str, *args):
        """Log a trace message."""
        self._log(Level.TRACE, template, args)

    def debug(self, template: str, *args):
        """Log a debug message."""
        self._log(Level.DEBUG, template, args)

    def info(self, template: str, *args):
        """Log an info message."""
        self._log(Level.INFO, template, args)

    def warning(self, template: str, *args):
        """Log a warning message."""
        self._log(Level.WARNING, template, args)

    warn = warning

    def error(self, template: str, *args):
        """Log an error message."""
        self._log(Level.ERROR, template, args)
