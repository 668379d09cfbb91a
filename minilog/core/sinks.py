"""
Output sinks.

A sink is any callable accepting the formatted string and delivering it
somewhere. The stream-based sinks write exactly one line per call.
"""

import logging
import sys
from typing import Callable, TextIO

OutputSink = Callable[[str], None]

# Kept outside the "minilog" hierarchy so the diagnostics level never filters output
OUTPUT_LOGGER_NAME = "minilog_output"


def _write_line(stream: TextIO, text: str):
    if not text.endswith("\n"):
        text += "\n"
    stream.write(text)
    stream.flush()


def stdout_sink(text: str):
    """Write one line to the current standard output."""
    _write_line(sys.stdout, text)


def stderr_sink(text: str):
    """Write one line to the current standard error."""
    _write_line(sys.stderr, text)


def stream_sink(stream: TextIO) -> OutputSink:
    """Return a sink bound to an arbitrary text stream."""
    def sink(text: str):
        _write_line(stream, text)
    return sink


def logging_sink(name: str = OUTPUT_LOGGER_NAME, level: int = logging.INFO) -> OutputSink:
    """
    Return a sink forwarding each line to a standard library logger.

    Args:
        name: Name of the ``logging.Logger`` receiving the lines.
        level: ``logging`` level used for every record.

    Returns:
        OutputSink: Callable emitting one record per formatted string.
    """
    target = logging.getLogger(name)

    def sink(text: str):
        target.log(level, text.rstrip("\n"))
    return sink
