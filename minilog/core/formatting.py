"""
Message formatters.

A formatter is any callable taking (level, caller info, message) and
returning the final string handed to the output sink.
"""

from datetime import datetime
from typing import Callable

from .caller import CallerInfo
from .levels import Level

Formatter = Callable[[Level, CallerInfo, str], str]


def format_timestamp(moment: datetime) -> str:
    """
    Render a timestamp as ``dd-MM-yy:HH:mm:SS``.

    The trailing field is the millisecond of the second padded to at least two
    digits, not the seconds: 10:08 plus 203 ms renders as ``10:08:203`` and
    5 ms as ``10:08:05``.
    """
    millis = moment.microsecond // 1000
    return f"{moment:%d-%m-%y:%H:%M}:{millis:02d}"


def default_formatter(level: Level, info: CallerInfo, message: str) -> str:
    """Format a single line with timestamp, thread, level and call site."""
    return (
        f"{format_timestamp(info.timestamp)} "
        f"({info.thread_name}:{info.thread_id}) "
        f"[{level.name}] "
        f"{info.location}:{info.function}:{info.line}"
        f" - {message}\n"
    )


def simple_formatter(level: Level, info: CallerInfo, message: str) -> str:
    return f"{level.name} - {message}"
