"""
minilog: a small leveled logger with caller metadata.

    import minilog

    minilog.d("Test log %d", 1)
"""

from .core import (
    CallerInfo,
    ConfigManager,
    ConfigurationError,
    Formatter,
    Level,
    Logger,
    OutputSink,
    capture_caller_info,
    d,
    default_formatter,
    e,
    format_timestamp,
    get_shared,
    i,
    logging_sink,
    reset_shared,
    simple_formatter,
    stderr_sink,
    stdout_sink,
    stream_sink,
    t,
    w,
)

__version__ = "0.1.0"

__all__ = [
    'Level',
    'CallerInfo',
    'Formatter',
    'OutputSink',
    'Logger',
    'ConfigManager',
    'ConfigurationError',
    'capture_caller_info',
    'default_formatter',
    'simple_formatter',
    'format_timestamp',
    'stdout_sink',
    'stderr_sink',
    'stream_sink',
    'logging_sink',
    'get_shared',
    'reset_shared',
    't',
    'd',
    'i',
    'w',
    'e',
]
