from .caller import CallerInfo, capture_caller_info
from .config_manager import ConfigManager
from .exceptions import ConfigurationError
from .formatting import Formatter, default_formatter, format_timestamp, simple_formatter
from .levels import Level
from .logger import Logger
from .shared import d, e, get_shared, i, reset_shared, t, w
from .sinks import OutputSink, logging_sink, stderr_sink, stdout_sink, stream_sink
