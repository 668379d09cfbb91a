"""
Internal diagnostics logging for minilog.
"""

from .config import setup_logging

_logger_instance = None


def get_logger():
    """Return the configured diagnostics logger."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = setup_logging()
    return _logger_instance


logger = get_logger()

__all__ = ['logger', 'get_logger', 'setup_logging']
