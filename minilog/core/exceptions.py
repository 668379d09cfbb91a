from typing import Optional

from .logging import logger


class ConfigurationError(Exception):
    """Raised when minilog settings cannot be loaded or understood."""
    def __init__(self, message: str, setting: Optional[str] = None, original_exception: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.setting = setting
        self.original_exception = original_exception

        logger.error("Configuration error: %s", message, extra={
            "config": {
                "setting": setting,
                "original_exception_type": type(original_exception).__name__ if original_exception else None
            }
        })
