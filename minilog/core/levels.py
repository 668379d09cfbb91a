"""
Severity levels used for filtering log calls.
"""

from enum import Enum


class Level(Enum):
    """Ordered log levels, least to most severe. NONE disables output."""

    NONE = 0
    TRACE = 1
    DEBUG = 2
    INFO = 3
    WARNING = 4
    ERROR = 5

    @property
    def ordinal(self) -> int:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Level":
        """
        Resolve a level from its name, case-insensitively.

        Args:
            name: Level name such as "debug" or "WARNING". "WARN" is accepted
                as an alias of WARNING.

        Returns:
            Level: The matching level.

        Raises:
            ValueError: If the name does not denote a level.
        """
        key = str(name).strip().upper()
        if key == "WARN":
            key = "WARNING"
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown log level: {name!r}") from None
