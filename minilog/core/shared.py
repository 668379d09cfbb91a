"""
Process-wide shared Logger and the short static entry points.
"""

import threading
from typing import Optional

from .logger import Logger

_shared: Optional[Logger] = None
_shared_lock = threading.Lock()


def get_shared() -> Logger:
    """Return the shared Logger, creating it on first access."""
    global _shared
    instance = _shared
    if instance is None:
        with _shared_lock:
            if _shared is None:
                _shared = Logger()
            instance = _shared
    return instance


def reset_shared():
    """Drop the shared Logger so the next access builds a new one."""
    global _shared
    with _shared_lock:
        _shared = None


def t(template: str, *args):
    get_shared().trace(template, *args)


def d(template: str, *args):
    get_shared().debug(template, *args)


def i(template: str, *args):
    get_shared().info(template, *args)


def w(template: str, *args):
    get_shared().warning(template, *args)


def e(template: str, *args):
    get_shared().error(template, *args)
