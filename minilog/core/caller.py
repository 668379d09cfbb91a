"""
Caller metadata capture.

Walks the Python call stack to find the frame that issued a log call,
skipping frames that belong to minilog itself and to the threading module.
"""

import os
import sys
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Optional


@dataclass(frozen=True)
class CallerInfo:
    """Snapshot of where and when a log call happened."""

    timestamp: datetime
    thread_name: str
    thread_id: int
    location: str
    function: str
    line: int


# Modules whose frames are never reported as the call site
INTERNAL_MODULES = frozenset({
    "minilog.core.caller",
    "minilog.core.logger",
    "minilog.core.shared",
})

_THREADING_FILE = os.path.normcase(os.path.abspath(threading.__file__))


def _is_threading_frame(frame) -> bool:
    if frame.f_globals.get("__name__") == "threading":
        return True
    filename = frame.f_code.co_filename
    if filename.startswith("<"):
        return False
    return os.path.normcase(os.path.abspath(filename)) == _THREADING_FILE


def _is_caller_frame(frame, owner: Any, skip_modules: Iterable[str]) -> bool:
    if frame.f_globals.get("__name__") in skip_modules:
        return False
    if _is_threading_frame(frame):
        return False
    # Methods of the logging instance itself, including subclass wrappers
    if owner is not None and frame.f_locals.get("self") is owner:
        return False
    return True


def _declaring_class(klass: type, code) -> type:
    """Class in the MRO whose own attribute holds the function running ``code``."""
    for owner in getattr(klass, "__mro__", (klass,)):
        for attr in vars(owner).values():
            if isinstance(attr, property):
                candidates = (attr.fget, attr.fset, attr.fdel)
            else:
                candidates = (getattr(attr, "__func__", attr),)
            if any(getattr(func, "__code__", None) is code for func in candidates):
                return owner
    return klass


def _location_of(frame) -> str:
    """Declaring class name for method frames, source file name otherwise."""
    code = frame.f_code
    if code.co_argcount:
        first = code.co_varnames[0]
        if first in ("self", "cls") and first in frame.f_locals:
            bound = frame.f_locals[first]
            klass = bound if first == "cls" and isinstance(bound, type) else type(bound)
            return _declaring_class(klass, code).__name__
    return os.path.basename(code.co_filename)


def capture_caller_info(owner: Any = None,
                        skip_modules: Optional[Iterable[str]] = None) -> CallerInfo:
    """
    Build a CallerInfo for the code that invoked the logger.

    Args:
        owner: The logging instance; frames where ``self`` is this object are
            skipped so subclass wrapper methods stay transparent.
        skip_modules: Module names whose frames are skipped. Defaults to
            minilog's own logger modules.

    Returns:
        CallerInfo: Metadata of the first foreign frame, or the fallback
        values ("", "", -1) when the whole stack is internal.
    """
    timestamp = datetime.now()
    current = threading.current_thread()
    skip = INTERNAL_MODULES if skip_modules is None else frozenset(skip_modules)

    frame = sys._getframe(0)
    try:
        while frame is not None:
            if _is_caller_frame(frame, owner, skip):
                return CallerInfo(
                    timestamp=timestamp,
                    thread_name=current.name,
                    thread_id=current.ident,
                    location=_location_of(frame),
                    function=frame.f_code.co_name,
                    line=frame.f_lineno,
                )
            frame = frame.f_back
    finally:
        del frame

    return CallerInfo(timestamp, current.name, current.ident, "", "", -1)
