"""
Pytest configuration and fixtures for the minilog test suite.
"""

import pytest
from datetime import datetime
from typing import List

from minilog import CallerInfo, reset_shared


class RecordingSink:
    """Output sink that remembers every string it receives."""

    def __init__(self):
        self.lines: List[str] = []

    def __call__(self, text: str):
        self.lines.append(text)

    @property
    def count(self) -> int:
        return len(self.lines)


@pytest.fixture
def sink() -> RecordingSink:
    """Fresh recording sink."""
    return RecordingSink()


@pytest.fixture
def caller_info() -> CallerInfo:
    """Fixed caller metadata for formatter tests."""
    return CallerInfo(
        timestamp=datetime(2019, 7, 26, 10, 8, 0, 203000),
        thread_name="main",
        thread_id=1,
        location="Main",
        function="main",
        line=15,
    )


@pytest.fixture(autouse=True)
def clean_shared_logger():
    """Every test starts without a shared Logger."""
    reset_shared()
    yield
    reset_shared()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove minilog environment overrides."""
    for name in ("MINILOG_LEVEL", "MINILOG_FORMAT", "MINILOG_OUTPUT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "concurrency: mark test as exercising multiple threads"
    )
