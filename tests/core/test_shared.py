"""
Tests for the shared Logger and the t/d/i/w/e entry points.
"""

import inspect
import threading
from unittest.mock import patch

import pytest

import minilog
from minilog import Level, Logger, get_shared
from minilog.core import shared


def plain(level, info, message):
    return f"{level.name}|{info.location}|{info.function}|{info.line}|{message}"


class TestSharedInstance:

    def test_created_lazily_with_defaults(self):
        assert shared._shared is None
        log = get_shared()
        assert isinstance(log, Logger)
        assert log.get_level() is Level.DEBUG
        assert get_shared() is log

    def test_reset_builds_new_instance(self):
        first = get_shared()
        minilog.reset_shared()
        assert get_shared() is not first

    @pytest.mark.concurrency
    def test_concurrent_first_access_constructs_once(self):
        thread_count = 16
        barrier = threading.Barrier(thread_count)
        results = []
        results_lock = threading.Lock()
        original_init = Logger.__init__
        constructed = []

        def counting_init(self, *args, **kwargs):
            constructed.append(self)
            original_init(self, *args, **kwargs)

        def worker():
            barrier.wait()
            instance = get_shared()
            with results_lock:
                results.append(instance)

        with patch.object(Logger, "__init__", counting_init):
            threads = [threading.Thread(target=worker) for _ in range(thread_count)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        assert len(constructed) == 1
        assert len(results) == thread_count
        assert all(instance is constructed[0] for instance in results)


class TestStaticEntryPoints:
    """t/d/i/w/e delegate to the shared instance."""

    @pytest.mark.parametrize("function,level", [
        (minilog.t, Level.TRACE),
        (minilog.d, Level.DEBUG),
        (minilog.i, Level.INFO),
        (minilog.w, Level.WARNING),
        (minilog.e, Level.ERROR),
    ])
    def test_delegation(self, sink, function, level):
        log = get_shared()
        log.set_output(sink)
        log.set_format(plain)
        log.set_level(Level.ERROR)

        function("value=%d", 7)

        assert sink.count == 1
        assert sink.lines[0].startswith(f"{level.name}|")
        assert sink.lines[0].endswith("|value=7")

    def test_reports_caller_of_static_function(self, sink):
        log = get_shared()
        log.set_output(sink)
        log.set_format(plain)
        log.set_level(Level.INFO)
        line = inspect.currentframe().f_lineno + 1
        minilog.i("static")

        assert sink.lines[0] == f"INFO|TestStaticEntryPoints|test_reports_caller_of_static_function|{line}|static"

    def test_shared_threshold_filters(self, sink):
        log = get_shared()
        log.set_output(sink)
        minilog.t("admitted")
        minilog.d("admitted")
        minilog.i("above the default DEBUG threshold")
        minilog.w("above the default DEBUG threshold")
        minilog.e("above the default DEBUG threshold")
        assert sink.count == 2

    def test_default_output_goes_to_stdout(self, capsys):
        minilog.d("Test log %d", 1)
        out = capsys.readouterr().out
        assert "[DEBUG] TestStaticEntryPoints:test_default_output_goes_to_stdout:" in out
        assert out.endswith(" - Test log 1\n")
