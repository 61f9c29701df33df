"""Shared fixtures and utilities for pytest test suite."""

import re
import threading
from typing import List, Tuple

import pytest

from sinklog import HandlerIdentity, LoggerRegistry, LogHandler, Severity


# "<DD>-<MM>-<YYYY> <HH>:<MM>:<SS>.<mmm> - (<LEVEL>)\t: <message>"
LINE_PATTERN = re.compile(
    r"^\d{2}-\d{2}-\d{4} \d{2}:\d{2}:\d{2}\.\d{3} - \((DEBUG|INFO|WARNING|ERROR|FATAL)\)\t: (.*)$"
)


# ============================================================
# Test Handlers
# ============================================================

class RecordingHandler(LogHandler):
    """Handler that keeps emitted lines in memory."""

    def __init__(self, identity: HandlerIdentity, clock=None):
        super().__init__(identity, clock=clock)
        self.lines: List[str] = []
        self.records: List[Tuple[Severity, str]] = []
        self.released = False

    def _emit(self, line: str, severity: Severity) -> None:
        self.lines.append(line)
        self.records.append((severity, line))

    def _release(self) -> None:
        self.released = True


class FailingHandler(LogHandler):
    """Handler whose sink always fails."""

    def __init__(self, identity: HandlerIdentity):
        super().__init__(identity)
        self.attempts = 0

    def _emit(self, line: str, severity: Severity) -> None:
        self.attempts += 1
        raise OSError("disk unavailable")

    def _release(self) -> None:
        pass


class BlockingHandler(LogHandler):
    """Handler whose write blocks until released by the test."""

    def __init__(self, identity: HandlerIdentity):
        super().__init__(identity)
        self.events: List[str] = []
        self.started = threading.Event()
        self.proceed = threading.Event()

    def _emit(self, line: str, severity: Severity) -> None:
        self.started.set()
        self.proceed.wait(timeout=5)
        self.events.append("write")

    def _release(self) -> None:
        self.events.append("release")


# ============================================================
# Common Fixtures
# ============================================================

@pytest.fixture
def stamp():
    """Constant timestamp returned by fixed_clock."""
    return "01-02-2024 10:00:00.005"


@pytest.fixture
def fixed_clock(stamp):
    """Clock returning a constant timestamp."""
    return lambda: stamp


@pytest.fixture
def line_pattern():
    """Regex matching one output line; groups are level and message."""
    return LINE_PATTERN


@pytest.fixture
def registry():
    """Fresh, independent registry closed after the test."""
    registry = LoggerRegistry()
    yield registry
    registry.clear()


@pytest.fixture
def make_recorder(fixed_clock):
    """Factory fixture for RecordingHandler instances."""
    def _make(name: str = "memory", verbosity: Severity = Severity.DEBUG) -> RecordingHandler:
        return RecordingHandler(HandlerIdentity(name, verbosity), clock=fixed_clock)
    return _make


@pytest.fixture
def make_failing():
    """Factory fixture for handlers whose sink always fails."""
    def _make(name: str = "broken", verbosity: Severity = Severity.DEBUG) -> FailingHandler:
        return FailingHandler(HandlerIdentity(name, verbosity))
    return _make


@pytest.fixture
def make_blocking():
    """Factory fixture for handlers whose write waits on the test."""
    def _make(name: str = "slow", verbosity: Severity = Severity.DEBUG) -> BlockingHandler:
        return BlockingHandler(HandlerIdentity(name, verbosity))
    return _make
