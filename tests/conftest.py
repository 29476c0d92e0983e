import os
import sys
from pathlib import Path

import pytest

# Keep Kivy quiet and away from the command line during tests
os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_LOG_MODE", "PYTHON")
os.environ.setdefault("KIVY_NO_CONSOLELOG", "1")
os.environ.setdefault("KIVY_NO_FILELOG", "1")

sys.path.append(str(Path(__file__).resolve().parents[1]))

from backend.storage import MemoryStore, SQLiteStore  # noqa: E402
from backend.timer import Timer  # noqa: E402


class FakeEvent:
    """Scheduled event returned by :class:`FakeClock`."""

    def __init__(self, clock, callback, interval):
        self.clock = clock
        self.callback = callback
        self.interval = interval
        self.cancelled = False

    def cancel(self):
        self.cancelled = True
        if self in self.clock.events:
            self.clock.events.remove(self)


class FakeClock:
    """Stand-in for ``kivy.clock.Clock`` whose ticks are driven by tests."""

    def __init__(self):
        self.events: list[FakeEvent] = []
        self.scheduled = 0

    def schedule_interval(self, callback, interval):
        event = FakeEvent(self, callback, interval)
        self.events.append(event)
        self.scheduled += 1
        return event

    def tick(self, count: int = 1) -> None:
        """Fire every live interval event ``count`` times."""
        for _ in range(count):
            for event in list(self.events):
                if not event.cancelled:
                    event.callback(event.interval)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def sqlite_store(tmp_path: Path) -> SQLiteStore:
    """Durable store in a temporary database file."""
    return SQLiteStore(tmp_path / "workout_log.db")


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def stopwatch(fake_clock) -> Timer:
    return Timer(0, count_down=False, clock=fake_clock)
