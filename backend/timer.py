"""Stopwatch and count-down timers driven by the Kivy clock.

A :class:`Timer` ticks once per second while running. Ticks come from a
single scheduled event obtained from ``clock.schedule_interval``; the event
is created by :meth:`Timer.start` and cancelled by :meth:`Timer.pause`,
:meth:`Timer.reset` and :meth:`Timer.release`, so repeated start/stop
cycles never leave stray events behind.

The clock is injectable. Tests pass an object with a compatible
``schedule_interval`` and drive the ticks by hand.
"""

from __future__ import annotations

from kivy.clock import Clock
from kivy.event import EventDispatcher
from kivy.properties import BooleanProperty, NumericProperty

from backend import DEFAULT_REST_DURATION, REST_PRESETS, REST_PROGRESS_SPAN

TICK_INTERVAL = 1.0


def format_time(total_seconds: int) -> str:
    """Return ``total_seconds`` as ``H:MM:SS`` or ``M:SS``."""

    total_seconds = int(total_seconds)
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


class Timer(EventDispatcher):
    """Count-up stopwatch or count-down timer.

    ``seconds`` holds the current value and ``is_running`` the state; both
    are Kivy properties so widgets can bind to them. In count-down mode the
    ``on_complete`` event is dispatched once when the value reaches zero.
    """

    seconds = NumericProperty(0)
    is_running = BooleanProperty(False)

    __events__ = ("on_complete",)

    def __init__(self, initial_seconds: int = 0, count_down: bool = False, clock=None, **kwargs):
        super().__init__(**kwargs)
        self.initial_seconds = initial_seconds
        self.count_down = count_down
        self.clock = clock if clock is not None else Clock
        self.seconds = initial_seconds
        self._event = None

    def start(self) -> None:
        """Begin ticking. Does nothing if already running."""

        if self._event is not None:
            return
        if self.count_down and self.seconds <= 0:
            return
        self._event = self.clock.schedule_interval(self._tick, TICK_INTERVAL)
        self.is_running = True

    def pause(self) -> None:
        """Stop ticking and keep the current value."""

        self._cancel_event()
        self.is_running = False

    def reset(self) -> None:
        """Stop ticking and restore the initial value."""

        self.pause()
        self.seconds = self.initial_seconds

    def set_time(self, seconds: int) -> None:
        self.seconds = seconds

    def release(self) -> None:
        """Cancel the tick source when the owner goes away."""

        self.pause()

    def toggle(self) -> None:
        if self.is_running:
            self.pause()
        else:
            self.start()

    def _cancel_event(self) -> None:
        if self._event is not None:
            self._event.cancel()
            self._event = None

    def _tick(self, dt) -> None:
        if not self.count_down:
            self.seconds += 1
            return
        self.seconds = max(0, self.seconds - 1)
        if self.seconds == 0:
            self.pause()
            self.dispatch("on_complete")

    def on_complete(self, *args):
        pass

    @property
    def formatted(self) -> str:
        return format_time(self.seconds)


class RestTimer(Timer):
    """Count-down timer used between sets."""

    presets = REST_PRESETS

    def __init__(self, initial_seconds: int = DEFAULT_REST_DURATION, clock=None, **kwargs):
        super().__init__(initial_seconds, count_down=True, clock=clock, **kwargs)

    def apply_preset(self, seconds: int) -> None:
        """Jump to ``seconds`` and start counting down."""

        self.set_time(seconds)
        self.start()

    @property
    def progress(self) -> float:
        """Remaining time as a fraction of the longest preset."""

        return min(1.0, max(0.0, self.seconds / REST_PROGRESS_SPAN))

    @property
    def is_warning(self) -> bool:
        return 0 < self.seconds <= 10
