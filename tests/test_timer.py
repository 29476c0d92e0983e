import pytest

from backend.timer import RestTimer, Timer, format_time


def test_count_up_round_trip(stopwatch, fake_clock):
    stopwatch.start()
    assert stopwatch.is_running
    fake_clock.tick(3)
    stopwatch.pause()
    assert stopwatch.seconds == 3
    assert not stopwatch.is_running
    fake_clock.tick(2)
    assert stopwatch.seconds == 3
    stopwatch.reset()
    assert stopwatch.seconds == 0


def test_reset_restores_configured_value(fake_clock):
    timer = Timer(42, clock=fake_clock)
    timer.start()
    fake_clock.tick(5)
    timer.reset()
    assert timer.seconds == 42
    assert not fake_clock.events


def test_start_twice_registers_one_tick_source(stopwatch, fake_clock):
    stopwatch.start()
    stopwatch.start()
    assert fake_clock.scheduled == 1
    fake_clock.tick()
    assert stopwatch.seconds == 1


def test_start_pause_cycles_leave_no_events(stopwatch, fake_clock):
    for _ in range(5):
        stopwatch.start()
        fake_clock.tick()
        stopwatch.pause()
    assert fake_clock.events == []
    assert stopwatch.seconds == 5


def test_release_cancels_tick_source(stopwatch, fake_clock):
    stopwatch.start()
    stopwatch.release()
    fake_clock.tick(3)
    assert stopwatch.seconds == 0
    assert fake_clock.events == []


def test_count_down_completes_once(fake_clock):
    timer = Timer(2, count_down=True, clock=fake_clock)
    completions = []
    timer.bind(on_complete=lambda *_: completions.append(timer.seconds))
    timer.start()
    fake_clock.tick()
    assert timer.seconds == 1
    fake_clock.tick()
    assert timer.seconds == 0
    assert not timer.is_running
    fake_clock.tick(3)
    assert completions == [0]


def test_count_down_at_zero_does_not_start(fake_clock):
    timer = Timer(0, count_down=True, clock=fake_clock)
    timer.start()
    assert not timer.is_running
    assert fake_clock.scheduled == 0


def test_set_time_overwrites_value(stopwatch, fake_clock):
    stopwatch.set_time(100)
    stopwatch.start()
    fake_clock.tick()
    assert stopwatch.seconds == 101


def test_rest_timer_preset_starts_countdown(fake_clock):
    timer = RestTimer(60, clock=fake_clock)
    timer.apply_preset(90)
    assert timer.is_running
    fake_clock.tick(80)
    assert timer.seconds == 10
    assert timer.is_warning
    assert timer.progress == pytest.approx(10 / 120)
    timer.reset()
    assert timer.seconds == 60
    assert not timer.is_warning


def test_rest_timer_progress_is_clamped(fake_clock):
    timer = RestTimer(60, clock=fake_clock)
    timer.set_time(300)
    assert timer.progress == 1.0


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0:00"),
        (5, "0:05"),
        (65, "1:05"),
        (600, "10:00"),
        (3600, "1:00:00"),
        (3725, "1:02:05"),
        (36000, "10:00:00"),
    ],
)
def test_format_time(seconds, expected):
    assert format_time(seconds) == expected
