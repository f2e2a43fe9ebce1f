import logger
from render_clock import RenderClock


class FakeTimer:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now


def test_clock_tracks_elapsed_time_and_progress():
    timer = FakeTimer()
    clock = RenderClock(200, timer=timer)
    assert clock.elapsed_seconds() == 0.0
    assert not clock.is_running

    clock.start()
    timer.now += 61.25
    clock.advance(50)
    assert clock.is_running
    assert clock.elapsed_seconds() == 61.25
    assert clock.progress_ratio() == 0.25
    assert clock.get_display_string() == "01:01.250 |  25%"

    clock.stop()
    timer.now += 10.0
    assert not clock.is_running
    assert clock.elapsed_seconds() == 61.25


def test_advance_never_passes_total():
    clock = RenderClock(10)
    clock.advance(8)
    clock.advance(8)
    assert clock.rows_done == 10
    assert clock.progress_ratio() == 1.0


def test_empty_render_is_complete():
    assert RenderClock(0).progress_ratio() == 1.0


def test_log_without_clock_uses_start_prefix(capsys):
    logger.set_render_clock(None)
    logger.log("hello")
    assert capsys.readouterr().out == "[Render Start] hello\n"


def test_log_with_running_clock_shows_time_and_progress(capsys):
    timer = FakeTimer(0.0)
    clock = RenderClock(4, timer=timer)
    logger.set_render_clock(clock)
    try:
        logger.log("before start")
        clock.start()
        timer.now = 2.5
        clock.advance(2)
        logger.log("halfway")
    finally:
        logger.set_render_clock(None)
    out = capsys.readouterr().out.splitlines()
    assert out == ["[Render Start] before start", "[00:02.500 |  50%] halfway"]
