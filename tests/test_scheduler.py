import pytest

from grid_snake import scheduler as scheduler_module
from grid_snake.config import TICK_EVENT
from grid_snake.scheduler import PygameTickTimer


@pytest.fixture
def timer_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(
        scheduler_module.pygame.time,
        "set_timer",
        lambda event, millis: calls.append((event, millis)),
    )
    return calls


def test_start_and_stop_drive_pygame_timer(timer_calls):
    timer = PygameTickTimer()

    timer.start(120)
    assert timer.active
    assert timer.interval_ms == 120

    timer.stop()
    assert not timer.active
    assert timer_calls == [(TICK_EVENT, 120), (TICK_EVENT, 0)]


def test_stop_when_idle_is_noop(timer_calls):
    PygameTickTimer().stop()
    assert timer_calls == []


def test_rejects_non_positive_interval(timer_calls):
    with pytest.raises(ValueError):
        PygameTickTimer().start(0)
    assert timer_calls == []
