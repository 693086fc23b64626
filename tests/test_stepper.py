import pytest

from playback import (
    Stepper,
    StepperState,
    clamp_interval,
    DEFAULT_INTERVAL_MS,
    MAX_INTERVAL_MS,
    MIN_INTERVAL_MS,
)
from search import run


@pytest.fixture
def steps(fork_graph):
    return run("bfs", fork_graph, "A", ["B"])


@pytest.fixture
def stepper(steps):
    s = Stepper()
    s.load(steps)
    return s


def test_new_stepper_is_idle():
    s = Stepper()
    assert s.state == StepperState.IDLE
    assert s.current_step is None
    assert s.total_steps == 0
    assert s.interval_ms == DEFAULT_INTERVAL_MS


def test_load_shows_first_step(stepper, steps):
    assert stepper.state == StepperState.PAUSED
    assert stepper.current_idx == 0
    assert stepper.current_step == steps[0]
    assert stepper.total_steps == len(steps)


def test_load_clamps_index(steps):
    s = Stepper()
    s.load(steps, index=99)
    assert s.current_idx == len(steps) - 1
    s.load(steps, index=-5)
    assert s.current_idx == 0


def test_load_empty_run_is_finished():
    s = Stepper()
    s.load([])
    assert s.state == StepperState.FINISHED
    assert s.current_idx == -1
    assert s.current_step is None
    assert s.next_step() is False
    assert s.prev_step() is False


def test_next_and_prev(stepper, steps):
    assert stepper.prev_step() is False
    assert stepper.next_step() is True
    assert stepper.current_step == steps[1]
    assert stepper.prev_step() is True
    assert stepper.current_idx == 0


def test_next_at_end_finishes(stepper, steps):
    stepper.goto_step(len(steps) - 1)
    assert stepper.at_end
    assert stepper.next_step() is False
    assert stepper.is_finished
    assert stepper.current_idx == len(steps) - 1

    assert stepper.prev_step() is True
    assert stepper.state == StepperState.PAUSED


def test_goto_step_bounds(stepper, steps):
    assert stepper.goto_step(len(steps)) is False
    assert stepper.goto_step(-1) is False
    assert stepper.goto_step(2) is True
    assert stepper.current_idx == 2


def test_rewind_and_jump_to_end(stepper, steps):
    stepper.jump_to_end()
    assert stepper.current_idx == len(steps) - 1
    assert stepper.is_finished
    stepper.rewind()
    assert stepper.current_idx == 0
    assert stepper.state == StepperState.PAUSED


def test_reset(stepper):
    stepper.reset()
    assert stepper.state == StepperState.IDLE
    assert stepper.steps == []
    assert stepper.current_step is None


def test_play_pause_toggle(stepper):
    stepper.play()
    assert stepper.is_playing
    stepper.pause()
    assert stepper.state == StepperState.PAUSED
    stepper.toggle_play()
    assert stepper.is_playing
    stepper.toggle_play()
    assert not stepper.is_playing


def test_play_ignored_when_idle_or_at_end(stepper):
    idle = Stepper()
    idle.play()
    assert idle.state == StepperState.IDLE

    stepper.jump_to_end()
    stepper.play()
    assert stepper.is_finished


def test_tick_respects_interval(stepper, monkeypatch):
    monkeypatch.setattr("playback.stepper.time.monotonic", lambda: 100.0)
    stepper.set_interval(500)
    stepper.play()

    assert stepper.tick(now=100.2) is False
    assert stepper.current_idx == 0
    assert stepper.tick(now=100.6) is True
    assert stepper.current_idx == 1
    assert stepper.tick(now=100.7) is False


def test_tick_does_nothing_when_paused(stepper):
    assert stepper.tick(now=1e9) is False
    assert stepper.current_idx == 0


def test_playing_to_the_last_step_finishes(stepper, steps):
    stepper.set_interval(MIN_INTERVAL_MS)
    stepper.play()
    now = stepper._last_tick
    for _ in range(len(steps) - 1):
        now += 1.0
        assert stepper.tick(now=now) is True
    assert stepper.at_end
    assert stepper.is_finished
    assert stepper.tick(now=now + 1.0) is False


def test_on_step_callback(steps):
    seen = []
    s = Stepper(on_step=seen.append)
    s.load(steps)
    s.next_step()
    s.prev_step()
    assert seen == [steps[0], steps[1], steps[0]]


@pytest.mark.parametrize("ms, expected", [
    (50, MIN_INTERVAL_MS),
    (200, 200),
    (1000, 1000),
    (1234.9, 1234),
    (5000, MAX_INTERVAL_MS),
])
def test_clamp_interval(ms, expected):
    assert clamp_interval(ms) == expected


def test_set_interval_clamps(stepper):
    stepper.set_interval(10)
    assert stepper.interval_ms == MIN_INTERVAL_MS
    stepper.set_interval(10_000)
    assert stepper.interval_ms == MAX_INTERVAL_MS
