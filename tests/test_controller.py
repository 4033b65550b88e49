"""Tests for engine.controller driven by a ManualScheduler."""

import pytest

from algorithms import Simulation
from algorithms.step import TraceBuilder
from engine import (
    ManualScheduler,
    PlaybackController,
    PlaybackPhase,
    DEFAULT_SPEED_TIER,
)
from flowgraph import FlowGraph


SAMPLE = [64, 34, 25, 12, 22, 11, 90]


@pytest.fixture
def clock():
    return ManualScheduler()


@pytest.fixture
def ctrl(clock):
    return PlaybackController(scheduler=clock)


def _assert_invariants(c: PlaybackController):
    if c.step_count:
        assert 0 <= c.cursor < c.step_count
    else:
        assert c.cursor == 0
    if c.is_playing:
        assert c.cursor < c.last_index


class TestSelect:
    def test_initial_state(self, ctrl):
        assert ctrl.phase == PlaybackPhase.IDLE
        assert ctrl.current_step is None
        assert ctrl.view().name == ""

    def test_select_loads_trace(self, ctrl):
        view = ctrl.select("bubble-sort", SAMPLE)
        assert ctrl.phase == PlaybackPhase.LOADED
        assert ctrl.cursor == 0
        assert ctrl.step_count == 43
        assert view.highlighted_node == "input"
        assert view.highlighted_source_line == 2

    def test_reselect_resets_cursor(self, ctrl):
        ctrl.select("bubble-sort", SAMPLE)
        ctrl.seek(10)
        ctrl.select("binary-search", "23")
        assert ctrl.cursor == 0
        assert ctrl.step_count == 7

    def test_on_change_fires(self, clock):
        seen = []
        c = PlaybackController(scheduler=clock, on_change=seen.append)
        c.select("binary-search", "23")
        c.step_forward()
        assert [v.state.cursor for v in seen] == [0, 1]


class TestPlayback:
    def test_fast_tier_ticks_every_500ms(self, ctrl, clock):
        ctrl.select("foo-sort", [1])
        ctrl.set_speed(3)
        ctrl.play()
        assert ctrl.is_playing

        clock.advance(499)
        assert ctrl.cursor == 0
        clock.advance(1)
        assert ctrl.cursor == 1
        assert ctrl.is_playing

        clock.advance(500)
        assert ctrl.cursor == 2
        assert ctrl.phase == PlaybackPhase.FINISHED
        assert not ctrl.is_playing
        assert clock.pending == 0

        clock.advance(5000)
        assert ctrl.cursor == 2

    def test_default_tier_interval(self, ctrl, clock):
        ctrl.select("foo-sort")
        ctrl.play()
        assert ctrl.interval_ms == 1000
        assert clock.next_due() == 1000

    def test_runs_to_end(self, ctrl, clock):
        ctrl.select("bubble-sort", SAMPLE)
        ctrl.play()
        fired = clock.run_until_idle()
        assert fired == 42
        assert ctrl.cursor == 42
        assert ctrl.is_finished

    def test_play_at_end_restarts(self, ctrl, clock):
        ctrl.select("foo-sort")
        ctrl.seek(2)
        assert ctrl.is_finished
        ctrl.play()
        assert ctrl.cursor == 0
        assert ctrl.is_playing

    def test_play_twice_keeps_one_timer(self, ctrl, clock):
        ctrl.select("foo-sort")
        ctrl.play()
        ctrl.play()
        assert clock.pending == 1

    def test_play_without_steps_is_noop(self, ctrl, clock):
        ctrl.play()
        assert ctrl.phase == PlaybackPhase.IDLE
        assert clock.pending == 0

    def test_pause_cancels_tick(self, ctrl, clock):
        ctrl.select("bubble-sort", SAMPLE)
        ctrl.play()
        clock.advance(1000)
        ctrl.pause()
        assert ctrl.phase == PlaybackPhase.PAUSED
        clock.advance(10_000)
        assert ctrl.cursor == 1

    def test_toggle(self, ctrl):
        ctrl.select("bubble-sort", SAMPLE)
        ctrl.toggle_play()
        assert ctrl.is_playing
        ctrl.toggle_play()
        assert ctrl.phase == PlaybackPhase.PAUSED

    def test_reset_while_playing(self, ctrl, clock):
        ctrl.select("bubble-sort", SAMPLE)
        ctrl.play()
        clock.advance(3000)
        ctrl.reset()
        assert ctrl.cursor == 0
        assert ctrl.phase == PlaybackPhase.LOADED
        clock.advance(10_000)
        assert ctrl.cursor == 0

    def test_select_while_playing_drops_old_tick(self, ctrl, clock):
        ctrl.select("bubble-sort", SAMPLE)
        ctrl.play()
        clock.advance(2000)
        ctrl.select("binary-search", "23")
        clock.advance(10_000)
        assert ctrl.cursor == 0
        assert ctrl.phase == PlaybackPhase.LOADED

    def test_speed_change_applies_to_next_tick(self, ctrl, clock):
        ctrl.select("bubble-sort", SAMPLE)
        ctrl.play()
        ctrl.set_speed(1)
        clock.advance(1000)
        assert ctrl.cursor == 1
        clock.advance(1999)
        assert ctrl.cursor == 1
        clock.advance(1)
        assert ctrl.cursor == 2

    def test_unknown_speed_falls_back(self, ctrl):
        ctrl.set_speed(7)
        assert ctrl.speed_tier == DEFAULT_SPEED_TIER

    def test_single_step_trace_finishes_immediately(self, ctrl, clock):
        tb = TraceBuilder()
        tb.emit("Only", "only step", terminal=True)
        ctrl.load(Simulation("one", "One", tb.build(), FlowGraph()))
        ctrl.play()
        assert ctrl.is_finished
        assert clock.pending == 0


class TestNavigation:
    def test_step_bounds(self, ctrl):
        ctrl.select("foo-sort")
        assert not ctrl.step_backward()
        assert ctrl.step_forward()
        assert ctrl.step_forward()
        assert not ctrl.step_forward()
        assert ctrl.cursor == 2
        assert ctrl.is_finished

    def test_back_from_finished_pauses(self, ctrl):
        ctrl.select("foo-sort")
        ctrl.seek(99)
        assert ctrl.cursor == 2
        ctrl.step_backward()
        assert ctrl.phase == PlaybackPhase.PAUSED

    def test_stepping_to_end_while_playing_stops(self, ctrl, clock):
        ctrl.select("foo-sort")
        ctrl.play()
        ctrl.step_forward()
        ctrl.step_forward()
        assert ctrl.is_finished
        assert clock.pending == 0

    def test_seek_clamps(self, ctrl):
        ctrl.select("binary-search", "23")
        ctrl.seek(-5)
        assert ctrl.cursor == 0
        ctrl.seek(3)
        assert ctrl.current_step.index == 3

    def test_invariants_hold_under_mixed_ops(self, ctrl, clock):
        ctrl.select("binary-search", "23")
        ops = [
            ctrl.play, lambda: clock.advance(1000), ctrl.step_backward,
            ctrl.pause, ctrl.step_forward, ctrl.play, lambda: clock.advance(10_000),
            ctrl.step_backward, ctrl.reset, ctrl.step_forward,
        ]
        for op in ops:
            op()
            _assert_invariants(ctrl)


class TestTraceLog:
    def test_lines_up_to_cursor(self, ctrl):
        ctrl.select("binary-search", "23")
        ctrl.seek(2)
        lines = ctrl.trace_log()
        assert [line.label for line in lines] == ["Step 1", "Step 2", "Step 3"]
        assert lines[-1].active
        assert not lines[0].active

    def test_final_answer_at_end(self, ctrl):
        ctrl.select("binary-search", "23")
        ctrl.seek(6)
        lines = ctrl.trace_log()
        assert len(lines) == 8
        assert lines[-1].label == "Final Answer"
        assert lines[-1].message == "Found 23 at index 5!"
        assert lines[-1].kind == "result"

    def test_view_to_dict(self, ctrl):
        ctrl.select("bubble-sort", SAMPLE)
        data = ctrl.view().to_dict()
        assert data["algorithm"] == "bubble-sort"
        assert data["state"]["stepCount"] == 43
        assert data["state"]["phase"] == "loaded"
        assert data["currentStep"]["step"] == 0
