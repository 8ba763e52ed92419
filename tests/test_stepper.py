"""
Unit tests for playback frames and the Stepper state machine.

The 3x3 open BFS run used throughout visits 7 cells and has a 4-cell path,
so it plays back as 1 + 7 + 4 = 12 frames.
"""

import pytest

from algorithms.bfs import bfs
from config import PATH_DELAY_MS, VISIT_DELAY_MS
from engine import Stepper, StepperState, frame_at, iter_steps, total_steps
from grid import Grid


@pytest.fixture
def result():
    return bfs(Grid(3, 3), (0, 0), (2, 2))


@pytest.fixture
def stepper(result):
    s = Stepper()
    s.start(result)
    return s


class TestFrames:
    def test_frame_at_matches_iteration(self, result):
        assert [frame_at(result, n) for n in range(12)] == list(iter_steps(result))

    def test_frame_at_out_of_range(self, result):
        with pytest.raises(IndexError):
            frame_at(result, 12)

    def test_frame_count(self, result):
        assert total_steps(result) == 12
        assert len(list(iter_steps(result))) == 12

    def test_frame_kinds_in_order(self, result):
        kinds = [s.kind for s in iter_steps(result)]
        assert kinds == ["init"] + ["visit"] * 7 + ["path"] * 4

    def test_step_number_counts_revealed_records(self, result):
        assert [s.step_number for s in iter_steps(result)] == list(range(12))

    def test_only_last_frame_is_final(self, result):
        finals = [s.is_final for s in iter_steps(result)]
        assert finals == [False] * 11 + [True]

    def test_captions(self, result):
        frames = list(iter_steps(result))
        assert frames[0].explanation == "Start searching with bfs."
        assert frames[1].explanation == "Expand (0, 1) at distance 1."
        assert frames[-1].explanation == "End reached. Path length 4."

    def test_visit_frame_carries_distance(self, result):
        frame = list(iter_steps(result))[6]
        assert (frame.row, frame.col, frame.distance) == (1, 2, 3)

    def test_nothing_to_expand(self):
        frames = list(iter_steps(bfs(Grid(2, 2), (0, 0), (0, 0))))
        assert len(frames) == 1
        assert frames[0].explanation == "Nothing to expand."
        assert frames[0].is_final


class TestStepper:
    def test_starts_paused_on_init_frame(self, stepper):
        assert stepper.state == StepperState.PAUSED
        assert stepper.current_idx == 0
        assert stepper.current_step.kind == "init"
        assert stepper.total_steps == 12

    def test_walk_to_the_end(self, stepper):
        for _ in range(11):
            assert stepper.next_step()
        assert stepper.is_finished
        assert stepper.next_step() is False
        assert stepper.current_idx == 11

    def test_prev_leaves_finished(self, stepper):
        stepper.jump_to_end()
        assert stepper.is_finished
        assert stepper.prev_step()
        assert stepper.state == StepperState.PAUSED
        assert stepper.current_idx == 10

    def test_prev_at_start(self, stepper):
        assert stepper.prev_step() is False

    def test_goto(self, stepper):
        assert stepper.goto_step(5)
        assert stepper.current_step.step_number == 5
        assert stepper.goto_step(100) is False
        assert stepper.current_idx == 5

    def test_rewind(self, stepper):
        stepper.jump_to_end()
        stepper.rewind()
        assert stepper.current_idx == 0
        assert stepper.state == StepperState.PAUSED

    def test_play_pause_toggle(self, stepper):
        stepper.toggle_play()
        assert stepper.is_playing
        stepper.toggle_play()
        assert stepper.state == StepperState.PAUSED

    def test_play_is_ignored_when_finished(self, stepper):
        stepper.jump_to_end()
        stepper.play()
        assert stepper.is_finished

    def test_idle_stepper(self):
        s = Stepper()
        s.play()
        assert s.state == StepperState.IDLE
        assert s.total_steps == 0
        assert s.current_step is None
        assert s.next_step() is False

    def test_set_speed(self, stepper):
        stepper.set_speed("slow")
        assert stepper.speed == 0.5
        stepper.set_speed("nonsense")
        assert stepper.speed == 0.02

    def test_reset(self, stepper):
        stepper.reset()
        assert stepper.state == StepperState.IDLE
        assert stepper.result is None
        assert stepper.current_step is None

    def test_delay_for_visit_and_path_frames(self, stepper):
        stepper.next_step()
        assert stepper.delay_ms() == VISIT_DELAY_MS
        stepper.jump_to_end()
        assert stepper.delay_ms() == PATH_DELAY_MS

    def test_delay_scales_with_speed(self, stepper):
        stepper.set_speed("slow")
        assert stepper.delay_ms() == 500
        stepper.set_speed("turbo")
        assert stepper.delay_ms() == 5

    def test_idle_delay(self):
        assert Stepper().delay_ms() == VISIT_DELAY_MS
