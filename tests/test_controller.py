"""Tests for bounce_core.controller and bounce_core.scheduler."""
import threading

import pytest

from bounce_core.controller import AnimationController
from bounce_core.scheduler import ManualScheduler
from fakes import RecordingToneGenerator


@pytest.fixture
def controller(engine, tones, scheduler):
    c = AnimationController(engine, tones, scheduler)
    c.load_sound()
    return c


def park_next_to_right_wall(controller):
    b = controller.engine.bounds
    controller.engine.reset(b.max_x - 0.5, 300.0, 2.0, 0.0)


class TestManualScheduler:
    def test_runs_queued_callbacks_once(self):
        s = ManualScheduler()
        calls = []
        s.request_frame(lambda: calls.append("a"))
        s.request_frame(lambda: calls.append("b"))

        assert s.advance() == 2
        assert s.advance() == 0
        assert calls == ["a", "b"]

    def test_callback_requested_during_frame_waits(self):
        s = ManualScheduler()
        calls = []

        def again():
            calls.append(s.frame_count)
            s.request_frame(again)

        s.request_frame(again)
        s.advance(3)
        assert calls == [0, 1, 2]
        assert s.pending == 1


class TestPlayPause:
    def test_nothing_moves_until_started(self, controller, scheduler):
        scheduler.advance(5)
        assert controller.tick_count == 0

    def test_start_ticks_once_per_frame(self, controller, scheduler):
        controller.start()
        scheduler.advance(10)
        assert controller.tick_count == 10

    def test_pause_stops_the_chain(self, controller, scheduler):
        controller.start()
        scheduler.advance(3)
        controller.pause()
        scheduler.advance(5)

        assert controller.tick_count == 3
        assert scheduler.pending == 0

    def test_pause_inside_a_tick_lets_it_finish(self, engine, scheduler):
        class PausingTones(RecordingToneGenerator):
            def _bounce(inner):
                super()._bounce()
                controller.pause()

        controller = AnimationController(engine, PausingTones(), scheduler)
        controller.load_sound()
        park_next_to_right_wall(controller)
        controller.start()
        scheduler.advance(3)

        assert controller.tick_count == 1
        assert controller.last_result.collided

    def test_double_start_keeps_a_single_chain(self, controller, scheduler):
        controller.start()
        controller.start()
        scheduler.advance(4)
        assert controller.tick_count == 4

    def test_restart_after_pause(self, controller, scheduler):
        controller.start()
        scheduler.advance(2)
        controller.toggle_playing()
        controller.toggle_playing()
        scheduler.advance(2)
        assert controller.tick_count == 4

    def test_pause_and_resume_before_next_frame(self, controller, scheduler):
        controller.start()
        controller.pause()
        controller.start()
        scheduler.advance(2)
        assert controller.tick_count == 2


class TestSoundToggle:
    def test_collision_plays_bounce_tone(self, controller, tones, scheduler):
        park_next_to_right_wall(controller)
        controller.start()
        scheduler.advance()
        assert tones.bounces == 1

    def test_sound_off_skips_synthesis_but_not_collisions(self, controller, tones, scheduler):
        controller.toggle_sound()
        park_next_to_right_wall(controller)
        controller.start()
        scheduler.advance()

        assert tones.bounces == 0
        assert controller.bounce_count == 1

    def test_sound_back_on_resumes_on_next_collision(self, controller, tones, scheduler):
        controller.set_sound_enabled(False)
        park_next_to_right_wall(controller)
        controller.start()
        scheduler.advance()
        controller.set_sound_enabled(True)
        park_next_to_right_wall(controller)
        scheduler.advance()

        assert tones.bounces == 1

    def test_corner_hit_sounds_per_axis(self, controller, tones, scheduler):
        b = controller.engine.bounds
        controller.engine.reset(b.max_x - 1.0, b.max_y - 1.0, 2.0, 2.0)
        controller.start()
        scheduler.advance()
        assert tones.bounces == 2

    def test_failed_audio_keeps_motion_running(self, engine, scheduler):
        tones = RecordingToneGenerator(available=False)
        controller = AnimationController(engine, tones, scheduler)

        assert controller.load_sound() is False
        assert controller.sound_enabled is False
        park_next_to_right_wall(controller)
        controller.start()
        scheduler.advance(5)

        assert controller.tick_count == 5
        assert tones.bounces == 0

    def test_turning_sound_on_retries_initialization(self, engine, scheduler):
        tones = RecordingToneGenerator(available=False)
        controller = AnimationController(engine, tones, scheduler)
        controller.load_sound()

        assert controller.toggle_sound() is False
        tones.available = True
        assert controller.toggle_sound() is True
        assert tones.initialized

    def test_full_session_never_leaves_bounds(self, controller, scheduler):
        controller.start()
        for _ in range(2000):
            scheduler.advance()
            s = controller.engine.state
            assert controller.engine.bounds.contains(s.x, s.y)
        assert controller.bounce_count > 0


class TestToggleDuringTick:
    def test_pause_and_start_inside_a_tick_keep_one_chain(self, engine, scheduler):
        class RestartingTones(RecordingToneGenerator):
            def _bounce(inner):
                super()._bounce()
                controller.pause()
                controller.start()

        controller = AnimationController(engine, RestartingTones(), scheduler)
        controller.load_sound()
        park_next_to_right_wall(controller)
        controller.start()
        scheduler.advance(10)

        assert controller.tick_count == 10
        assert scheduler.pending == 1

    def test_pause_inside_a_tick_leaves_nothing_queued(self, engine, scheduler):
        class PausingTones(RecordingToneGenerator):
            def _bounce(inner):
                super()._bounce()
                controller.pause()

        controller = AnimationController(engine, PausingTones(), scheduler)
        controller.load_sound()
        park_next_to_right_wall(controller)
        controller.start()
        scheduler.advance()

        assert controller.tick_count == 1
        assert scheduler.pending == 0

    def test_toggle_from_another_thread_waits_for_the_tick(self, controller, scheduler):
        controller.start()
        with controller.lock:
            worker = threading.Thread(target=controller.toggle_playing)
            worker.start()
            worker.join(timeout=0.2)
            # Blocked on the lock while the frame thread holds it
            assert worker.is_alive()
            assert controller.playing
        worker.join(timeout=2.0)

        assert not controller.playing
        scheduler.advance(3)
        assert controller.tick_count == 0
