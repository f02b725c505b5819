"""Tests for the playback state machine.

All timing is driven by ManualClock; at 300 WPM the base delay is 200 ms.
"""

import pytest

from speedreader.models.enums import PlaybackStatus
from speedreader.services.playback.clock import ManualClock
from speedreader.services.playback.listener import PlaybackListener
from speedreader.services.playback.scheduler import PlaybackScheduler
from speedreader.services.tokenizer.tokenizer import tokenize


class TestLoad:
    def test_load_renders_first_word(self, clock, listener):
        scheduler = PlaybackScheduler(clock, listener, rate=300)
        scheduler.load(tokenize("Hello world"))

        assert scheduler.status is PlaybackStatus.IDLE
        assert scheduler.index == 0
        assert listener.last_parts == ("H", "e", "llo")
        assert listener.of("progress") == [0.0]
        assert not scheduler.has_pending_timer

    def test_load_while_playing_cancels_timer(self, clock, listener, make_scheduler):
        scheduler = make_scheduler("one two three")
        scheduler.play()
        clock.advance(200)

        scheduler.load(tokenize("fresh text"))

        assert scheduler.status is PlaybackStatus.IDLE
        assert scheduler.index == 0
        assert clock.pending_count == 0
        assert listener.statuses[-1] is PlaybackStatus.IDLE
        clock.advance(10_000)
        assert scheduler.index == 0

    def test_rate_survives_load(self, make_scheduler):
        scheduler = make_scheduler("one two", rate=300)
        scheduler.set_rate(700)
        scheduler.load(tokenize("other words"))
        assert scheduler.rate == 700

    def test_paragraph_break_first_renders_blank(self, listener, make_scheduler):
        scheduler = make_scheduler()
        scheduler.load(tokenize("¶ after"))
        assert listener.last_parts == ("", "", "")


class TestPlayPause:
    def test_play_arms_single_timer(self, clock, make_scheduler):
        scheduler = make_scheduler("one two three")
        scheduler.play()

        assert scheduler.status is PlaybackStatus.PLAYING
        assert clock.pending_count == 1
        assert clock.next_due_ms == 200

    def test_play_while_playing_is_noop(self, clock, make_scheduler):
        scheduler = make_scheduler("one two three")
        scheduler.play()
        scheduler.play()
        assert clock.pending_count == 1

    def test_advances_after_delay(self, clock, listener, make_scheduler):
        scheduler = make_scheduler("one two three")
        scheduler.play()

        clock.advance(199)
        assert scheduler.index == 0
        clock.advance(1)
        assert scheduler.index == 1
        assert listener.words == ["two"]

    def test_pause_then_play_resumes(self, clock, make_scheduler):
        scheduler = make_scheduler("one two three four")
        scheduler.play()
        clock.advance(200)
        scheduler.pause()

        assert scheduler.status is PlaybackStatus.PAUSED
        assert clock.pending_count == 0
        clock.advance(10_000)
        assert scheduler.index == 1

        scheduler.play()
        assert scheduler.index == 1
        assert scheduler.status is PlaybackStatus.PLAYING
        clock.advance(200)
        assert scheduler.index == 2

    def test_pause_when_not_playing_is_noop(self, listener, make_scheduler):
        scheduler = make_scheduler("one two")
        scheduler.pause()
        assert scheduler.status is PlaybackStatus.IDLE
        assert listener.statuses == []

    def test_toggle(self, make_scheduler):
        scheduler = make_scheduler("one two")
        scheduler.toggle()
        assert scheduler.status is PlaybackStatus.PLAYING
        scheduler.toggle()
        assert scheduler.status is PlaybackStatus.PAUSED
        scheduler.toggle()
        assert scheduler.status is PlaybackStatus.PLAYING


class TestFinishing:
    def test_runs_to_finished_exactly_once(self, clock, listener, make_scheduler, drain):
        text = "one two three four five"
        scheduler = make_scheduler(text)
        scheduler.play()

        ticks = drain(scheduler)

        assert ticks == len(tokenize(text))
        assert scheduler.status is PlaybackStatus.FINISHED
        assert scheduler.index == 4
        assert listener.statuses.count(PlaybackStatus.FINISHED) == 1
        assert clock.pending_count == 0
        assert listener.of("progress")[-1] == 1.0

    def test_index_never_passes_last(self, clock, make_scheduler):
        scheduler = make_scheduler("a b c")
        scheduler.play()
        seen = []
        while clock.fire_next():
            seen.append(scheduler.index)
        assert max(seen) == 2

    def test_play_from_finished_restarts(self, clock, listener, make_scheduler, drain):
        scheduler = make_scheduler("one two three")
        scheduler.play()
        drain(scheduler)
        listener.clear()

        scheduler.play()

        assert scheduler.index == 0
        assert scheduler.status is PlaybackStatus.PLAYING
        assert listener.words == ["one"]
        assert clock.pending_count == 1

    def test_single_token(self, make_scheduler, drain):
        scheduler = make_scheduler("solo")
        scheduler.play()
        assert drain(scheduler) == 1
        assert scheduler.status is PlaybackStatus.FINISHED
        assert scheduler.index == 0
        assert scheduler.progress == 0.0

    def test_tick_when_not_playing_is_noop(self, make_scheduler):
        scheduler = make_scheduler("one two")
        scheduler.tick()
        assert scheduler.index == 0

    def test_direct_tick_keeps_single_timer(self, clock, make_scheduler):
        scheduler = make_scheduler("one two three")
        scheduler.play()
        scheduler.tick()
        assert scheduler.index == 1
        assert clock.pending_count == 1


class TestParagraphBreaks:
    def test_break_is_a_silent_timed_pause(self, clock, listener, make_scheduler):
        scheduler = make_scheduler("end. ¶ next")
        scheduler.play()

        clock.advance(600)  # "end." holds 3x
        assert scheduler.index == 1
        assert listener.words == []
        assert listener.of("progress") == [0.5]

        clock.advance(599)  # break holds 3x
        assert scheduler.index == 1
        clock.advance(1)
        assert scheduler.index == 2
        assert listener.words == ["next"]


class TestRate:
    def test_set_rate_clamps_and_emits(self, listener, make_scheduler):
        scheduler = make_scheduler("one two")
        scheduler.set_rate(5000)
        scheduler.set_rate(10)
        scheduler.set_rate(333)
        assert listener.of("rate") == [1500, 50, 350]
        assert scheduler.rate == 350

    def test_nan_rate_is_ignored(self, listener, make_scheduler):
        scheduler = make_scheduler("one two", rate=300)
        scheduler.set_rate(float("nan"))
        assert scheduler.rate == 300
        assert listener.of("rate") == []

    def test_rate_change_rearms_full_delay(self, clock, make_scheduler):
        scheduler = make_scheduler("aaa bbb ccc")
        scheduler.play()
        clock.advance(150)

        scheduler.set_rate(600)  # 100 ms base, counted from now

        assert clock.pending_count == 1
        clock.advance(99)
        assert scheduler.index == 0
        clock.advance(1)
        assert scheduler.index == 1

    def test_rate_change_while_paused_arms_nothing(self, clock, make_scheduler):
        scheduler = make_scheduler("one two")
        scheduler.set_rate(600)
        assert clock.pending_count == 0

    def test_step_controls(self, make_scheduler):
        scheduler = make_scheduler("one", rate=1450)
        scheduler.increase_rate()
        scheduler.increase_rate()
        assert scheduler.rate == 1500

        scheduler.set_rate(100)
        scheduler.decrease_rate()
        scheduler.decrease_rate()
        assert scheduler.rate == 50

    def test_default_rate_from_settings(self, clock, monkeypatch):
        monkeypatch.setenv("SPEEDREADER_DEFAULT_WPM", "400")
        scheduler = PlaybackScheduler(clock)
        assert scheduler.rate == 400

    def test_current_delay_uses_current_rate(self, make_scheduler):
        scheduler = make_scheduler("stop.", rate=300)
        assert scheduler.current_delay_ms() == 600
        scheduler.set_rate(600)
        assert scheduler.current_delay_ms() == 300


class TestSeek:
    def test_seek_during_playback_keeps_timer(self, clock, listener, make_scheduler):
        scheduler = make_scheduler("a b c d e")
        scheduler.play()
        clock.advance(100)

        scheduler.seek(3)

        assert scheduler.index == 3
        assert scheduler.status is PlaybackStatus.PLAYING
        assert listener.words == ["d"]
        assert clock.next_due_ms == 200
        clock.advance(100)
        assert scheduler.index == 4

    @pytest.mark.parametrize("requested,expected", [(99, 4), (-5, 0), (2, 2)])
    def test_seek_clamps(self, make_scheduler, requested, expected):
        scheduler = make_scheduler("a b c d e")
        scheduler.seek(requested)
        assert scheduler.index == expected

    def test_seek_keeps_status(self, make_scheduler):
        scheduler = make_scheduler("a b c")
        scheduler.seek(1)
        assert scheduler.status is PlaybackStatus.IDLE

    def test_seek_fraction(self, listener, make_scheduler):
        scheduler = make_scheduler("a b c d e")
        scheduler.seek_fraction(0.5)
        assert scheduler.index == 2
        assert listener.of("progress") == [0.5]

        scheduler.seek_fraction(7.0)
        assert scheduler.index == 4
        scheduler.seek_fraction(float("nan"))
        assert scheduler.index == 0

    def test_seek_onto_break_renders_blank(self, listener, make_scheduler):
        scheduler = make_scheduler("a ¶ b")
        scheduler.seek(1)
        assert listener.last_parts == ("", "", "")


class TestEmptySequence:
    def test_every_operation_is_a_noop(self, clock, listener):
        scheduler = PlaybackScheduler(clock, listener, rate=300)
        scheduler.load([])

        scheduler.play()
        scheduler.toggle()
        scheduler.pause()
        scheduler.tick()
        scheduler.seek(3)
        scheduler.seek_fraction(0.7)

        assert scheduler.status is PlaybackStatus.IDLE
        assert scheduler.index == 0
        assert scheduler.current_token is None
        assert scheduler.current_delay_ms() is None
        assert scheduler.progress == 0.0
        assert clock.pending_count == 0


class TestListenerFailures:
    def test_failing_listener_does_not_stop_playback(self, clock, caplog):
        class Broken(PlaybackListener):
            def on_word_changed(self, before, focus, after):
                raise RuntimeError("render failed")

        scheduler = PlaybackScheduler(clock, Broken(), rate=300)
        scheduler.load(tokenize("one two three"))
        scheduler.play()

        while clock.fire_next():
            pass

        assert scheduler.status is PlaybackStatus.FINISHED
        assert "on_word_changed" in caplog.text

    def test_default_listener(self):
        clock = ManualClock()
        scheduler = PlaybackScheduler(clock, rate=300)
        scheduler.load(tokenize("quiet run"))
        scheduler.play()
        while clock.fire_next():
            pass
        assert scheduler.status is PlaybackStatus.FINISHED


class TestReentrantListener:
    """Listeners that drive the scheduler from inside a callback."""

    def test_pause_from_word_callback_leaves_no_timer(self, clock):
        class PauseOnStop(PlaybackListener):
            scheduler = None

            def on_word_changed(self, before, focus, after):
                if before + focus + after == "stop":
                    self.scheduler.pause()

        listener = PauseOnStop()
        scheduler = PlaybackScheduler(clock, listener, rate=300)
        listener.scheduler = scheduler
        scheduler.load(tokenize("go stop after"))
        scheduler.play()

        clock.advance(200)

        assert scheduler.status is PlaybackStatus.PAUSED
        assert scheduler.index == 1
        assert clock.pending_count == 0
        assert not scheduler.has_pending_timer
        clock.advance(10_000)
        assert scheduler.index == 1

    def test_load_from_progress_callback_leaves_no_timer(self, clock):
        class ReloadAtEnd(PlaybackListener):
            scheduler = None

            def on_progress(self, fraction):
                if fraction == 1.0:
                    self.scheduler.load(tokenize("next article"))

        listener = ReloadAtEnd()
        scheduler = PlaybackScheduler(clock, listener, rate=300)
        listener.scheduler = scheduler
        scheduler.load(tokenize("one two three"))
        scheduler.play()

        clock.advance(400)

        assert scheduler.status is PlaybackStatus.IDLE
        assert scheduler.index == 0
        assert clock.pending_count == 0

    def test_restart_from_callback_keeps_single_timer(self, clock):
        class Restart(PlaybackListener):
            scheduler = None

            def on_word_changed(self, before, focus, after):
                if before + focus + after == "two":
                    self.scheduler.pause()
                    self.scheduler.play()

        listener = Restart()
        scheduler = PlaybackScheduler(clock, listener, rate=300)
        listener.scheduler = scheduler
        scheduler.load(tokenize("one two three"))
        scheduler.play()

        clock.advance(200)

        assert scheduler.status is PlaybackStatus.PLAYING
        assert clock.pending_count == 1

    def test_pause_from_status_callback_arms_nothing(self, clock):
        class PauseOnPlay(PlaybackListener):
            scheduler = None

            def on_status_changed(self, status):
                if status is PlaybackStatus.PLAYING:
                    self.scheduler.pause()

        listener = PauseOnPlay()
        scheduler = PlaybackScheduler(clock, listener, rate=300)
        listener.scheduler = scheduler
        scheduler.load(tokenize("one two"))
        scheduler.play()

        assert scheduler.status is PlaybackStatus.PAUSED
        assert clock.pending_count == 0
