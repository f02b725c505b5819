"""Shared pytest fixtures and test helpers."""

import pytest

from speedreader.config import get_settings
from speedreader.models.enums import PlaybackStatus
from speedreader.services.playback.clock import ManualClock
from speedreader.services.playback.listener import PlaybackListener
from speedreader.services.playback.scheduler import PlaybackScheduler
from speedreader.services.tokenizer.tokenizer import tokenize


class RecordingListener(PlaybackListener):
    """Listener that records every callback in order."""

    def __init__(self):
        self.events = []
        self.last_parts = None

    def on_word_changed(self, before, focus, after):
        self.events.append(("word", before + focus + after))
        self.last_parts = (before, focus, after)

    def on_progress(self, fraction):
        self.events.append(("progress", fraction))

    def on_rate_changed(self, rate):
        self.events.append(("rate", rate))

    def on_status_changed(self, status):
        self.events.append(("status", status))

    def of(self, kind):
        return [value for event_kind, value in self.events if event_kind == kind]

    @property
    def words(self):
        return self.of("word")

    @property
    def statuses(self):
        return self.of("status")

    def clear(self):
        self.events.clear()


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached; drop the cache so env changes in a test apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def make_scheduler(clock, listener):
    """Factory for a scheduler at 300 WPM (200 ms base) loaded with ``text``.

    Usage:
        def test_example(make_scheduler):
            scheduler = make_scheduler("Hello world.")
    """

    def _make(text="", rate=300):
        scheduler = PlaybackScheduler(clock, listener, rate=rate)
        scheduler.load(tokenize(text))
        listener.clear()
        return scheduler

    return _make


@pytest.fixture
def drain(clock):
    """Fire timers until playback stops; returns the number of ticks."""

    def _drain(scheduler, limit=10_000):
        ticks = 0
        while scheduler.status is PlaybackStatus.PLAYING and ticks < limit:
            assert clock.fire_next()
            ticks += 1
        return ticks

    return _drain
