"""Presentation-layer callbacks emitted by the playback scheduler."""

from speedreader.models.enums import PlaybackStatus


class PlaybackListener:
    """
    Receives display updates from a PlaybackScheduler.

    Every method is a no-op by default; a rendering layer overrides the
    ones it needs.
    """

    def on_word_changed(self, before: str, focus: str, after: str) -> None:
        """The displayed word changed; parts are split at the ORP index."""

    def on_progress(self, fraction: float) -> None:
        """Reading position changed; ``fraction`` is in ``[0.0, 1.0]``."""

    def on_rate_changed(self, rate: int) -> None:
        """Presentation rate changed (words per minute)."""

    def on_status_changed(self, status: PlaybackStatus) -> None:
        """Scheduler status changed."""
