"""Speed reader facade: loads articles and exposes the playback controls."""

import logging
from typing import Optional

from speedreader.models.enums import PlaybackStatus
from speedreader.schemas.article import ArticleRecord, ArticleStats
from speedreader.services.playback.clock import Clock
from speedreader.services.playback.controls import KeyControls
from speedreader.services.playback.listener import PlaybackListener
from speedreader.services.playback.scheduler import PlaybackScheduler
from speedreader.services.tokenizer.timing import (
    TimingCalculator,
    estimate_reading_time_formatted,
)
from speedreader.services.tokenizer.tokenizer import count_words, tokenize

logger = logging.getLogger(__name__)


class SpeedReader:
    """
    One reading surface: an article plus its playback scheduler.

    The rate survives loading a new article; everything else is reset.

    Example usage:
        >>> reader = SpeedReader(ManualClock(), rate=300)
        >>> reader.load_article(ArticleRecord(title="Demo", text="Hello world. ¶ Bye."))
        >>> reader.word_counter
        '1 / 4'
    """

    def __init__(
        self,
        clock: Clock,
        listener: Optional[PlaybackListener] = None,
        *,
        rate: Optional[int] = None,
        timing: Optional[TimingCalculator] = None,
    ) -> None:
        self._timing = timing or TimingCalculator()
        self.scheduler = PlaybackScheduler(clock, listener, rate=rate, timing=self._timing)
        self.keys = KeyControls(self.scheduler)
        self.title = ""

    def load_article(self, article: ArticleRecord) -> None:
        """Tokenize an extracted article and reset playback to its start."""
        tokens = tokenize(article.text)
        self.title = article.title
        self.scheduler.load(tokens)
        logger.info("Loaded article %r (%d tokens)", article.title, len(tokens))

    def load_text(self, title: str, text: str) -> None:
        self.load_article(ArticleRecord(title=title, text=text))

    # Controls

    def play(self) -> None:
        self.scheduler.play()

    def pause(self) -> None:
        self.scheduler.pause()

    def toggle(self) -> None:
        self.scheduler.toggle()

    def increase_rate(self) -> None:
        self.scheduler.increase_rate()

    def decrease_rate(self) -> None:
        self.scheduler.decrease_rate()

    def seek_fraction(self, fraction: float) -> None:
        self.scheduler.seek_fraction(fraction)

    def handle_key(self, code: str) -> bool:
        return self.keys.handle_key(code)

    # Views

    @property
    def status(self) -> PlaybackStatus:
        return self.scheduler.status

    @property
    def rate(self) -> int:
        return self.scheduler.rate

    @property
    def play_label(self) -> str:
        """Label for the play/pause button."""
        return "Pause" if self.scheduler.is_playing else "Start"

    @property
    def word_counter(self) -> str:
        """1-based position label, e.g. ``"12 / 340"``; empty when nothing is loaded."""
        total = len(self.scheduler.tokens)
        if total == 0:
            return ""
        return f"{self.scheduler.index + 1} / {total}"

    def remaining_ms(self) -> float:
        """Exact time left after the current token at the current rate."""
        upcoming = self.scheduler.tokens[self.scheduler.index + 1:]
        return self._timing.estimate_total_ms(upcoming, self.scheduler.rate)

    def stats(self) -> ArticleStats:
        tokens = self.scheduler.tokens
        total_ms = self._timing.estimate_total_ms(tokens, self.scheduler.rate)
        return ArticleStats(
            title=self.title,
            word_count=count_words(tokens),
            token_count=len(tokens),
            estimated_ms=total_ms,
            estimated_formatted=estimate_reading_time_formatted(total_ms),
        )
