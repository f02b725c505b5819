"""Business logic services for the speed reader."""

from speedreader.services.playback import (
    AsyncioClock,
    ManualClock,
    PlaybackListener,
    PlaybackScheduler,
)
from speedreader.services.reader import SpeedReader
from speedreader.services.tokenizer import (
    ORPCalculator,
    TimingCalculator,
    normalize_article_text,
    tokenize,
)

__all__ = [
    # Reader facade
    "SpeedReader",
    # Playback
    "PlaybackScheduler",
    "PlaybackListener",
    "AsyncioClock",
    "ManualClock",
    # Tokenization
    "normalize_article_text",
    "tokenize",
    "ORPCalculator",
    "TimingCalculator",
]
