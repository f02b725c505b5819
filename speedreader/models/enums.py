"""Enums for the playback models."""

from enum import Enum


class TokenKind(str, Enum):
    """Kind of display token produced by the tokenizer."""

    WORD = "word"
    PARAGRAPH_BREAK = "paragraph_break"


class PlaybackStatus(str, Enum):
    """Lifecycle state of the playback scheduler.

    Transitions are driven only by PlaybackScheduler.
    """

    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    FINISHED = "finished"
