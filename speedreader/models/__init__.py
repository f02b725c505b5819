"""Data models for the speed reader."""

from speedreader.models.enums import PlaybackStatus, TokenKind
from speedreader.models.state import PlaybackState
from speedreader.models.token import PARAGRAPH_BREAK, ParagraphBreak, Token, Word

__all__ = [
    "Word",
    "ParagraphBreak",
    "PARAGRAPH_BREAK",
    "Token",
    "TokenKind",
    "PlaybackState",
    "PlaybackStatus",
]
