"""Playback state owned by a single scheduler instance."""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from speedreader.models.enums import PlaybackStatus
from speedreader.models.token import Token


@dataclass
class PlaybackState:
    """Mutable playback state.

    Attributes:
        tokens: Token sequence of the loaded article, replaced wholesale on load.
        index: Position of the current token. Kept within
               ``[0, len(tokens) - 1]`` whenever tokens is non-empty.
        rate: Presentation rate in words per minute.
        status: Current scheduler status.
    """

    rate: int
    tokens: tuple[Token, ...] = field(default_factory=tuple)
    index: int = 0
    status: PlaybackStatus = PlaybackStatus.IDLE

    @property
    def is_empty(self) -> bool:
        return not self.tokens

    @property
    def last_index(self) -> int:
        """Last valid index, or -1 when no tokens are loaded."""
        return len(self.tokens) - 1

    @property
    def current_token(self) -> Optional[Token]:
        if self.is_empty:
            return None
        return self.tokens[self.index]

    def reset(self, tokens: Sequence[Token]) -> None:
        """Replace tokens and index together; rate survives."""
        self.tokens = tuple(tokens)
        self.index = 0
        self.status = PlaybackStatus.IDLE

    def clamp_index(self, index: int) -> int:
        if self.is_empty:
            return 0
        return max(0, min(self.last_index, index))
