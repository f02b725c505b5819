"""Display tokens for RSVP reading."""

from dataclasses import dataclass
from typing import Union

from speedreader.models.enums import TokenKind


@dataclass(frozen=True)
class Word:
    """A single displayable word, punctuation attached.

    Attributes:
        text: The text shown to the reader. Never empty.
    """

    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Word text must be non-empty")

    @property
    def kind(self) -> TokenKind:
        return TokenKind.WORD


@dataclass(frozen=True)
class ParagraphBreak:
    """Structural break between paragraphs.

    Has no text of its own; playback holds it as a timed pause.
    """

    @property
    def kind(self) -> TokenKind:
        return TokenKind.PARAGRAPH_BREAK


PARAGRAPH_BREAK = ParagraphBreak()

Token = Union[Word, ParagraphBreak]
