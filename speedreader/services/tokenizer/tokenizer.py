"""
Tokenization of normalized article text into RSVP display tokens.

The input is expected to come from the normalizer (or the extraction
layer): whitespace-collapsed text with paragraph breaks encoded as an
isolated pilcrow. Every whitespace-separated fragment becomes a Word,
except the pilcrow, which becomes a ParagraphBreak.

Example usage:
    >>> tokenize("Hello world ¶ foo")
    [Word(text='Hello'), Word(text='world'), ParagraphBreak(), Word(text='foo')]
"""

from typing import Iterable, List

from speedreader.models.token import PARAGRAPH_BREAK, ParagraphBreak, Token, Word

from .constants import PARAGRAPH_MARKER


def tokenize(text: str) -> List[Token]:
    """
    Split normalized text into display tokens.

    Splits on runs of whitespace and discards empty fragments, so no
    token ever carries empty text.

    Args:
        text: Normalized, paragraph-marked text.

    Returns:
        Ordered list of Word and ParagraphBreak tokens.
    """
    if not text:
        return []

    tokens: List[Token] = []
    for fragment in text.split():
        if fragment == PARAGRAPH_MARKER:
            tokens.append(PARAGRAPH_BREAK)
        else:
            tokens.append(Word(fragment))
    return tokens


def join_tokens(tokens: Iterable[Token]) -> str:
    """
    Join tokens back into normalized text.

    ``tokenize(join_tokens(tokens)) == tokens`` for any tokenizer output.
    """
    return " ".join(
        PARAGRAPH_MARKER if isinstance(token, ParagraphBreak) else token.text
        for token in tokens
    )


def count_words(tokens: Iterable[Token]) -> int:
    """Count Word tokens, ignoring paragraph breaks."""
    return sum(1 for token in tokens if isinstance(token, Word))
