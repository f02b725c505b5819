"""
Tokenizer package for RSVP text processing.

This package contains modules for turning article text into paced
display tokens:
- normalizer: Raw text -> whitespace-collapsed, paragraph-marked text
- tokenizer: Normalized text -> Word / ParagraphBreak tokens
- orp: Optimal Recognition Point for each displayed word
- timing: Punctuation-aware hold durations at a given rate
- constants: Paragraph marker, rate bounds, multipliers, abbreviations

Primary usage:
    >>> from speedreader.services.tokenizer import tokenize, TimingCalculator
    >>> tokens = tokenize("Hello world. ¶ Next paragraph")
    >>> TimingCalculator().calculate_delay_ms(tokens[1], 300)
    600.0
"""

from .constants import (
    ABBREVIATIONS,
    CLAUSE_MULTIPLIER,
    DEFAULT_MULTIPLIER,
    MAX_RATE,
    MIN_RATE,
    PARAGRAPH_BREAK_MULTIPLIER,
    PARAGRAPH_MARKER,
    RATE_STEP,
    SENTENCE_END_MULTIPLIER,
)
from .normalizer import normalize_article_text
from .orp import ORPCalculator, orp
from .timing import (
    TimingCalculator,
    bound_rate,
    calculate_base_duration_ms,
    clamp_rate,
    estimate_reading_time_formatted,
)
from .tokenizer import count_words, join_tokens, tokenize

__all__ = [
    # Tokenization
    "normalize_article_text",
    "tokenize",
    "join_tokens",
    "count_words",
    # ORP
    "ORPCalculator",
    "orp",
    # Timing
    "TimingCalculator",
    "calculate_base_duration_ms",
    "bound_rate",
    "clamp_rate",
    "estimate_reading_time_formatted",
    # Constants
    "PARAGRAPH_MARKER",
    "MIN_RATE",
    "MAX_RATE",
    "RATE_STEP",
    "PARAGRAPH_BREAK_MULTIPLIER",
    "SENTENCE_END_MULTIPLIER",
    "CLAUSE_MULTIPLIER",
    "DEFAULT_MULTIPLIER",
    "ABBREVIATIONS",
]
