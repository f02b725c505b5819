"""
Timing and delay calculations for RSVP reading.

This module provides the TimingCalculator class for computing how long a
token stays on screen at a given rate (words per minute). The base
duration is one minute divided by the rate; punctuation context picks a
single multiplier on top of it.

Delays are computed fresh on every call, never cached: the rate can
change between two evaluations for the same token.
"""

import math
from typing import Iterable, Set

from speedreader.models.token import ParagraphBreak, Token

from .constants import (
    ABBREVIATIONS,
    CLAUSE_MULTIPLIER,
    DEFAULT_MULTIPLIER,
    MAX_RATE,
    MIN_RATE,
    MS_PER_MINUTE,
    PARAGRAPH_BREAK_MULTIPLIER,
    PERIOD,
    RATE_STEP,
    SENTENCE_END_MULTIPLIER,
)
from .text_utils import ends_clause, ends_sentence, is_abbreviation


class TimingCalculator:
    """
    Calculate display delays for RSVP tokens.

    Rules, in priority order; the first match wins and multipliers never
    stack:

    1. Paragraph break: 3x
    2. Word ending in ``!`` or ``?``: 3x
    3. Word ending in ``.`` that is not an abbreviation or initial: 3x
    4. Word ending in ``,``/``;`` or containing an em dash or ``--``: 2x
    5. Anything else: 1x

    Example usage:
        >>> calc = TimingCalculator()
        >>> calc.calculate_multiplier(Word("hello"))
        1
        >>> calc.calculate_delay_ms(Word("stop."), 300)
        600.0
        >>> calc.calculate_delay_ms(Word("Dr."), 300)
        200.0
    """

    def __init__(self, abbreviations: Set[str] = ABBREVIATIONS) -> None:
        """
        Initialize the timing calculator.

        Args:
            abbreviations: Lowercase abbreviations (without the final period)
                           whose period does not count as a sentence end.
        """
        self._abbreviations = abbreviations

    def calculate_multiplier(self, token: Token) -> int:
        """Return the delay multiplier for a token."""
        if isinstance(token, ParagraphBreak):
            return PARAGRAPH_BREAK_MULTIPLIER

        word = token.text

        if ends_sentence(word):
            return SENTENCE_END_MULTIPLIER

        if word.endswith(PERIOD):
            if is_abbreviation(word, self._abbreviations):
                return DEFAULT_MULTIPLIER
            return SENTENCE_END_MULTIPLIER

        if ends_clause(word):
            return CLAUSE_MULTIPLIER

        return DEFAULT_MULTIPLIER

    def calculate_delay_ms(self, token: Token, rate: float) -> float:
        """
        Calculate how long a token is held on screen.

        Args:
            token: The token about to be displayed (or held, for breaks).
            rate: Presentation rate in words per minute. Out-of-range or
                  NaN rates are bounded to ``[MIN_RATE, MAX_RATE]``.

        Returns:
            Hold duration in milliseconds.
        """
        base = calculate_base_duration_ms(bound_rate(rate))
        return base * self.calculate_multiplier(token)

    def estimate_total_ms(self, tokens: Iterable[Token], rate: float) -> float:
        """Sum of the delays of ``tokens`` at ``rate`` (bounded like above)."""
        base = calculate_base_duration_ms(bound_rate(rate))
        return sum(base * self.calculate_multiplier(token) for token in tokens)


def calculate_base_duration_ms(wpm: int) -> float:
    """
    Calculate the base word display duration from WPM (words per minute).

    Args:
        wpm: Target reading speed in words per minute.

    Returns:
        Base duration in milliseconds for one word.

    Raises:
        ValueError: If wpm is not positive.

    Examples:
        >>> calculate_base_duration_ms(300)
        200.0
        >>> calculate_base_duration_ms(600)
        100.0
    """
    if wpm <= 0:
        raise ValueError(f"WPM must be positive, got {wpm}")

    return MS_PER_MINUTE / wpm


def bound_rate(wpm: float) -> float:
    """
    Bound a rate into ``[MIN_RATE, MAX_RATE]`` without snapping to the step grid.

    NaN maps to MIN_RATE.

    Examples:
        >>> bound_rate(0)
        50
        >>> bound_rate(333)
        333
    """
    if math.isnan(wpm):
        return MIN_RATE
    return max(MIN_RATE, min(MAX_RATE, wpm))


def clamp_rate(wpm: float) -> int:
    """
    Clamp a requested rate into ``[MIN_RATE, MAX_RATE]`` on the RATE_STEP grid.

    Values between two steps round half-up to the nearest step. NaN maps
    to MIN_RATE; infinities clamp to the nearest bound.

    Examples:
        >>> clamp_rate(20)
        50
        >>> clamp_rate(333)
        350
        >>> clamp_rate(10_000)
        1500
    """
    return int(math.floor(bound_rate(wpm) / RATE_STEP + 0.5)) * RATE_STEP


def estimate_reading_time_formatted(total_ms: float) -> str:
    """
    Format a reading duration for display.

    Args:
        total_ms: Duration in milliseconds.

    Returns:
        Formatted string like "5 min" or "1 hr 23 min".

    Examples:
        >>> estimate_reading_time_formatted(360_000)
        '6 min'
        >>> estimate_reading_time_formatted(4_140_000)
        '1 hr 9 min'
    """
    total_minutes = int(total_ms / 1000 / 60)

    if total_minutes < 60:
        return f"{max(1, total_minutes)} min"

    hours = total_minutes // 60
    minutes = total_minutes % 60

    if minutes == 0:
        return f"{hours} hr"

    return f"{hours} hr {minutes} min"
