"""
Shared text helpers for the tokenizer package.

These functions are used by the timing calculator to classify the
punctuation at the end of a word.
"""

import re
from typing import Set

from .constants import (
    ABBREVIATIONS,
    CLAUSE_PUNCTUATION,
    DOUBLE_HYPHEN,
    EM_DASH,
    PERIOD,
    SENTENCE_ENDERS,
)

# Single letter + period ("J.") or a dotted initialism ("U.S.", "e.g.")
_INITIALS_PATTERN = re.compile(r"^(?:\w\.)+$", re.UNICODE)


def ends_sentence(word: str) -> bool:
    """
    Check whether a word ends with ``!`` or ``?``.

    Examples:
        >>> ends_sentence("really?")
        True
        >>> ends_sentence("stop.")
        False
    """
    return bool(word) and word[-1] in SENTENCE_ENDERS


def is_abbreviation(word: str, abbreviations: Set[str] = ABBREVIATIONS) -> bool:
    """
    Check if a period-terminated word is an initial or known abbreviation.

    Args:
        word: The word to check (with its trailing period).
        abbreviations: Known abbreviations, lowercase, without the final period.

    Returns:
        True if the period should not be treated as a sentence end.

    Examples:
        >>> is_abbreviation("J.")
        True
        >>> is_abbreviation("U.S.")
        True
        >>> is_abbreviation("Dr.")
        True
        >>> is_abbreviation("stop.")
        False
    """
    if not word.endswith(PERIOD):
        return False

    if _INITIALS_PATTERN.match(word):
        return True

    return word[:-1].lower() in abbreviations


def ends_clause(word: str) -> bool:
    """
    Check for clause punctuation: a trailing ``,``/``;`` or an em dash / ``--`` anywhere.

    Examples:
        >>> ends_clause("fast,")
        True
        >>> ends_clause("well—maybe")
        True
        >>> ends_clause("fast")
        False
    """
    stripped = word.rstrip()
    if stripped and stripped[-1] in CLAUSE_PUNCTUATION:
        return True
    return EM_DASH in word or DOUBLE_HYPHEN in word
