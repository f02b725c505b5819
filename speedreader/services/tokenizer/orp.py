"""ORP (Optimal Recognition Point) calculator for RSVP reading."""

from typing import Tuple


class ORPCalculator:
    """
    Calculate the Optimal Recognition Point for words.

    The ORP is the character the reader's eye is anchored on. The
    presentation layer positions each word so this character sits at
    the fixed visual center. The index depends only on the word length,
    roughly a third into the word and biased toward the start.
    """

    # Upper length bound (inclusive) -> ORP index (0-indexed)
    ORP_TABLE = (
        (1, 0),
        (5, 1),
        (9, 2),
    )
    LONG_WORD_ORP = 3

    def calculate(self, word: str) -> int:
        """
        Calculate the ORP index for a word.

        Args:
            word: The word as displayed (punctuation included).

        Returns:
            The 0-indexed position of the ORP character. Always in bounds
            for a non-empty word; 0 for an empty one.
        """
        length = len(word)

        for max_length, orp_index in self.ORP_TABLE:
            if length <= max_length:
                return orp_index

        return self.LONG_WORD_ORP

    def split_for_display(self, word: str) -> Tuple[str, str, str]:
        """
        Split a word into three parts for ORP display.

        Args:
            word: The word to split.

        Returns:
            Tuple of (before_orp, orp_char, after_orp).

        Example:
            >>> calc = ORPCalculator()
            >>> calc.split_for_display("reading")
            ('re', 'a', 'ding')
        """
        if not word:
            return ("", "", "")

        orp_index = self.calculate(word)
        return (word[:orp_index], word[orp_index], word[orp_index + 1:])


_default_calculator = ORPCalculator()


def orp(word: str) -> int:
    """Return the ORP index of ``word`` using the default table."""
    return _default_calculator.calculate(word)
