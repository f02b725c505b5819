"""
Progress/seek mapping between token indices and normalized positions.

Both directions are pure and stateless. ``fraction_to_index`` rounds
half-up, so the two functions are exact inverses for every valid index.
"""

import math


def fraction_to_index(fraction: float, token_count: int) -> int:
    """
    Map a position in ``[0.0, 1.0]`` to a token index.

    Args:
        fraction: Normalized position. Out-of-range values clamp; NaN is 0.
        token_count: Number of tokens in the sequence.

    Returns:
        Index in ``[0, token_count - 1]``, or 0 for an empty sequence.

    Examples:
        >>> fraction_to_index(0.5, 11)
        5
        >>> fraction_to_index(1.7, 11)
        10
    """
    if token_count <= 1:
        return 0

    if math.isnan(fraction):
        fraction = 0.0
    fraction = max(0.0, min(1.0, fraction))

    last = token_count - 1
    index = int(math.floor(fraction * last + 0.5))
    return max(0, min(last, index))


def index_to_fraction(index: int, token_count: int) -> float:
    """
    Map a token index to a position in ``[0.0, 1.0]``.

    Returns 0.0 when there is at most one token.

    Examples:
        >>> index_to_fraction(5, 11)
        0.5
    """
    if token_count <= 1:
        return 0.0

    last = token_count - 1
    index = max(0, min(last, index))
    return index / last
