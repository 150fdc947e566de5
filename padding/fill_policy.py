"""
Padding Policy

This module computes how many fill letters a source text needs so its
length becomes a multiple of the key's block dimension. Padding is only
applied when ciphering; a ciphertext is expected to be already aligned.
"""

from typing import Optional, Tuple

from ..errors import ProcessingError
from ..namespace.alphabet import normalize_text


def is_divisible(length: int, dimension: int) -> bool:
    """Check if a length is divisible by the block dimension."""
    return length % dimension == 0


def next_divisible(length: int, dimension: int) -> int:
    """
    Get the smallest value >= length that is divisible by dimension.

    Args:
        length: Current text length
        dimension: Block dimension (must be positive)

    Returns:
        The padded length
    """
    if dimension <= 0:
        raise ValueError("Dimension must be positive")
    return -(-length // dimension) * dimension


def pad_text(text: str, fill: Optional[str], dimension: int) -> Tuple[str, bool]:
    """
    Fill a text with a letter until its length is divisible by dimension.

    Args:
        text: The source text
        fill: The fill letter; may be None only if no padding is needed
        dimension: Block dimension of the key

    Returns:
        A tuple of (upper-cased, possibly padded text, whether it was padded)

    Raises:
        ProcessingError: If padding is needed but no fill letter was given
    """
    if is_divisible(len(text), dimension):
        return normalize_text(text), False

    if not fill:
        raise ProcessingError(
            f"a fill letter is required: the source text length {len(text)} "
            f"is not divisible by {dimension}"
        )

    reps = next_divisible(len(text), dimension) - len(text)
    return normalize_text(text + fill * reps), True
