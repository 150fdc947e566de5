"""
Key Validator

This module implements the checks a key must pass to be usable with a
namespace: square length, known characters, and a determinant that is
invertible modulo the namespace size.
"""

import math
import numpy as np
from typing import Optional
from Cryptodome.Util.number import GCD

from ..errors import InvalidKey, ProcessingError, SymbolNotInNamespace
from ..namespace.alphabet import Namespace, is_square


def block_dimension(key: str) -> int:
    """
    Get the block dimension d of a key, where len(key) == d * d.

    Raises:
        InvalidKey: If the key is empty or its length is not a perfect square
    """
    if not is_square(len(key)):
        raise InvalidKey("the supplied key must be square in length")
    if not key:
        raise InvalidKey("the supplied key must not be empty")
    return math.isqrt(len(key))


def check_fill_letter(fill_letter: Optional[str], namespace: Namespace) -> None:
    """Check that a fill letter, if given, is exactly one namespace symbol."""
    if fill_letter is None:
        return
    if len(fill_letter) != 1:
        raise ProcessingError(
            f"the fill letter must be a single character, got '{fill_letter}'"
        )
    if fill_letter not in namespace:
        raise SymbolNotInNamespace(fill_letter)


def check_information(key: str, source: str, fill_letter: Optional[str],
                      namespace: Namespace) -> int:
    """
    Check the validness of the user supplied information.

    The checks run in order: key length, fill letter, then every key and
    source character.

    Args:
        key: The key text
        source: The source text (plain or cipher)
        fill_letter: Optional fill letter
        namespace: The resolved namespace

    Returns:
        The key's block dimension

    Raises:
        ProcessingError: On the first violated rule
    """
    dimension = block_dimension(key)

    check_fill_letter(fill_letter, namespace)

    for target in (key, source):
        for c in target:
            if c not in namespace:
                raise SymbolNotInNamespace(c)

    return dimension


def integer_determinant(matrix) -> int:
    """
    Compute the exact determinant of an integer matrix.

    Uses fraction-free Bareiss elimination on Python integers, so the
    result never suffers from floating point rounding.

    Args:
        matrix: Square integer matrix (numpy array or nested lists)

    Returns:
        The determinant as a Python int (1 for an empty matrix)
    """
    rows = [[int(v) for v in row] for row in np.asarray(matrix).tolist()]
    n = len(rows)
    if n == 0:
        return 1

    sign = 1
    prev_pivot = 1
    for k in range(n - 1):
        if rows[k][k] == 0:
            # Swap with a later row holding a non-zero pivot
            swap = next((i for i in range(k + 1, n) if rows[i][k] != 0), None)
            if swap is None:
                return 0
            rows[k], rows[swap] = rows[swap], rows[k]
            sign = -sign

        pivot = rows[k][k]
        for i in range(k + 1, n):
            for j in range(k + 1, n):
                rows[i][j] = (rows[i][j] * pivot - rows[i][k] * rows[k][j]) // prev_pivot
        prev_pivot = pivot

    return sign * rows[n - 1][n - 1]


def check_key_determinant(det: int, modulus: int) -> None:
    """
    Check that a key matrix determinant is usable with a namespace size.

    Args:
        det: The key matrix determinant
        modulus: The namespace size

    Raises:
        InvalidKey: If det is 0 or shares a factor with the modulus
    """
    if det == 0:
        raise InvalidKey("the specified key cannot be used. [matrix's det is 0]")
    if GCD(abs(det), modulus) != 1:
        raise InvalidKey(
            f"the specified key cannot be used. [matrix's det {det} has "
            f"factors with {modulus}]"
        )
