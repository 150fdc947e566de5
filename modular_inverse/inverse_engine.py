"""
Modular Inverse Engine

This module derives the matrix that undoes a Hill key modulo the namespace
size. Since inv(K) = adj(K) / det(K), the modular inverse of K is
adj(K) * det(K)^-1 (mod N). The adjugate is computed exactly from integer
cofactors; a floating point variant that rounds inv(K) * det(K) is kept
for comparison and rejects results that are not close to integers.
"""

import logging
import numpy as np
from Cryptodome.Util.number import inverse

from ..errors import InvalidKey
from ..key_validation.validator import integer_determinant
from ..namespace.alphabet import euclidean_mod

logger = logging.getLogger(__name__)

# Largest distance from an integer tolerated in a rounded adjugate
ADJUGATE_TOLERANCE = 1e-6


def modular_inverse(value: int, modulus: int) -> int:
    """
    Compute the modular multiplicative inverse of value.

    Args:
        value: The value to invert (may be negative)
        modulus: The modulus (namespace size)

    Returns:
        The unique m in [0, modulus) with value * m == 1 (mod modulus)

    Raises:
        InvalidKey: If value has no inverse modulo modulus
    """
    try:
        return inverse(euclidean_mod(value, modulus), modulus) % modulus
    except (ValueError, ZeroDivisionError) as e:
        raise InvalidKey(
            f"the value {value} has no modular multiplicative inverse mod {modulus}"
        ) from e


def adjugate(matrix) -> np.ndarray:
    """
    Compute the exact adjugate (transposed cofactor matrix) of a square matrix.

    Returns:
        An object-dtype array of Python ints
    """
    values = np.asarray(matrix, dtype=np.int64)
    n = values.shape[0]
    adj = np.empty((n, n), dtype=object)

    for i in range(n):
        for j in range(n):
            minor = np.delete(np.delete(values, i, axis=0), j, axis=1)
            adj[j, i] = (-1) ** (i + j) * integer_determinant(minor)

    return adj


def rounded_adjugate(matrix) -> np.ndarray:
    """
    Recover the adjugate from the real-valued inverse: round(inv(K) * det(K)).

    Raises:
        InvalidKey: If the matrix is singular or the scaled inverse is not
            integer valued within ADJUGATE_TOLERANCE
    """
    values = np.asarray(matrix, dtype=float)
    try:
        real_inverse = np.linalg.inv(values)
    except np.linalg.LinAlgError as e:
        raise InvalidKey("invalid or malformed key. the key matrix has no inverse") from e

    scaled = real_inverse * np.rint(np.linalg.det(values))
    rounded = np.rint(scaled)
    if not np.allclose(scaled, rounded, rtol=0.0, atol=ADJUGATE_TOLERANCE):
        raise InvalidKey(
            "the key matrix inverse cannot be computed precisely enough; "
            "use the exact inverse instead"
        )

    return rounded.astype(np.int64).astype(object)


def modular_inverse_matrix(matrix, modulus: int, exact: bool = True) -> np.ndarray:
    """
    Compute the inverse of a key matrix modulo the namespace size.

    Args:
        matrix: Square integer key matrix
        modulus: Namespace size
        exact: Use the exact integer adjugate (True) or the rounded
            floating point one (False)

    Returns:
        An int64 matrix with entries in [0, modulus)

    Raises:
        InvalidKey: If the determinant has no inverse modulo modulus
    """
    det = integer_determinant(matrix)
    det_inverse = modular_inverse(det, modulus)
    adj = adjugate(matrix) if exact else rounded_adjugate(matrix)

    logger.debug("Key determinant %d, inverse mod %d is %d", det, modulus, det_inverse)

    # Reduce on Python ints before narrowing to int64
    reduced = [[(int(v) * det_inverse) % modulus for v in row] for row in adj.tolist()]
    return np.array(reduced, dtype=np.int64).reshape(adj.shape)


if __name__ == "__main__":
    key = np.array([[5, 17, 20], [9, 23, 3], [2, 11, 13]])

    inv = modular_inverse_matrix(key, 26)
    print(f"Key:\n{key}")
    print(f"Inverse mod 26:\n{inv}")
    print(f"Product mod 26:\n{(key @ inv) % 26}")
    assert np.array_equal((key @ inv) % 26, np.eye(3, dtype=np.int64))

    assert np.array_equal(inv, modular_inverse_matrix(key, 26, exact=False))
    print("Exact and rounded inverses agree")
