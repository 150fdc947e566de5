"""
Namespace (Alphabet) Implementation

This module implements the ordered, duplicate-free set of symbols used by
the cipher and decipher processes. A symbol's position inside the namespace
is its numeric value; the namespace size is the modulus of every matrix
operation.
"""

import math
import numpy as np
from typing import Dict, Iterator, Optional, Tuple, Union

from ..errors import InvalidNamespace, SymbolNotInNamespace

# Default namespace, replaced entirely when a custom one is supplied
DEFAULT_NAMESPACE: Tuple[str, ...] = tuple('ABCDEFGHIJKLMNOPQRSTUVWXYZ')

# Smallest alphabet a custom namespace may have
MIN_NAMESPACE_SIZE = 2


def is_square(num: int) -> bool:
    """
    Check whether a non-negative number is a perfect square.

    Args:
        num: The number to check (0 and 1 are squares)

    Returns:
        True if num == k * k for some integer k
    """
    if num < 0:
        return False
    root = math.isqrt(num)
    return root * root == num


def _fold_symbol(c: str) -> str:
    """Upper-case one character, or keep it when the mapping is not reversible."""
    upper = c.upper()
    if len(upper) == 1 and upper.lower() == c.lower():
        return upper
    return c


def normalize_text(text: str) -> str:
    """
    Upper-case a text one character at a time.

    A character is only replaced by its upper-case form when that form is
    a single character that lower-cases back to the original one. Sharp s,
    dotless i or long s are kept as they are, so they never turn into a
    different namespace symbol and the text length never changes.
    """
    return ''.join(_fold_symbol(c) for c in text)


def euclidean_mod(value: Union[int, np.ndarray], modulus: int) -> Union[int, np.ndarray]:
    """
    Modulus that always lands in [0, modulus), whatever the sign of value.

    Args:
        value: An integer or an integer numpy array
        modulus: A positive modulus

    Returns:
        The reduced value (same type as the input)
    """
    if modulus <= 0:
        raise ValueError("Modulus must be positive")
    if isinstance(value, np.ndarray):
        return np.mod(value, modulus)
    return int(value) % modulus


class Namespace:
    """
    Ordered alphabet mapping symbols to indices 0..N-1.

    Instances are immutable; lookups are case-insensitive because every
    symbol is stored upper-cased.
    """

    __slots__ = ('_symbols', '_positions', '_custom')

    def __init__(self, symbols, custom: Optional[str] = None):
        """
        Build a namespace from an iterable of single-character symbols.

        Args:
            symbols: The ordered symbols (already validated)
            custom: The raw custom namespace string, or None for the default
        """
        self._symbols: Tuple[str, ...] = tuple(symbols)
        self._positions: Dict[str, int] = {s: i for i, s in enumerate(self._symbols)}
        self._custom = custom

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        if not isinstance(symbol, str) or len(symbol) != 1:
            return False
        return normalize_text(symbol) in self._positions

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Namespace):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        return f"Namespace({''.join(self._symbols)!r})"

    @property
    def symbols(self) -> Tuple[str, ...]:
        return self._symbols

    @property
    def custom(self) -> Optional[str]:
        """The user supplied namespace string, None for the default one."""
        return self._custom

    @property
    def is_default(self) -> bool:
        return self._custom is None

    def index_of(self, symbol: str) -> int:
        """
        Get the position of a symbol inside the namespace.

        Args:
            symbol: A single character, compared case-insensitively

        Returns:
            The symbol's index

        Raises:
            SymbolNotInNamespace: If the symbol is not part of the namespace
        """
        try:
            return self._positions[normalize_text(symbol)]
        except KeyError:
            raise SymbolNotInNamespace(symbol) from None

    def symbol_at(self, index: int) -> str:
        """Get the symbol for an index, reduced with the Euclidean modulus."""
        return self._symbols[euclidean_mod(int(index), len(self._symbols))]


def check_namespace(namespace: str) -> None:
    """
    Check that a custom namespace is well formed.

    Raises:
        InvalidNamespace: On duplicated symbols, too few symbols or a
            length that is not a perfect square
    """
    normalized = normalize_text(namespace)
    if len(set(normalized)) != len(normalized):
        raise InvalidNamespace("the supplied namespace has duplicated characters")

    if len(normalized) < MIN_NAMESPACE_SIZE:
        raise InvalidNamespace(
            f"the supplied namespace must have at least {MIN_NAMESPACE_SIZE} characters"
        )

    if not is_square(len(normalized)):
        raise InvalidNamespace("the supplied namespace must be square in length")


def resolve_namespace(custom: Optional[str] = None) -> Namespace:
    """
    Define which namespace to use: the user supplied one or the default one.

    Args:
        custom: Optional custom namespace string

    Returns:
        The resolved Namespace

    Raises:
        InvalidNamespace: If the custom namespace is malformed
    """
    if custom is None:
        return Namespace(DEFAULT_NAMESPACE)

    check_namespace(custom)
    return Namespace(normalize_text(custom), custom=custom)


if __name__ == "__main__":
    ns = resolve_namespace()
    print(f"Default namespace: {''.join(ns)} ({len(ns)} symbols)")
    print(f"Index of 'h': {ns.index_of('h')}")
    print(f"Symbol at -1: {ns.symbol_at(-1)}")

    custom = resolve_namespace("ABCDEFGHIJKLMNOPQRSTUVWXYZ @$^&*/?.-")
    print(f"Custom namespace size: {len(custom)}")

    try:
        resolve_namespace("ABCA")
    except InvalidNamespace as e:
        print(f"Correctly rejected namespace: {e}")
