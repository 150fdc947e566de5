"""
Namespace Package

This package implements the ordered alphabet the cipher works over,
mapping every symbol to its index and back.
"""

from .alphabet import (
    Namespace, DEFAULT_NAMESPACE, MIN_NAMESPACE_SIZE,
    resolve_namespace, euclidean_mod, normalize_text, is_square,
)

__all__ = [
    'Namespace', 'DEFAULT_NAMESPACE', 'MIN_NAMESPACE_SIZE',
    'resolve_namespace', 'euclidean_mod', 'normalize_text', 'is_square',
]
