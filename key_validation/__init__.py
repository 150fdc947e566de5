"""
Key Validation Package

This package checks the structural and number-theoretic validity of a
key, a source text and a fill letter before any matrix work is done.
"""

from .validator import (
    block_dimension, check_information, check_fill_letter,
    check_key_determinant, integer_determinant,
)

__all__ = [
    'block_dimension', 'check_information', 'check_fill_letter',
    'check_key_determinant', 'integer_determinant',
]
