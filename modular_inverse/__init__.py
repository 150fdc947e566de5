"""
Modular Inverse Package

This package computes modular multiplicative inverses and the modular
inverse of a key matrix used by the decipher process.
"""

from .inverse_engine import (
    modular_inverse, adjugate, rounded_adjugate, modular_inverse_matrix,
    ADJUGATE_TOLERANCE,
)

__all__ = [
    'modular_inverse', 'adjugate', 'rounded_adjugate', 'modular_inverse_matrix',
    'ADJUGATE_TOLERANCE',
]
