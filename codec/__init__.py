"""
Text/Matrix Codec Package

This package converts texts into integer matrices of namespace indices
and renders matrices back into text.
"""

from .matrix_codec import text_to_matrix, matrix_to_text, translate_matrix

__all__ = ['text_to_matrix', 'matrix_to_text', 'translate_matrix']
