"""
Tests for the Text/Matrix Codec.
"""

import numpy as np
import pytest

from hillcipher.codec import matrix_to_text, text_to_matrix, translate_matrix
from hillcipher.errors import ProcessingError, SymbolNotInNamespace
from hillcipher.namespace import resolve_namespace


@pytest.fixture
def namespace():
    return resolve_namespace()


class TestTextToMatrix:
    """Text to matrix conversion."""

    def test_key_is_turned_into_matrix_representation(self, namespace):
        matrix = text_to_matrix("ABCDEFGHI", 3, 3, namespace)
        expected = np.array([[0, 3, 6],
                             [1, 4, 7],
                             [2, 5, 8]])
        assert np.array_equal(matrix, expected)

    def test_text_is_turned_into_matrix_representation(self, namespace):
        matrix = text_to_matrix("CODIGO", 2, 3, namespace)
        expected = np.array([[2, 8],
                             [14, 6],
                             [3, 14]])
        assert matrix.shape == (3, 2)
        assert np.array_equal(matrix, expected)

    def test_lower_case_text(self, namespace):
        assert np.array_equal(
            text_to_matrix("codigo", 2, 3, namespace),
            text_to_matrix("CODIGO", 2, 3, namespace),
        )

    def test_length_mismatch_raises(self, namespace):
        with pytest.raises(ProcessingError, match="cannot fill"):
            text_to_matrix("CODIG", 2, 3, namespace)

    def test_unknown_character_raises(self, namespace):
        with pytest.raises(SymbolNotInNamespace):
            text_to_matrix("COD1GO", 2, 3, namespace)

    def test_empty_text(self, namespace):
        matrix = text_to_matrix("", 0, 3, namespace)
        assert matrix.shape == (3, 0)


class TestMatrixToText:
    """Matrix to text rendering."""

    def test_matrix_is_read_column_by_column(self, namespace):
        matrix = np.array([[0, 1],
                           [2, 3]])
        assert matrix_to_text(matrix, namespace) == "ACBD"

    def test_values_are_reduced_into_namespace(self, namespace):
        matrix = np.array([[-1, 52],
                           [26, 308]])
        assert matrix_to_text(matrix, namespace) == "ZAAW"

    def test_text_matrix_text(self, namespace):
        matrix = text_to_matrix("CODIGO", 2, 3, namespace)
        assert matrix_to_text(matrix, namespace) == "CODIGO"


class TestTranslateMatrix:
    """Key x source multiplication and rendering."""

    def test_source_text_parts_are_turned_into_ciphertext(self, namespace):
        key = text_to_matrix("FJCRXLUDN", 3, 3, namespace)
        source = text_to_matrix("CODIGO", 2, 3, namespace)
        assert translate_matrix(key, source, namespace) == "WLPGSE"

    def test_identity_key_keeps_text(self, namespace):
        key = np.eye(2, dtype=np.int64)
        source = text_to_matrix("HILLCIPHER", 5, 2, namespace)
        assert translate_matrix(key, source, namespace) == "HILLCIPHER"

    def test_shape_mismatch_raises(self, namespace):
        key = np.eye(3, dtype=np.int64)
        source = text_to_matrix("ABCD", 2, 2, namespace)
        with pytest.raises(ProcessingError, match="blocks of length 2"):
            translate_matrix(key, source, namespace)
