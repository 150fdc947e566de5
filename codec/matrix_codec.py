"""
Text/Matrix Codec

This module turns a text into the matrix representation used by the Hill
method and back. Consecutive characters fill successive columns, so each
column of a matrix is one block of the text.
"""

import numpy as np

from ..errors import ProcessingError
from ..namespace.alphabet import Namespace, euclidean_mod


def text_to_matrix(text: str, rows: int, cols: int, namespace: Namespace) -> np.ndarray:
    """
    Split a text into its namespace indices and store them in a matrix.

    The indices are laid out row-major in a rows x cols matrix which is then
    transposed, giving a cols x rows matrix whose columns are the blocks.

    Args:
        text: The text to convert
        rows: Number of rows before the transposition
        cols: Number of columns before the transposition
        namespace: Namespace giving each character its value

    Returns:
        An int64 matrix of shape (cols, rows)

    Raises:
        ProcessingError: If the text does not have exactly rows * cols characters
        SymbolNotInNamespace: If a character is not in the namespace
    """
    if len(text) != rows * cols:
        raise ProcessingError(
            f"a text of length {len(text)} cannot fill a {rows}x{cols} matrix"
        )

    parts = np.fromiter(
        (namespace.index_of(c) for c in text),
        dtype=np.int64,
        count=len(text),
    )
    return parts.reshape(rows, cols).T


def matrix_to_text(matrix: np.ndarray, namespace: Namespace) -> str:
    """
    Render a matrix of values as text, reading it column by column.

    Every value is reduced into the namespace with the Euclidean modulus.
    """
    values = euclidean_mod(np.asarray(matrix, dtype=np.int64), len(namespace))
    # column-major read is a row-major read of the transpose
    return ''.join(namespace.symbols[v] for v in values.T.ravel())


def translate_matrix(key_matrix: np.ndarray, source_matrix: np.ndarray,
                     namespace: Namespace) -> str:
    """
    Multiply a source matrix by a key matrix and render the product as text.

    Args:
        key_matrix: Square d x d key (or inverse key) matrix
        source_matrix: d x m matrix of text blocks
        namespace: Namespace used for the rendering

    Returns:
        The transformed text
    """
    key = np.asarray(key_matrix, dtype=np.int64)
    source = np.asarray(source_matrix, dtype=np.int64)
    if key.shape[1] != source.shape[0]:
        raise ProcessingError(
            f"a {key.shape[0]}x{key.shape[1]} key cannot transform blocks of "
            f"length {source.shape[0]}"
        )
    return matrix_to_text(key @ source, namespace)
