"""
Hill Cipher Processor

This module provides the cipher and decipher processes of the Hill method.
A processor resolves the namespace, validates the supplied information,
pads the source text when ciphering, builds the key and source matrices,
multiplies them and renders the result into a Report.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..codec.matrix_codec import text_to_matrix, translate_matrix
from ..errors import InvalidKey, MalformedCiphertext
from ..key_validation.validator import (
    check_information, check_key_determinant, integer_determinant,
)
from ..modular_inverse.inverse_engine import modular_inverse_matrix
from ..namespace.alphabet import Namespace, normalize_text, resolve_namespace
from ..padding.fill_policy import pad_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Report:
    """Result of a cipher or decipher process."""
    used_key: str
    source_txt: str
    fill_letter: Optional[str]
    result_txt: str
    filled: bool
    def_namespace: Optional[str]


class HillProcessor:
    """
    Cipher and decipher processor based on the Hill method.

    The processor holds the user supplied information; every call to
    cipher() or decipher() runs the whole process from scratch and
    either returns a Report or raises a ProcessingError.
    """

    def __init__(self,
                 key: str,
                 source: str,
                 fill_letter: Optional[str] = None,
                 namespace: Optional[str] = None,
                 exact_inverse: bool = True):
        """
        Initialize the processor with the information to process.

        Args:
            key: Key text, its length must be a perfect square
            source: Plain text to cipher or cipher text to decipher
            fill_letter: Letter used to fill the source text (required for
                cipher when the source needs padding)
            namespace: Optional custom namespace (default: A-Z)
            exact_inverse: Compute the decipher matrix from the exact integer
                adjugate instead of the rounded floating point inverse
        """
        self.key = key
        self.source = source
        self.fill_letter = fill_letter
        self.namespace = namespace
        self.exact_inverse = exact_inverse

    def _prepare(self):
        """Resolve the namespace and validate the supplied information."""
        namespace = resolve_namespace(self.namespace)
        dimension = check_information(self.key, self.source, self.fill_letter, namespace)

        logger.debug(
            "Using %s namespace of %d symbols, block dimension %d",
            "default" if namespace.is_default else "custom", len(namespace), dimension,
        )
        return namespace, dimension

    def _key_matrix(self, dimension: int, namespace: Namespace):
        return text_to_matrix(normalize_text(self.key), dimension, dimension, namespace)

    def cipher(self) -> Report:
        """
        Cipher the source text with the key, filling it if needed.

        Returns:
            The process Report

        Raises:
            ProcessingError: If the namespace, key, source or fill letter
                are not valid
        """
        namespace, dimension = self._prepare()

        key_matrix = self._key_matrix(dimension, namespace)
        check_key_determinant(integer_determinant(key_matrix), len(namespace))

        source, was_filled = pad_text(self.source, self.fill_letter, dimension)
        if was_filled:
            logger.debug("Source text filled from %d to %d characters",
                         len(self.source), len(source))

        source_matrix = text_to_matrix(source, len(source) // dimension, dimension, namespace)
        ciphered = translate_matrix(key_matrix, source_matrix, namespace)

        return self._build_report(ciphered, was_filled)

    def decipher(self) -> Report:
        """
        Decipher the source text with the key.

        The fill letter is only checked against the namespace; trailing fill
        letters added by the cipher process are kept in the result.

        Returns:
            The process Report

        Raises:
            ProcessingError: If the information is not valid, the key has no
                inverse modulo the namespace size, or the cipher text does not
                split into whole blocks
        """
        namespace, dimension = self._prepare()

        key_matrix = self._key_matrix(dimension, namespace)
        det = integer_determinant(key_matrix)
        if det == 0:
            raise InvalidKey("invalid or malformed key. the key matrix has no inverse")
        check_key_determinant(det, len(namespace))

        inverse = modular_inverse_matrix(key_matrix, len(namespace), exact=self.exact_inverse)

        if len(self.source) % dimension != 0:
            raise MalformedCiphertext(
                f"the cipher text length {len(self.source)} is not a multiple "
                f"of the key dimension {dimension}"
            )

        source = normalize_text(self.source)
        source_matrix = text_to_matrix(source, len(source) // dimension, dimension, namespace)
        deciphered = translate_matrix(inverse, source_matrix, namespace)

        return self._build_report(deciphered, False)

    def _build_report(self, result_txt: str, filled: bool) -> Report:
        """Build the final Report holding the result of a process."""
        return Report(
            used_key=self.key,
            source_txt=self.source,
            fill_letter=self.fill_letter,
            result_txt=result_txt,
            filled=filled,
            def_namespace=self.namespace,
        )


def cipher(key: str, source: str, fill_letter: Optional[str] = None,
           namespace: Optional[str] = None) -> Report:
    """
    Convenience function to cipher a text.

    Args:
        key: The key text
        source: The plain text
        fill_letter: Letter used to fill the source text
        namespace: Optional custom namespace

    Returns:
        The cipher Report
    """
    return HillProcessor(key, source, fill_letter, namespace).cipher()


def decipher(key: str, source: str, fill_letter: Optional[str] = None,
             namespace: Optional[str] = None) -> Report:
    """
    Convenience function to decipher a text.

    Args:
        key: The key text
        source: The cipher text
        fill_letter: Known fill letter (only validated)
        namespace: Optional custom namespace

    Returns:
        The decipher Report
    """
    return HillProcessor(key, source, fill_letter, namespace).decipher()


if __name__ == "__main__":
    report = cipher("FJCRXLUDN", "CODIGO", "H")
    print(f"Ciphered: {report.result_txt} (filled: {report.filled})")
    assert report.result_txt == "WLPGSE"

    report = decipher("FJCRXLUDN", report.result_txt, "H")
    print(f"Deciphered: {report.result_txt}")
    assert report.result_txt == "CODIGO"

    ns = "ABCDEFGHIJKLMNOPQRSTUVWXYZ @$^&*/?.-"
    report = cipher("AFJCRXLUDNLZ@$^?", "TEST CODIGO", "H", ns)
    print(f"Ciphered with custom namespace: {report.result_txt}")
    print(f"Deciphered: {decipher('AFJCRXLUDNLZ@$^?', report.result_txt, 'H', ns).result_txt}")
