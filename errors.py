"""
Error Types

This module defines the exceptions raised by the cipher and decipher
processes. Every failure is a ProcessingError carrying a human-readable
message; the subclasses only narrow down which rule was violated.
"""


class ProcessingError(ValueError):
    """Base error for every cipher/decipher failure."""


class InvalidNamespace(ProcessingError):
    """The custom namespace is malformed."""


class SymbolNotInNamespace(ProcessingError):
    """A key, source or fill character is not part of the namespace."""

    def __init__(self, symbol: str):
        super().__init__(f"the character '{symbol}' is not present in the namespace")
        self.symbol = symbol


class InvalidKey(ProcessingError):
    """The key cannot be used to cipher or decipher with the namespace."""


class MalformedCiphertext(ProcessingError):
    """The ciphertext does not split into whole key-sized blocks."""
