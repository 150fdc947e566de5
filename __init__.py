"""
HillCipher - Hill Method Cipher Library

This library implements the Hill cipher: a polygraphic substitution
cipher that treats text as vectors over a finite alphabet (namespace)
and multiplies them by an invertible square key matrix modulo the
alphabet size.

Key Features:
- Default A-Z namespace or any square-length custom namespace
- Square keys of any dimension
- Exact integer determinant and modular inverse computation
- Automatic filling of the source text to whole blocks
- Command line interface with colorized reports

"""

__version__ = '0.1.0'
__author__ = 'HillCipher Team'
