"""
Cipher Core Package

This package implements the cipher and decipher processes of the Hill
method and the Report they produce.
"""

from .hill_processor import HillProcessor, Report, cipher, decipher

__all__ = ['HillProcessor', 'Report', 'cipher', 'decipher']
