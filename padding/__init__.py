"""
Padding Policy Package

This package fills a source text up to a whole number of key-sized blocks.
"""

from .fill_policy import pad_text, is_divisible, next_divisible

__all__ = ['pad_text', 'is_divisible', 'next_divisible']
