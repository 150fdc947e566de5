"""
Command Line Interface Package

This package exposes the cipher and decipher processes as console
commands with colorized reports.
"""

from .console import main, build_parser, run

__all__ = ['main', 'build_parser', 'run']
