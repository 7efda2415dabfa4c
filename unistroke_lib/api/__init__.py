"""Public recognizer API.

The module exports:
    Recognizer: Owns the captured stroke and matches it against a
        reference set.
"""

from .recognizer import Recognizer

__all__ = ['Recognizer']
