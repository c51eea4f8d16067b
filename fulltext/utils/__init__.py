"""
Utility module providing shared helper functions.

Contains text processing utilities used across the application.
Depends on nothing else in the package.
"""

from .text_utils import tokenize, TOKEN_SEPARATORS

__all__ = [
    "tokenize",
    "TOKEN_SEPARATORS"
]
