"""
Utility modules for Discogs Rename.
"""

from .string_utils import to_title_case, ALWAYS_LOWERCASE_WORDS
from .retry import retry_with_backoff, RetryError

__all__ = [
    'to_title_case',
    'ALWAYS_LOWERCASE_WORDS',
    'retry_with_backoff',
    'RetryError',
]
