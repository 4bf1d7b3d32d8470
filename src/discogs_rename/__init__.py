"""
Discogs Rename - rename music files based on track listings from Discogs.
"""

from .core.config import PROJECT_VERSION

__version__ = PROJECT_VERSION
