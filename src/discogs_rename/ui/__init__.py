"""
User interface modules for Discogs Rename.
"""

from .cli import DiscogsRenameCLI
from .display import DisplayManager

__all__ = [
    'DiscogsRenameCLI',
    'DisplayManager',
]
