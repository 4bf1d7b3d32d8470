"""
Data models for Discogs Rename.
"""

from .releases import Artist, TrackEntry, Release, KIND_TRACK, KIND_INDEX, KIND_HEADING
from .tracks import Position, Title, Track, ParsedRelease
from .rename import RenameOptions, RenameOperation, RenamePlan

__all__ = [
    'Artist',
    'TrackEntry',
    'Release',
    'KIND_TRACK',
    'KIND_INDEX',
    'KIND_HEADING',
    'Position',
    'Title',
    'Track',
    'ParsedRelease',
    'RenameOptions',
    'RenameOperation',
    'RenamePlan',
]
