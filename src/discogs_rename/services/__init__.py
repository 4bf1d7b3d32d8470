"""
Service modules for Discogs Rename.
"""

from .parser import parse_release, parse_position, parse_title, flatten_tracklist, get_release_artist
from .selection import get_tracks_from_release, join_multi_part_tracks, is_release_multi_disc
from .formatter import format_name, format_track, format_track_artist, get_formatted_tracks
from .renamer import build_rename_plan, rename_files, parse_file_path
from .rename_service import RenameService, format_release, select_tracks

__all__ = [
    'parse_release',
    'parse_position',
    'parse_title',
    'flatten_tracklist',
    'get_release_artist',
    'get_tracks_from_release',
    'join_multi_part_tracks',
    'is_release_multi_disc',
    'format_name',
    'format_track',
    'format_track_artist',
    'get_formatted_tracks',
    'build_rename_plan',
    'rename_files',
    'parse_file_path',
    'RenameService',
    'format_release',
    'select_tracks',
]
