"""
Track Name Formatter Module
Builds filesystem-safe file names from parsed tracks.
"""

import re
from typing import List, Optional, Sequence

from unidecode import unidecode

from ..core.config import RENAME_CONFIG
from ..models.releases import Artist
from ..models.tracks import Position, Title, Track
from ..utils.string_utils import capitalize_word, to_title_case

# Trailing Discogs artist disambiguation number, e.g. "Prophet (2)"
ARTIST_NUMBER_REGEX = re.compile(r" \([0-9]+\)$")

JOIN_WORDS = {
    "v.": "vs",
    "v": "vs",
    "presents": "pres",
    "featuring": "feat",
}


def format_name(name: Optional[str]) -> str:
    """
    Format an artist or title name as a filename token.
    
    Args:
        name: The name to format
        
    Returns:
        The formatted name, e.g. "Bjork & Friends" -> "Bjork_and_Friends"
    """
    if not name:
        return ""
    
    formatted = to_title_case(unidecode(name))
    formatted = re.sub(r" [&+] ", " and ", formatted)
    formatted = re.sub(r"[&+]", " and ", formatted)
    formatted = capitalize_word(formatted)
    formatted = re.sub(r" A ", " a ", formatted)
    formatted = re.sub(r'([0-9]+)"', r"\1in", formatted, count=1)
    formatted = re.sub(r"['.]", "", formatted)
    formatted = re.sub(r"[^0-9A-Za-z ]", " ", formatted)
    formatted = re.sub(r"\s+", " ", formatted).strip()
    return formatted.replace(" ", "_")


def normalize_join(join: str) -> str:
    """Standardize an artist join word ("Featuring" -> "feat", "V." -> "vs")."""
    join = join.lower()
    return JOIN_WORDS.get(join, join)


def format_track_artist(release_artist: str, artists: Optional[Sequence[Artist]] = None) -> str:
    """
    Get the track artist filename component.
    
    Falls back to the release artist when the track has no artist credits.
    Otherwise the credit chain is followed from the first artist for as
    long as each credit has a join word.
    
    Args:
        release_artist: The artist for the whole release
        artists: The track artist credits
        
    Returns:
        The formatted artist
    """
    if not artists:
        return format_name(release_artist)
    
    parts = []
    for artist in artists:
        parts.append(ARTIST_NUMBER_REGEX.sub("", artist.display_name))
        
        if not artist.join:
            break
        parts.append(normalize_join(artist.join))
    
    return format_name(" ".join(parts))


def format_track_position(position: Position) -> str:
    """Get the zero-padded track number filename component."""
    return (position.track or "").rjust(RENAME_CONFIG["POSITION_WIDTH"], "0")


def format_track_title(title: Title) -> str:
    """Get the title filename component, keeping only the innermost subtitle."""
    if title.subtitles:
        return f"{format_name(title.name)}-{format_name(title.subtitles[-1])}"
    return format_name(title.name)


def format_track(release_artist: str, track: Track, mix: bool = False) -> str:
    """
    Get the track formatted as a filename (without extension).
    
    Args:
        release_artist: The primary artist for the release
        track: The track to format
        mix: Whether the track artist should be included (multi-artist mix)
        
    Returns:
        The formatted track, e.g. "03-Main_Event-Club_Mix"
    """
    position = format_track_position(track.position)
    title = format_track_title(track.title)
    
    if mix:
        return f"{position}-{format_track_artist(release_artist, track.artists)}-{title}"
    return f"{position}-{title}"


def get_formatted_tracks(release_artist: str, tracks: Sequence[Track], mix: bool = False) -> List[str]:
    """Format every track as a filename, preserving order."""
    return [format_track(release_artist, track, mix) for track in tracks]
