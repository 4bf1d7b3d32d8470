"""
Release Parser Module
Turns raw Discogs release data into parsed, flattened track lists.
"""

import re
from dataclasses import replace
from typing import Any, List, Mapping, Optional, Sequence

import roman

from ..core.config import ERROR_MESSAGES
from ..core.exceptions import ReleaseDataError
from ..core.logger import get_logger
from ..models.releases import Artist, TrackEntry, Release, TRACK_KINDS, KIND_TRACK, KIND_HEADING
from ..models.tracks import Position, Title, Track, ParsedRelease

logger = get_logger("parser")

# Multi-disc positions may carry a disc prefix ("2-5", "1.03")
POSITION_MULTI_REGEX = re.compile(
    r"^(?P<disc>[0-9]+[-.])?(?P<side>[AB])?(?P<track>[0-9]+)(?P<part>\.[0-9]+|[a-z]+)?$"
)
POSITION_SINGLE_REGEX = re.compile(
    r"^(?P<side>[AB])?(?P<track>[0-9]+)(?P<part>\.[0-9]+|[a-z]+)?$"
)


def _optional_str(value: Any) -> Optional[str]:
    """Convert catalog values to a string, mapping missing and empty values to None."""
    if value is None:
        return None
    value = str(value)
    return value if value != "" else None


def parse_artist(data: Mapping[str, Any]) -> Artist:
    """Build an Artist from a Discogs artist credit."""
    return Artist(
        name=str(data.get("name") or ""),
        anv=_optional_str(data.get("anv")),
        join=_optional_str(data.get("join")),
    )


def parse_track_entry(data: Mapping[str, Any]) -> TrackEntry:
    """Build a TrackEntry (and any nested sub-tracks) from a Discogs track list item."""
    kind = data.get("type_") or KIND_TRACK
    if kind not in TRACK_KINDS:
        logger.debug(f"Unknown track list entry type '{kind}', treating as heading")
        kind = KIND_HEADING
    
    return TrackEntry(
        kind=kind,
        position=str(data.get("position") or ""),
        title=str(data.get("title") or ""),
        artists=tuple(parse_artist(a) for a in data.get("artists") or []),
        sub_tracks=tuple(parse_track_entry(t) for t in data.get("sub_tracks") or []),
    )


def _parse_disc_count(value: Any) -> int:
    try:
        return max(int(value), 1)
    except (TypeError, ValueError):
        return 1


def release_from_data(data: Mapping[str, Any]) -> Release:
    """
    Build a Release from raw Discogs release data.
    
    Args:
        data: Release JSON as returned by the Discogs API
        
    Returns:
        Release model
        
    Raises:
        ReleaseDataError: If the release has no artist
    """
    artists = tuple(parse_artist(a) for a in data.get("artists") or [])
    if not artists or not artists[0].name:
        raise ReleaseDataError(ERROR_MESSAGES["NO_ARTIST"])
    
    return Release(
        title=str(data.get("title") or ""),
        artists=artists,
        disc_count=_parse_disc_count(data.get("format_quantity", 1)),
        tracklist=tuple(parse_track_entry(t) for t in data.get("tracklist") or []),
        release_id=_optional_str(data.get("id")),
        url=_optional_str(data.get("uri")),
    )


def flatten_tracklist(tracklist: Sequence[TrackEntry]) -> List[TrackEntry]:
    """
    Flatten index entries that have sub-tracks, taking the title from the index entry.
    
    Sub-tracks are emitted depth-first in their original order. Index entries
    without sub-tracks, tracks, and headings pass through unchanged.
    
    Args:
        tracklist: Track list entries, possibly nested
        
    Returns:
        Flat list of track list entries
    """
    flat = []
    
    for entry in tracklist:
        if entry.is_index and entry.sub_tracks:
            for sub_track in flatten_tracklist(entry.sub_tracks):
                flat.append(replace(sub_track, title=entry.title))
        else:
            flat.append(entry)
    
    return flat


def deromanize(value: str) -> Optional[str]:
    """Convert a roman numeral to its decimal string, or None if it is not one."""
    if not value or not value.isalpha():
        return None
    try:
        number = roman.fromRoman(value.upper())
    except roman.InvalidRomanNumeralError:
        return None
    return str(number) if number > 0 else None


def parse_position(position: str, multi_disc: bool = False) -> Position:
    """
    Parse a track position into disc, side, track and part components.
    
    Handles positions such as "3", "A2", "2-05", "1.3", "4.2" (decimal part),
    "B1b" (alphabetic part) and "IV" (roman numerals). A position that fits
    neither grammar yields an empty Position.
    
    Args:
        position: Raw position string
        multi_disc: Whether the release has more than one disc
        
    Returns:
        Parsed Position
    """
    candidate = deromanize(position) or position
    
    regex = POSITION_MULTI_REGEX if multi_disc else POSITION_SINGLE_REGEX
    match = regex.fullmatch(candidate)
    
    if not match:
        return Position()
    
    groups = match.groupdict()
    disc = groups.get("disc")
    part = groups.get("part")
    
    if disc is not None:
        disc = disc[:-1]
    
    if part is not None and part.startswith("."):
        part = part[1:]
    
    return Position(
        disc=disc,
        side=groups.get("side"),
        track=groups.get("track"),
        part=part,
    )


def parse_title(title: str) -> Title:
    """
    Split a title into its name and trailing parenthetical subtitles.
    
    "Song (Club Mix) (Edit)" becomes name "Song" with subtitles
    ("Club Mix", "Edit"). A trailing ")" without a matching " (" stops
    the peeling and leaves the rest of the title untouched.
    
    Args:
        title: Raw track title
        
    Returns:
        Parsed Title
    """
    name = title
    subtitles = []
    
    while name.endswith(")"):
        index = name.rfind(" (")
        if index == -1:
            break
        
        subtitles.insert(0, name[index + 2:-1])
        name = name[:index]
    
    return Title(name=name, subtitles=tuple(subtitles))


def parse_tracklist(tracklist: Sequence[TrackEntry], multi_disc: bool = False) -> List[Track]:
    """Flatten a track list and parse the position and title of every entry."""
    return [
        Track(
            position=parse_position(entry.position, multi_disc),
            title=parse_title(entry.title),
            kind=entry.kind,
            artists=entry.artists,
        )
        for entry in flatten_tracklist(tracklist)
    ]


def parse_release(data: Mapping[str, Any]) -> ParsedRelease:
    """
    Parse raw Discogs release data.
    
    Args:
        data: Release JSON as returned by the Discogs API
        
    Returns:
        ParsedRelease with the flattened, parsed track list
    """
    release = release_from_data(data)
    tracks = parse_tracklist(release.tracklist, release.multi_disc)
    
    logger.debug(
        f"Parsed release {release.release_id or '?'} '{release.title}': "
        f"{len(tracks)} track list entries, {release.disc_count} disc(s)"
    )
    
    return ParsedRelease(release=release, tracks=tuple(tracks))


def get_release_artist(release: Release) -> str:
    """Get the primary artist name for the release."""
    return release.artists[0].name
