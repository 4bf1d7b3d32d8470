"""
Track Selection Module
Filters parsed track lists down to the tracks of one disc and joins multi-part tracks.
"""

from dataclasses import replace
from typing import List, Optional, Sequence

from ..core.config import RENAME_CONFIG
from ..core.logger import get_logger
from ..models.releases import Release, KIND_TRACK
from ..models.tracks import Title, Track, ParsedRelease

logger = get_logger("selection")

# Part markers that identify the opening segment of a multi-part track
FIRST_PARTS = ("1", "a")


def is_release_multi_disc(release: Release) -> bool:
    """Whether the release has more than one disc."""
    return release.disc_count > 1


def is_track(track: Track) -> bool:
    """Whether the track list entry is an actual track (not an index or heading)."""
    return track.kind == KIND_TRACK


def is_track_from_disc(track: Track, disc: Optional[str] = None) -> bool:
    """
    Whether the track belongs to the given disc.
    
    A disc of None selects tracks without a disc component, as found on
    single-disc releases. Tracks without a track number never match.
    """
    position = track.position
    return position.disc == disc and bool(position.track)


def is_track_first_part(track: Track) -> bool:
    """Whether the track is a whole track or the first part of a multi-part track."""
    part = track.position.part
    return part is None or part in FIRST_PARTS


def get_tracks_from_release(
    parsed: ParsedRelease,
    disc: Optional[str] = None,
    all_parts: bool = False
) -> List[Track]:
    """
    Get the tracks for one disc of the release.
    
    Unless all_parts is set, only the first part of a multi-part track is
    returned, assuming the audio has not been split into those parts.
    
    Args:
        parsed: Parsed release
        disc: Disc to select, None for single-disc releases
        all_parts: Whether every part of multi-part tracks should be kept
        
    Returns:
        Selected tracks in track list order
    """
    tracks = [
        track for track in parsed.tracks
        if is_track(track)
        and is_track_from_disc(track, disc)
        and (all_parts or is_track_first_part(track))
    ]
    
    logger.debug(f"Selected {len(tracks)} of {len(parsed.tracks)} entries (disc={disc}, all_parts={all_parts})")
    return tracks


def _is_part_of(track: Track, whole: Track) -> bool:
    return (
        track.position.part is not None
        and track.position.track == whole.position.track
        and track.position.side == whole.position.side
    )


def join_multi_part_tracks(
    tracks: Sequence[Track],
    join_string: str = RENAME_CONFIG["JOIN_STRING"]
) -> List[Track]:
    """
    Join multi-part tracks into a single track, combining the titles.
    
    Only directly consecutive entries sharing a track number are merged. The
    merged track keeps the position of its first part and drops subtitles.
    Parts listed directly after a whole track with the same number are
    dropped, the whole track is kept as-is.
    
    Args:
        tracks: Tracks to join
        join_string: String placed between the joined title names
        
    Returns:
        Joined tracks
    """
    joined = []
    index = 0
    
    while index < len(tracks):
        track = tracks[index]
        index += 1
        
        if track.position.part is None:
            # A whole track already covers any parts listed directly under it
            joined.append(track)
            while index < len(tracks) and _is_part_of(tracks[index], track):
                index += 1
            continue
        
        names = [track.title.name]
        while index < len(tracks) and tracks[index].position.track == track.position.track:
            names.append(tracks[index].title.name)
            index += 1
        
        joined.append(replace(track, title=Title(name=join_string.join(names))))
    
    logger.debug(f"Joined {len(tracks)} track(s) into {len(joined)}")
    return joined
