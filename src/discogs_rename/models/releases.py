"""
Release, track list entry, and artist credit models.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

# Discogs track list entry kinds (the ``type_`` field)
KIND_TRACK = "track"
KIND_INDEX = "index"
KIND_HEADING = "heading"

TRACK_KINDS = (KIND_TRACK, KIND_INDEX, KIND_HEADING)


@dataclass(frozen=True)
class Artist:
    """An artist credit on a release or track."""
    name: str
    anv: Optional[str] = None  # Artist name variation, shown instead of name
    join: Optional[str] = None  # Links this artist to the next credit

    @property
    def display_name(self) -> str:
        """Name to show for this credit."""
        return self.anv or self.name


@dataclass(frozen=True)
class TrackEntry:
    """A raw entry from a release track list."""
    kind: str
    position: str = ""
    title: str = ""
    artists: Tuple[Artist, ...] = ()
    sub_tracks: Tuple["TrackEntry", ...] = ()

    @property
    def is_index(self) -> bool:
        return self.kind == KIND_INDEX


@dataclass(frozen=True)
class Release:
    """Release information as fetched from Discogs."""
    title: str
    artists: Tuple[Artist, ...]
    disc_count: int = 1
    tracklist: Tuple[TrackEntry, ...] = ()
    release_id: Optional[str] = None
    url: Optional[str] = None

    @property
    def multi_disc(self) -> bool:
        """Whether the release spans more than one disc."""
        return self.disc_count > 1
