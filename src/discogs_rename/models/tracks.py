"""
Parsed track models.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .releases import Artist, Release, KIND_TRACK


@dataclass(frozen=True)
class Position:
    """A track position split into disc, side, track number and part."""
    disc: Optional[str] = None
    side: Optional[str] = None
    track: Optional[str] = None
    part: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """True when the raw position could not be parsed."""
        return self.disc is None and self.side is None and self.track is None and self.part is None


@dataclass(frozen=True)
class Title:
    """A track title split into its name and trailing parenthetical subtitles."""
    name: str
    subtitles: Tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.name + "".join(f" ({subtitle})" for subtitle in self.subtitles)


@dataclass(frozen=True)
class Track:
    """A flattened track list entry with parsed position and title."""
    position: Position
    title: Title
    kind: str = KIND_TRACK
    artists: Tuple[Artist, ...] = ()


@dataclass(frozen=True)
class ParsedRelease:
    """A release together with its flattened, parsed track list."""
    release: Release
    tracks: Tuple[Track, ...] = ()

    @property
    def multi_disc(self) -> bool:
        return self.release.multi_disc
