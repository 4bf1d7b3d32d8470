"""
Rename Service Module
Coordinates fetching a Discogs release, selecting and formatting its tracks,
and renaming the matching files.
"""

from typing import Any, List, Mapping, Optional, Sequence

from ..clients.discogs import DiscogsClient, get_release_id_from_url
from ..core.config import ERROR_MESSAGES
from ..core.exceptions import DiscRequiredError, InvalidReleaseUrlError, TrackCountMismatchError
from ..core.logger import get_logger
from ..models.rename import RenameOptions, RenamePlan
from ..models.tracks import ParsedRelease, Track
from . import parser, selection, formatter, renamer

logger = get_logger("rename_service")


def select_tracks(parsed: ParsedRelease, options: RenameOptions) -> List[Track]:
    """
    Select (and optionally join) the tracks to rename.
    
    Raises:
        DiscRequiredError: If the release is multi-disc and no disc was given
    """
    if selection.is_release_multi_disc(parsed.release) and options.disc is None:
        raise DiscRequiredError(ERROR_MESSAGES["DISC_REQUIRED"])
    
    tracks = selection.get_tracks_from_release(parsed, options.disc, options.join_multi_parts)
    
    if options.join_multi_parts:
        tracks = selection.join_multi_part_tracks(tracks, options.join_separator)
    
    return tracks


def format_release(data: Mapping[str, Any], options: Optional[RenameOptions] = None) -> List[str]:
    """
    Produce the formatted file names for a release without touching the filesystem.
    
    Args:
        data: Release JSON as returned by the Discogs API
        options: Rename options (defaults apply when omitted)
        
    Returns:
        Formatted names in track list order
    """
    options = options or RenameOptions()
    parsed = parser.parse_release(data)
    tracks = select_tracks(parsed, options)
    artist = parser.get_release_artist(parsed.release)
    return formatter.get_formatted_tracks(artist, tracks, options.mix)


class RenameService:
    """Service for renaming files from Discogs track listings."""
    
    def __init__(self, client: Optional[DiscogsClient] = None):
        self.client = client or DiscogsClient()
    
    def fetch_release(self, url: str) -> ParsedRelease:
        """
        Fetch and parse the release behind a Discogs release URL.
        
        Raises:
            InvalidReleaseUrlError: If the URL is not a Discogs release URL
        """
        release_id = get_release_id_from_url(url)
        if not release_id:
            raise InvalidReleaseUrlError(ERROR_MESSAGES["RELEASE_NOT_FOUND"])
        
        data = self.client.get_release(release_id)
        return parser.parse_release(data)
    
    def plan(self, url: str, files: Sequence[str], options: RenameOptions) -> RenamePlan:
        """
        Work out the renames for the given files.
        
        Args:
            url: Discogs release URL
            files: File paths in track order
            options: Rename options
            
        Returns:
            RenamePlan pairing each file with its new name
            
        Raises:
            TrackCountMismatchError: If the counts differ and ignore_count is not set
        """
        parsed = self.fetch_release(url)
        tracks = select_tracks(parsed, options)
        warnings = []
        
        if len(tracks) != len(files):
            message = (
                f"{ERROR_MESSAGES['TRACK_COUNT_MISMATCH']}: "
                f"{len(tracks)} track(s) found, {len(files)} file(s) supplied"
            )
            if not options.ignore_count:
                raise TrackCountMismatchError(message, track_count=len(tracks), file_count=len(files))
            logger.warning(message)
            warnings.append(message)
        
        artist = parser.get_release_artist(parsed.release)
        names = formatter.get_formatted_tracks(artist, tracks, options.mix)
        logger.debug(f"Formatted tracks: {names}")
        
        plan = renamer.build_rename_plan(files, names, dry_run=options.dry_run)
        plan.warnings.extend(warnings)
        return plan
    
    def execute(self, plan: RenamePlan) -> RenamePlan:
        """Perform the renames of a plan (nothing on disk for dry runs)."""
        return renamer.rename_files(plan)
    
    def run(self, url: str, files: Sequence[str], options: RenameOptions) -> RenamePlan:
        """Plan and execute the renames for a release."""
        return self.execute(self.plan(url, files, options))
