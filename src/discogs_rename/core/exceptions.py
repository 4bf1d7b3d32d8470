"""
Custom exceptions for Discogs Rename.
"""


class DiscogsRenameError(Exception):
    """Base exception for Discogs Rename."""
    pass


class ConfigurationError(DiscogsRenameError):
    """Exception raised when configuration is invalid."""
    pass


class APIError(DiscogsRenameError):
    """Exception raised when API calls fail."""
    pass


class NetworkError(DiscogsRenameError, ConnectionError):
    """Exception raised when network operations fail."""
    pass


class ReleaseNotFoundError(APIError):
    """Exception raised when Discogs has no release with the requested id."""
    pass


class InvalidReleaseUrlError(DiscogsRenameError):
    """Exception raised when a URL is not a Discogs release URL."""
    pass


class ReleaseDataError(DiscogsRenameError):
    """Exception raised when release data cannot be used for renaming."""
    pass


class DiscRequiredError(DiscogsRenameError):
    """Exception raised when a multi-disc release is used without a disc."""
    pass


class TrackCountMismatchError(DiscogsRenameError):
    """Exception raised when the track count differs from the file count."""

    def __init__(self, message: str, track_count: int, file_count: int):
        super().__init__(message)
        self.track_count = track_count
        self.file_count = file_count


class RenameError(DiscogsRenameError, OSError):
    """Exception raised when a file cannot be renamed."""
    pass
