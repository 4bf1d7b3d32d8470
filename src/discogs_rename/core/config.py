"""
Configuration for Discogs Rename.
Contains all constants, settings, and global parameters.
"""

import os

# Project Information
PROJECT_NAME = "discogs-rename"
PROJECT_VERSION = "1.0.0"
PROJECT_DESCRIPTION = "Rename music files based on track listings from Discogs"

# Discogs Configuration
DISCOGS_CONFIG = {
    "BASE_URL": "https://api.discogs.com",
    "HOSTS": ("discogs.com", "www.discogs.com"),
    "USER_AGENT": f"DiscogsRename/{PROJECT_VERSION}",
    "USER_TOKEN": os.environ.get("DISCOGS_TOKEN"),  # Optional, for higher rate limits
    "REQUEST_DELAY": 1.0,  # Discogs allows 60 requests per minute without a token
    "TIMEOUT": 30,
}

# Rename Configuration
RENAME_CONFIG = {
    "JOIN_STRING": " ",
    "POSITION_WIDTH": 2,
}

# API Limits
API_LIMITS = {
    "MAX_RETRIES": 3,
    "BACKOFF_FACTOR": 2,
    "RATE_LIMIT_WAIT": 60,
}

# Logging Configuration
LOGGING_CONFIG = {
    "LEVEL": os.environ.get("DISCOGS_RENAME_LOG_LEVEL", "INFO").upper(),
    "FORMAT": "%(levelname)s - %(name)s - %(message)s",
}

# Error Messages
ERROR_MESSAGES = {
    "RELEASE_NOT_FOUND": "Discogs release id not found in the supplied URL",
    "DISC_REQUIRED": "Discogs release contains multiple discs, please specify using --disc",
    "TRACK_COUNT_MISMATCH": "Number of tracks found does not match the number of files supplied",
    "NETWORK_ERROR": "Network error occurred.",
    "NO_ARTIST": "Discogs release has no artist",
    "TARGET_EXISTS": "Refusing to overwrite existing file",
}
