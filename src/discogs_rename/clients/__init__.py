"""
API clients for Discogs Rename.
"""

from .discogs import DiscogsClient, get_release_id_from_url, validate_discogs_url

__all__ = [
    'DiscogsClient',
    'get_release_id_from_url',
    'validate_discogs_url',
]
