"""
Discogs Client Module
Resolves Discogs release URLs and fetches release data from the Discogs API.
"""

import re
import time
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import requests

from ..core.config import DISCOGS_CONFIG, API_LIMITS, ERROR_MESSAGES
from ..core.exceptions import APIError, NetworkError, ReleaseNotFoundError
from ..core.logger import get_logger
from ..utils.retry import retry_with_backoff

logger = get_logger("discogs")

# Matches "/release/123", "/Artist-Title/release/123" and "/release/123-Artist-Title"
RELEASE_PATH_REGEX = re.compile(r"/release/(?P<release_id>[0-9]+)(?:-[^/]*)?/?$")


def validate_discogs_url(url: str) -> bool:
    """
    Validate that the URL points at a Discogs release page.
    
    Args:
        url: URL to check
        
    Returns:
        True if the URL is a Discogs release URL
    """
    parsed = urlparse(url or "")
    return (
        parsed.scheme in ("http", "https")
        and parsed.hostname in DISCOGS_CONFIG["HOSTS"]
        and RELEASE_PATH_REGEX.search(parsed.path) is not None
    )


def get_release_id_from_url(url: str) -> Optional[str]:
    """
    Parse the release id out of a Discogs release URL.
    
    Args:
        url: The Discogs URL to parse the release id from
        
    Returns:
        The release id, or None if the URL is not a release URL
    """
    if not validate_discogs_url(url):
        return None
    
    match = RELEASE_PATH_REGEX.search(urlparse(url).path)
    return match.group("release_id")


class DiscogsClient:
    """Discogs release client."""
    
    def __init__(self, user_token: Optional[str] = None):
        self.base_url = DISCOGS_CONFIG["BASE_URL"]
        self.user_agent = DISCOGS_CONFIG["USER_AGENT"]
        self.user_token = user_token or DISCOGS_CONFIG.get("USER_TOKEN")  # Optional, for higher rate limits
        self.request_delay = DISCOGS_CONFIG["REQUEST_DELAY"]
        self.timeout = DISCOGS_CONFIG["TIMEOUT"]
        
        self.session = requests.Session()
        headers = {
            'User-Agent': self.user_agent,
            'Accept': 'application/json'
        }
        if self.user_token:
            headers['Authorization'] = f'Discogs token={self.user_token}'
        
        self.session.headers.update(headers)
    
    @retry_with_backoff(exceptions=(NetworkError,))
    def _make_request(self, url: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Make a GET request, retrying on rate limits and connection problems.
        
        Args:
            url: Request URL
            params: Request parameters
            
        Returns:
            Decoded JSON response
            
        Raises:
            ReleaseNotFoundError: On a 404 response
            NetworkError: On rate limiting or connection problems (retried)
            APIError: On any other failed response
        """
        try:
            response = self.session.get(url, params=params or {}, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            if status == 404:
                raise ReleaseNotFoundError(f"Discogs returned 404 for {url}") from e
            if status == 429:
                logger.warning(f"Rate limit exceeded. Waiting {API_LIMITS['RATE_LIMIT_WAIT']} seconds...")
                time.sleep(API_LIMITS["RATE_LIMIT_WAIT"])
                raise NetworkError("Discogs rate limit exceeded") from e
            raise APIError(f"HTTP error from Discogs: {e}") from e
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            raise NetworkError(f"{ERROR_MESSAGES['NETWORK_ERROR']} {e}") from e
        except requests.exceptions.RequestException as e:
            raise APIError(f"Request to Discogs failed: {e}") from e
        
        # Rate limiting (Discogs allows 60 requests per minute without token, 300 with token)
        time.sleep(self.request_delay)
        
        try:
            return response.json()
        except ValueError as e:
            raise APIError(f"Invalid JSON returned by Discogs for {url}") from e
    
    def get_release(self, release_id: str) -> Dict[str, Any]:
        """
        Get the raw release data, including the track listing.
        
        Args:
            release_id: Discogs release ID
            
        Returns:
            Release JSON as returned by the Discogs API
        """
        url = f"{self.base_url}/releases/{release_id}"
        logger.debug(f"Fetching release details for Discogs ID: {release_id}")
        return self._make_request(url)
