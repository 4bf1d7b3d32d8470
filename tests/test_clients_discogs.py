"""
Tests for Discogs client.
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import Mock, patch, MagicMock

import requests

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from discogs_rename.clients.discogs import DiscogsClient, get_release_id_from_url, validate_discogs_url
from discogs_rename.core.exceptions import APIError, ReleaseNotFoundError
from discogs_rename.utils.retry import RetryError


class TestReleaseUrls:
    """Tests for Discogs release URL parsing."""
    
    def test_release_url(self):
        """Test the plain release URL form."""
        assert get_release_id_from_url("https://www.discogs.com/release/1209459") == "1209459"
    
    def test_slug_prefixed_release_url(self):
        """Test the older slug-prefixed URL form."""
        url = "https://www.discogs.com/Daft-Punk-Alive-2007/release/1209459"
        assert get_release_id_from_url(url) == "1209459"
    
    def test_slug_suffixed_release_url(self):
        """Test the current release URL form."""
        url = "http://discogs.com/release/1209459-Daft-Punk-Alive-2007"
        assert get_release_id_from_url(url) == "1209459"
    
    def test_invalid_urls(self):
        """Test URLs that are not Discogs release URLs."""
        for url in [
            "",
            "not a url",
            "ftp://www.discogs.com/release/1",
            "https://example.com/release/1",
            "https://www.discogs.com/master/1",
            "https://www.discogs.com/release/abc",
            "https://www.discogs.com/release/1/images",
        ]:
            assert get_release_id_from_url(url) is None
            assert not validate_discogs_url(url)


class TestDiscogsClient:
    """Tests for DiscogsClient class."""
    
    def test_discogs_client_initialization(self):
        """Test DiscogsClient initialization."""
        client = DiscogsClient()
        
        assert client.base_url is not None
        assert client.user_agent.startswith("DiscogsRename/")
        assert client.timeout > 0
        assert client.session.headers["User-Agent"] == client.user_agent
    
    def test_discogs_client_with_token(self):
        """Test DiscogsClient initialization with user token."""
        client = DiscogsClient(user_token="test-token")
        
        assert client.session.headers["Authorization"] == "Discogs token=test-token"
    
    @patch('discogs_rename.clients.discogs.DiscogsClient._make_request')
    def test_get_release(self, mock_make_request, single_disc_release_data):
        """Test fetching a release."""
        client = DiscogsClient()
        mock_make_request.return_value = single_disc_release_data
        
        data = client.get_release("123456")
        
        assert data["title"] == "Example Sessions"
        mock_make_request.assert_called_once_with("https://api.discogs.com/releases/123456")
    
    @patch('discogs_rename.clients.discogs.requests.Session.get')
    @patch('time.sleep')
    def test_make_request_success(self, mock_sleep, mock_get):
        """Test successful request."""
        client = DiscogsClient()
        
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.json.return_value = {"id": 1}
        mock_response.raise_for_status = Mock()
        mock_get.return_value = mock_response
        
        result = client._make_request("https://api.discogs.com/releases/1")
        
        assert result == {"id": 1}
        mock_sleep.assert_called_once()
    
    @patch('discogs_rename.clients.discogs.requests.Session.get')
    @patch('time.sleep')
    def test_make_request_not_found(self, mock_sleep, mock_get):
        """Test a 404 raises ReleaseNotFoundError without retrying."""
        client = DiscogsClient()
        
        mock_response = MagicMock()
        mock_response.status_code = 404
        mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError("Not found", response=mock_response)
        mock_get.return_value = mock_response
        
        with pytest.raises(ReleaseNotFoundError):
            client._make_request("https://api.discogs.com/releases/1")
        
        assert mock_get.call_count == 1
    
    @patch('discogs_rename.clients.discogs.requests.Session.get')
    @patch('time.sleep')
    def test_make_request_rate_limit(self, mock_sleep, mock_get):
        """Test request handling rate limit (429)."""
        client = DiscogsClient()
        
        mock_response = MagicMock()
        mock_response.status_code = 429
        mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError("Rate limited", response=mock_response)
        mock_get.return_value = mock_response
        
        with pytest.raises(RetryError):
            client._make_request("https://api.discogs.com/releases/1")
        
        assert mock_get.call_count > 1
        mock_sleep.assert_any_call(60)
    
    @patch('discogs_rename.clients.discogs.requests.Session.get')
    @patch('time.sleep')
    def test_make_request_recovers_after_connection_error(self, mock_sleep, mock_get):
        """Test a transient connection error is retried."""
        client = DiscogsClient()
        
        mock_response = MagicMock()
        mock_response.json.return_value = {"id": 2}
        mock_get.side_effect = [requests.exceptions.ConnectionError("reset"), mock_response]
        
        result = client._make_request("https://api.discogs.com/releases/2")
        
        assert result == {"id": 2}
        assert mock_get.call_count == 2
    
    @patch('discogs_rename.clients.discogs.requests.Session.get')
    @patch('time.sleep')
    def test_make_request_server_error(self, mock_sleep, mock_get):
        """Test other HTTP errors raise APIError."""
        client = DiscogsClient()
        
        mock_response = MagicMock()
        mock_response.status_code = 500
        mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError("Server error", response=mock_response)
        mock_get.return_value = mock_response
        
        with pytest.raises(APIError):
            client._make_request("https://api.discogs.com/releases/1")
    
    @patch('discogs_rename.clients.discogs.requests.Session.get')
    @patch('time.sleep')
    def test_make_request_invalid_json(self, mock_sleep, mock_get):
        """Test an undecodable body raises APIError."""
        client = DiscogsClient()
        
        mock_response = MagicMock()
        mock_response.json.side_effect = ValueError("No JSON")
        mock_get.return_value = mock_response
        
        with pytest.raises(APIError):
            client._make_request("https://api.discogs.com/releases/1")
