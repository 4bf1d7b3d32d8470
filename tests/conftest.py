"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import tempfile
import shutil
from pathlib import Path
from unittest.mock import Mock
from typing import Generator

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def make_track(position, title, artists=None, type_="track", sub_tracks=None):
    """Build a Discogs track list item."""
    data = {"type_": type_, "position": position, "title": title, "duration": ""}
    if artists is not None:
        data["artists"] = artists
    if sub_tracks is not None:
        data["sub_tracks"] = sub_tracks
    return data


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def audio_files(temp_dir: Path):
    """Create three fake audio files in a temporary directory."""
    files = []
    for number in range(1, 4):
        audio_file = temp_dir / f"track{number:02d}.flac"
        audio_file.write_bytes(b"fake audio data")
        files.append(audio_file)
    return files


@pytest.fixture
def single_disc_release_data():
    """Single-disc release as returned by the Discogs API."""
    return {
        "id": 123456,
        "title": "Example Sessions",
        "uri": "https://www.discogs.com/release/123456-DJ-Example-Example-Sessions",
        "format_quantity": 1,
        "artists": [{"name": "DJ Example", "anv": "", "join": ""}],
        "tracklist": [
            make_track("1", "Intro"),
            make_track("2", "Main Event (Club Mix)"),
            make_track("3", "Outro"),
        ],
    }


@pytest.fixture
def multi_disc_release_data():
    """Two-disc mix compilation with per-track artist credits."""
    return {
        "id": 987443,
        "title": "A State Of Trance 2007",
        "format_quantity": 2,
        "artists": [{"name": "Armin van Buuren", "anv": "", "join": ""}],
        "tracklist": [
            make_track("", "On The Beach", type_="heading"),
            make_track("1-1", "Sunrise (Original Mix)", artists=[
                {"name": "Solarstone", "anv": "", "join": "Featuring"},
                {"name": "Elizabeth Fields", "anv": "", "join": ""},
            ]),
            make_track("1-2", "Exhale", artists=[{"name": "Prophet (2)", "anv": "", "join": ""}]),
            make_track("", "In The Club", type_="heading"),
            make_track("2-1", "Heaven", artists=[
                {"name": "Tiësto", "anv": "DJ Tiësto", "join": "Presents"},
                {"name": "Allure", "anv": "", "join": ""},
            ]),
            make_track("2-2", "Clear Blue", artists=[
                {"name": "Armand Van Helden", "anv": "", "join": "V."},
                {"name": "Duane Harden", "anv": "", "join": ""},
            ]),
        ],
    }


@pytest.fixture
def multi_part_release_data():
    """Release with index tracks and decimal multi-part positions."""
    return {
        "id": 1209459,
        "title": "Alive 2007",
        "format_quantity": 1,
        "artists": [{"name": "Daft Punk", "anv": "", "join": ""}],
        "tracklist": [
            make_track("1", "Robot Rock"),
            make_track("", "Touch It / Technologic", type_="index", sub_tracks=[
                make_track("2.1", "Touch It"),
                make_track("2.2", "Technologic"),
            ]),
            make_track("3.1", "Television Rules The Nation"),
            make_track("3.2", "Crescendolls"),
            make_track("4", "Too Long"),
        ],
    }


@pytest.fixture
def mock_discogs_client(single_disc_release_data):
    """Mock Discogs client returning the single-disc release."""
    client = Mock()
    client.get_release = Mock(return_value=single_disc_release_data)
    return client
