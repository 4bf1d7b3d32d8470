"""
Tests for the rename service.
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import Mock

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from discogs_rename.core.exceptions import (
    DiscRequiredError,
    InvalidReleaseUrlError,
    TrackCountMismatchError,
)
from discogs_rename.models.rename import RenameOptions
from discogs_rename.services.rename_service import RenameService, format_release

URL = "https://www.discogs.com/release/123456-DJ-Example-Example-Sessions"


class TestFormatRelease:
    """Tests for format_release (no I/O)."""
    
    def test_single_disc_scenario(self, single_disc_release_data):
        """Test the formatted names of a single-disc release."""
        assert format_release(single_disc_release_data) == ["01-Intro", "02-Main_Event-Club_Mix", "03-Outro"]
    
    def test_single_disc_mix(self, single_disc_release_data):
        """Test mix mode with the release artist."""
        names = format_release(single_disc_release_data, RenameOptions(mix=True))
        assert names[0] == "01-DJ_Example-Intro"
    
    def test_multi_disc_requires_disc(self, multi_disc_release_data):
        """Test multi-disc releases need a disc."""
        with pytest.raises(DiscRequiredError):
            format_release(multi_disc_release_data)
    
    def test_multi_disc_mix(self, multi_disc_release_data):
        """Test a mix compilation with track artists on both discs."""
        disc_one = format_release(multi_disc_release_data, RenameOptions(disc="1", mix=True))
        disc_two = format_release(multi_disc_release_data, RenameOptions(disc="2", mix=True))
        
        assert disc_one == [
            "01-Solarstone_feat_Elizabeth_Fields-Sunrise-Original_Mix",
            "02-Prophet-Exhale",
        ]
        assert disc_two == [
            "01-DJ_Tiesto_pres_Allure-Heaven",
            "02-Armand_Van_Helden_vs_Duane_Harden-Clear_Blue",
        ]
    
    def test_first_parts(self, multi_part_release_data):
        """Test that only first parts are formatted without joining."""
        assert format_release(multi_part_release_data) == [
            "01-Robot_Rock",
            "02-Touch_It_Technologic",
            "03-Television_Rules_the_Nation",
            "04-Too_Long",
        ]
    
    def test_join_multi_parts(self, multi_part_release_data):
        """Test multi-part tracks are joined into one title."""
        options = RenameOptions(join_multi_parts=True, join_separator=" ")
        
        names = format_release(multi_part_release_data, options)
        
        assert names == [
            "01-Robot_Rock",
            "02-Touch_It_Technologic_Touch_It_Technologic",
            "03-Television_Rules_the_Nation_Crescendolls",
            "04-Too_Long",
        ]
    
    def test_deterministic(self, multi_disc_release_data):
        """Test that formatting the same release twice gives the same result."""
        options = RenameOptions(disc="1", mix=True)
        assert format_release(multi_disc_release_data, options) == format_release(multi_disc_release_data, options)


class TestRenameService:
    """Tests for RenameService."""
    
    def test_invalid_url(self, mock_discogs_client):
        """Test that a non-release URL is rejected before fetching."""
        service = RenameService(client=mock_discogs_client)
        
        with pytest.raises(InvalidReleaseUrlError):
            service.plan("https://www.discogs.com/artist/1", ["a.mp3"], RenameOptions())
        
        mock_discogs_client.get_release.assert_not_called()
    
    def test_fetch_release_uses_release_id(self, mock_discogs_client):
        """Test the release id is parsed out of the URL."""
        service = RenameService(client=mock_discogs_client)
        
        parsed = service.fetch_release(URL)
        
        mock_discogs_client.get_release.assert_called_once_with("123456")
        assert parsed.release.title == "Example Sessions"
    
    def test_plan(self, mock_discogs_client):
        """Test planning renames for matching files."""
        service = RenameService(client=mock_discogs_client)
        
        plan = service.plan(URL, ["rip/1.flac", "rip/2.flac", "rip/3.flac"], RenameOptions())
        
        assert [str(op.target) for op in plan.operations] == [
            str(Path("rip/01-Intro.flac")),
            str(Path("rip/02-Main_Event-Club_Mix.flac")),
            str(Path("rip/03-Outro.flac")),
        ]
    
    def test_track_count_mismatch(self, mock_discogs_client):
        """Test a count mismatch aborts the run."""
        service = RenameService(client=mock_discogs_client)
        
        with pytest.raises(TrackCountMismatchError) as exc_info:
            service.plan(URL, ["a.flac", "b.flac"], RenameOptions())
        
        assert exc_info.value.track_count == 3
        assert exc_info.value.file_count == 2
        assert "3 track(s) found, 2 file(s) supplied" in str(exc_info.value)
    
    def test_ignore_count(self, mock_discogs_client):
        """Test a count mismatch can be ignored."""
        service = RenameService(client=mock_discogs_client)
        
        plan = service.plan(URL, ["a.flac", "b.flac"], RenameOptions(ignore_count=True))
        
        assert [op.target.name for op in plan.operations] == ["01-Intro.flac", "02-Main_Event-Club_Mix.flac"]
        assert plan.warnings == [
            "Number of tracks found does not match the number of files supplied: "
            "3 track(s) found, 2 file(s) supplied"
        ]
    
    def test_run_renames_files(self, mock_discogs_client, audio_files):
        """Test running the service renames the files."""
        service = RenameService(client=mock_discogs_client)
        
        service.run(URL, [str(f) for f in audio_files], RenameOptions())
        
        directory = audio_files[0].parent
        assert sorted(p.name for p in directory.iterdir()) == [
            "01-Intro.flac", "02-Main_Event-Club_Mix.flac", "03-Outro.flac",
        ]
    
    def test_run_dry_run(self, mock_discogs_client, audio_files):
        """Test a dry run keeps the original files."""
        service = RenameService(client=mock_discogs_client)
        
        plan = service.run(URL, [str(f) for f in audio_files], RenameOptions(dry_run=True))
        
        assert plan.dry_run is True
        assert all(f.exists() for f in audio_files)
