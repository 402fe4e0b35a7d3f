"""Tests for tagging CLI commands.

Commands are invoked through typer's CliRunner. API-facing service calls
are patched so no network is used.
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from content_tagger.cli import app
from content_tagger.cli.core.types import Failure, IndexTarget, Success
from content_tagger.cli.tag.service import resolve_target
from content_tagger.hashtag import VideoMetadata
from content_tagger.services import TaggingStatus, TaggingSummary, VideoTaggingResult
from content_tagger.twelvelabs import TwelveLabsSettings

runner = CliRunner()

COMMANDS = "content_tagger.cli.tag.commands"


@pytest.fixture
def patched_settings(settings):
    with patch(f"{COMMANDS}._get_settings", return_value=settings):
        yield settings


@pytest.fixture
def no_credentials():
    empty = TwelveLabsSettings(_env_file=None, api_key="", api_base_url="")
    with patch(f"{COMMANDS}._get_settings", return_value=empty):
        yield empty


class TestResolveTarget:
    """Test resolve_target service function."""

    def test_content_index(self, settings):
        result = resolve_target(settings)
        assert result == Success(IndexTarget("content-index", "content"))

    def test_ads_index(self, settings):
        assert resolve_target(settings, ads=True) == Success(IndexTarget("ads-index", "ads"))

    def test_explicit_index(self, settings):
        assert resolve_target(settings, "abc", ads=True) == Success(IndexTarget("abc", "custom"))

    def test_missing_credentials(self):
        result = resolve_target(TwelveLabsSettings(_env_file=None, api_key="", api_base_url=""))
        assert isinstance(result, Failure)
        assert "TWELVELABS_API_KEY" in result.error


class TestClassifyCommand:
    """Test the classify command."""

    def test_classify_argument(self):
        result = runner.invoke(app, ["classify", "#female #25-34 #beauty #seoul #fentybeauty"])
        assert result.exit_code == 0
        assert "female, 25-34" in result.output
        assert "fentybeauty" in result.output

    def test_classify_json(self):
        result = runner.invoke(app, ["classify", "#female #randomplace #randombrand", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "source": "",
            "sector": "",
            "emotions": "",
            "brands": "randombrand",
            "locations": "randomplace",
            "demographics": "female",
        }

    def test_classify_stdin(self):
        result = runner.invoke(app, ["classify", "--json"], input="#MALE\n#Beauty\n")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["demographics"] == "male"
        assert data["sector"] == "beauty"

    def test_classify_file(self, tmp_path: Path):
        path = tmp_path / "tags.txt"
        path.write_text("#calm\n#tokyo", encoding="utf-8")
        result = runner.invoke(app, ["classify", "--file", str(path), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["emotions"] == "calm"
        assert data["locations"] == "tokyo"

    def test_classify_missing_file(self, tmp_path: Path):
        result = runner.invoke(app, ["classify", "--file", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1
        assert "File not found" in result.output


class TestGenerateTagsCommand:
    """Test the generate-tags command."""

    def test_missing_credentials_exits(self, no_credentials):
        result = runner.invoke(app, ["generate-tags"])
        assert result.exit_code == 1
        assert "Missing required environment variables" in result.output

    def test_runs_batch(self, patched_settings):
        summary = TaggingSummary(index_id="content-index", total=2, results=[
            VideoTaggingResult("a", TaggingStatus.TAGGED),
            VideoTaggingResult("b", TaggingStatus.SKIPPED),
        ])
        with patch(f"{COMMANDS}.run_batch", new_callable=AsyncMock, return_value=summary) as mock_batch:
            result = runner.invoke(app, ["generate-tags", "--dry-run", "--limit", "5"])

        assert result.exit_code == 0
        assert "content-index" in result.output
        _, kwargs = mock_batch.call_args
        assert kwargs["dry_run"] is True
        assert kwargs["force"] is False
        assert kwargs["limit"] == 5
        assert mock_batch.call_args.args[1] == IndexTarget("content-index", "content")

    def test_ads_index(self, patched_settings):
        summary = TaggingSummary(index_id="ads-index")
        with patch(f"{COMMANDS}.run_batch", new_callable=AsyncMock, return_value=summary) as mock_batch:
            result = runner.invoke(app, ["generate-tags", "--ads"])

        assert result.exit_code == 0
        assert mock_batch.call_args.args[1].index_id == "ads-index"
        assert "No videos found" in result.output

    def test_failures_exit_nonzero(self, patched_settings):
        summary = TaggingSummary(index_id="content-index", total=1, results=[
            VideoTaggingResult("a", TaggingStatus.FAILED, error="boom"),
        ])
        with patch(f"{COMMANDS}.run_batch", new_callable=AsyncMock, return_value=summary):
            result = runner.invoke(app, ["generate-tags"])

        assert result.exit_code == 1


class TestTagVideoCommand:
    """Test the tag-video command."""

    def test_tag_video(self, patched_settings):
        tagged = VideoTaggingResult(
            "vid-1", TaggingStatus.TAGGED, hashtags="#tech", metadata=VideoMetadata(sector="tech"),
        )
        with patch(f"{COMMANDS}.run_single", new_callable=AsyncMock, return_value=tagged) as mock_single:
            result = runner.invoke(app, ["tag-video", "vid-1", "--index-id", "idx", "--force"])

        assert result.exit_code == 0
        assert "tagged" in result.output
        assert mock_single.call_args.args[2] == "vid-1"
        assert mock_single.call_args.kwargs["force"] is True

    def test_tag_video_failure(self, patched_settings):
        failed = VideoTaggingResult("vid-1", TaggingStatus.FAILED, error="API error: 404")
        with patch(f"{COMMANDS}.run_single", new_callable=AsyncMock, return_value=failed):
            result = runner.invoke(app, ["tag-video", "vid-1"])

        assert result.exit_code == 1
        assert "API error: 404" in result.output


class TestUpdateMetadataCommand:
    """Test the update-metadata command."""

    def test_invalid_sector_rejected(self, patched_settings):
        result = runner.invoke(app, ["update-metadata", "vid-1", "--sector", "Automotive"])
        assert result.exit_code == 1
        assert "Invalid sector" in result.output

    def test_saves_metadata(self, patched_settings):
        saved = Success(VideoMetadata(sector="Beauty", emotions="calm"))
        with patch(f"{COMMANDS}.save_metadata", new_callable=AsyncMock, return_value=saved) as mock_save:
            result = runner.invoke(app, [
                "update-metadata", "vid-1", "--sector", "Beauty", "--emotions", "calm",
            ])

        assert result.exit_code == 0
        assert "updated successfully" in result.output
        fields = mock_save.call_args.args[3]
        assert fields["sector"] == "Beauty"
        assert fields["emotions"] == "calm"
        assert fields["brands"] is None

    def test_api_failure(self, patched_settings):
        failed = Failure("Failed to update metadata: API error: 500", {"status": 500})
        with patch(f"{COMMANDS}.save_metadata", new_callable=AsyncMock, return_value=failed):
            result = runner.invoke(app, ["update-metadata", "vid-1", "--brands", "nike"])

        assert result.exit_code == 1
        assert "Failed to update metadata" in result.output


class TestShowCommand:
    """Test the show command."""

    def test_show_tags(self, patched_settings, sample_video):
        sample_video["user_metadata"] = {"sector": "beauty", "brands": "fentybeauty"}
        with patch(f"{COMMANDS}.fetch_video", new_callable=AsyncMock, return_value=Success(sample_video)):
            result = runner.invoke(app, ["show", "video-1"])

        assert result.exit_code == 0
        assert "Sector" in result.output
        assert "fentybeauty" in result.output

    def test_show_failure(self, patched_settings):
        failed = Failure("Failed to fetch video: API error: 404", {"status": 404})
        with patch(f"{COMMANDS}.fetch_video", new_callable=AsyncMock, return_value=failed):
            result = runner.invoke(app, ["show", "missing"])

        assert result.exit_code == 1
