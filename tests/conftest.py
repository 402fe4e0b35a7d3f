"""Shared test fixtures and configuration.

Provides settings, config and mock client fixtures for the tagger
components. Mocks are AsyncMock so they work with await.
"""

from __future__ import annotations

from io import StringIO
from typing import Any
from unittest.mock import AsyncMock

import pytest
from rich.console import Console
from tenacity import wait_none

from content_tagger.config import TaggerConfig
from content_tagger.twelvelabs import TwelveLabsClient, TwelveLabsSettings


@pytest.fixture
def sample_hashtags() -> str:
    """Typical analyze endpoint output."""
    return "#female #25-34 #beauty #happy/positive #seoul #fentybeauty"


@pytest.fixture
def settings() -> TwelveLabsSettings:
    """Settings with credentials and both index ids, ignoring any .env file."""
    return TwelveLabsSettings(
        _env_file=None,
        api_key="test-key",
        api_base_url="https://api.example.test/v1.3",
        content_index_id="content-index",
        ads_index_id="ads-index",
    )


@pytest.fixture
def fast_config() -> TaggerConfig:
    """TaggerConfig without delays between videos."""
    return TaggerConfig(request_delay_seconds=0, page_limit=2)


@pytest.fixture
def mock_console() -> Console:
    """Create a Console that captures output without ANSI codes."""
    return Console(file=StringIO(), force_terminal=False, no_color=True, width=120)


@pytest.fixture
def sample_video() -> dict[str, Any]:
    """A video record as returned by the indexes API."""
    return {
        "_id": "video-1",
        "system_metadata": {"filename": "campaign.mp4", "video_title": "Spring Campaign"},
        "user_metadata": {},
    }


@pytest.fixture
def mock_client(sample_video: dict[str, Any], sample_hashtags: str) -> AsyncMock:
    """Create a mock TwelveLabsClient.

    Returns:
        AsyncMock with one untagged video and canned hashtags.
    """
    client = AsyncMock()
    client.fetch_all_videos.return_value = [sample_video]
    client.get_video.return_value = sample_video
    client.generate_hashtags.return_value = sample_hashtags
    client.update_user_metadata.return_value = None
    return client


@pytest.fixture
def no_retry_wait(monkeypatch):
    """Retry API requests immediately instead of backing off."""
    monkeypatch.setattr(TwelveLabsClient._request.retry, "wait", wait_none())
