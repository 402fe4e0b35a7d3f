"""Stateless service for tagging commands."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from ...config import TaggerConfig
from ...hashtag import VideoMetadata, validate_metadata_update
from ...services import ContentTagger, TaggingSummary, VideoTaggingResult
from ...services.tagging import ProgressCallback
from ...twelvelabs import TwelveLabsAPIError, TwelveLabsClient, TwelveLabsSettings
from ..core.types import Failure, IndexTarget, Result, Success


def resolve_target(
    settings: TwelveLabsSettings,
    index_id: Optional[str] = None,
    ads: bool = False,
) -> Result[IndexTarget]:
    """Check credentials and pick the index to work on."""
    try:
        settings.require_credentials()
        resolved = settings.resolve_index_id(index_id, ads=ads)
    except ValueError as e:
        return Failure(str(e))

    if index_id:
        library = "custom"
    else:
        library = "ads" if ads else "content"
    return Success(IndexTarget(index_id=resolved, library=library))


def _error_details(error: Exception) -> dict[str, Any]:
    if isinstance(error, TwelveLabsAPIError):
        return {"status": error.status_code}
    return {"type": type(error).__name__}


async def run_batch(
    settings: TwelveLabsSettings,
    target: IndexTarget,
    config: TaggerConfig,
    force: bool = False,
    dry_run: bool = False,
    limit: Optional[int] = None,
    on_progress: ProgressCallback = None,
    http_client: httpx.AsyncClient | None = None,
) -> TaggingSummary:
    """Tag every video in the target index."""
    async with TwelveLabsClient(settings, timeout=config.timeout_seconds, http_client=http_client) as client:
        tagger = ContentTagger(client, config, progress_callback=on_progress)
        return await tagger.tag_index(target.index_id, force=force, dry_run=dry_run, limit=limit)


async def run_single(
    settings: TwelveLabsSettings,
    target: IndexTarget,
    video_id: str,
    config: TaggerConfig,
    force: bool = False,
    dry_run: bool = False,
    http_client: httpx.AsyncClient | None = None,
) -> VideoTaggingResult:
    """Tag one video in the target index."""
    async with TwelveLabsClient(settings, timeout=config.timeout_seconds, http_client=http_client) as client:
        tagger = ContentTagger(client, config)
        return await tagger.tag_video(target.index_id, video_id, force=force, dry_run=dry_run)


async def save_metadata(
    settings: TwelveLabsSettings,
    target: IndexTarget,
    video_id: str,
    fields: dict[str, Optional[str]],
    http_client: httpx.AsyncClient | None = None,
) -> Result[VideoMetadata]:
    """Validate hand-edited fields and store them on the video."""
    validation = validate_metadata_update(fields)
    if not validation.is_valid:
        return Failure(validation.error or "Invalid metadata")

    try:
        async with TwelveLabsClient(settings, http_client=http_client) as client:
            await client.update_user_metadata(target.index_id, video_id, validation.metadata)
    except (TwelveLabsAPIError, httpx.HTTPError) as e:
        return Failure(f"Failed to update metadata: {e}", _error_details(e))

    return Success(validation.metadata)


async def fetch_video(
    settings: TwelveLabsSettings,
    target: IndexTarget,
    video_id: str,
    http_client: httpx.AsyncClient | None = None,
) -> Result[dict[str, Any]]:
    """Get a video's details."""
    try:
        async with TwelveLabsClient(settings, http_client=http_client) as client:
            video = await client.get_video(target.index_id, video_id)
    except (TwelveLabsAPIError, httpx.HTTPError) as e:
        return Failure(f"Failed to fetch video: {e}", _error_details(e))

    return Success(video)
