"""Batch hashtag tagging for indexed videos.

For each video in an index:
1. Skip it if user_metadata already has a sector or emotions
2. Ask the analysis endpoint for hashtags
3. Classify the hashtags into user_metadata
4. Save the metadata back on the video

Failures are recorded per video and never stop the batch.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Mapping, Optional

from ..config import TaggerConfig
from ..hashtag import HashtagClassifier, VideoMetadata
from ..twelvelabs import TwelveLabsClient

_logger = logging.getLogger("content_tagger")


class TaggingStatus(str, Enum):
    """Outcome of tagging one video."""
    TAGGED = "tagged"
    DRY_RUN = "dry_run"
    SKIPPED = "skipped"
    NO_HASHTAGS = "no_hashtags"
    FAILED = "failed"


@dataclass
class VideoTaggingResult:
    """Result of tagging one video."""
    video_id: str
    status: TaggingStatus
    hashtags: str = ""
    metadata: Optional[VideoMetadata] = None
    existing_metadata: dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None


@dataclass
class TaggingSummary:
    """Running totals for a batch."""
    index_id: str
    total: int = 0
    results: list[VideoTaggingResult] = field(default_factory=list)

    def _count(self, status: TaggingStatus) -> int:
        return sum(1 for result in self.results if result.status == status)

    @property
    def processed(self) -> int:
        return len(self.results)

    @property
    def tagged(self) -> int:
        return self._count(TaggingStatus.TAGGED) + self._count(TaggingStatus.DRY_RUN)

    @property
    def skipped(self) -> int:
        return self._count(TaggingStatus.SKIPPED)

    @property
    def no_hashtags(self) -> int:
        return self._count(TaggingStatus.NO_HASHTAGS)

    @property
    def failed(self) -> int:
        return self._count(TaggingStatus.FAILED)


ProgressCallback = Callable[[VideoTaggingResult, TaggingSummary], Awaitable[None]] | None


def has_existing_tags(user_metadata: Optional[Mapping[str, Any]]) -> bool:
    """Check if a video was already tagged (sector or emotions set)."""
    if not user_metadata:
        return False
    return bool(user_metadata.get("sector") or user_metadata.get("emotions"))


class ContentTagger:
    """Generates, classifies and stores hashtag metadata for videos.

    Usage:
        async with TwelveLabsClient(settings) as client:
            tagger = ContentTagger(client, load_tagger_config())
            summary = await tagger.tag_index(settings.content_index_id)
    """

    def __init__(
        self,
        client: TwelveLabsClient,
        config: TaggerConfig | None = None,
        classifier: HashtagClassifier | None = None,
        progress_callback: ProgressCallback = None,
    ):
        self.client = client
        self.config = config or TaggerConfig()
        self.classifier = classifier or HashtagClassifier()
        self._progress_callback = progress_callback

    async def tag_video(
        self,
        index_id: str,
        video_id: str,
        force: bool = False,
        dry_run: bool = False,
    ) -> VideoTaggingResult:
        """Tag a single video.

        Args:
            index_id: Index the video belongs to.
            video_id: Video to tag.
            force: Re-tag even if the video already has tags.
            dry_run: Generate and classify but do not save.

        Returns:
            VideoTaggingResult; errors are captured, not raised.
        """
        try:
            details = await self.client.get_video(index_id, video_id)
            existing = details.get("user_metadata") or {}

            if not force and has_existing_tags(existing):
                _logger.info(f"Video {video_id} already has tags, skipping")
                return VideoTaggingResult(
                    video_id=video_id,
                    status=TaggingStatus.SKIPPED,
                    existing_metadata=dict(existing),
                )

            hashtags = await self.client.generate_hashtags(video_id, self.config.hashtag_prompt)
            if not hashtags:
                _logger.warning(f"No hashtags generated for video {video_id}")
                return VideoTaggingResult(video_id=video_id, status=TaggingStatus.NO_HASHTAGS)

            metadata = self.classifier.classify(hashtags)
            _logger.info(f"Video {video_id} | hashtags={hashtags!r} | metadata={metadata.to_dict()}")

            if dry_run:
                return VideoTaggingResult(
                    video_id=video_id,
                    status=TaggingStatus.DRY_RUN,
                    hashtags=hashtags,
                    metadata=metadata,
                )

            await self.client.update_user_metadata(index_id, video_id, metadata)
            return VideoTaggingResult(
                video_id=video_id,
                status=TaggingStatus.TAGGED,
                hashtags=hashtags,
                metadata=metadata,
            )

        except Exception as e:
            _logger.error(f"Tagging failed for video {video_id}: {e}", exc_info=True)
            return VideoTaggingResult(video_id=video_id, status=TaggingStatus.FAILED, error=str(e))

    async def tag_index(
        self,
        index_id: str,
        force: bool = False,
        dry_run: bool = False,
        limit: Optional[int] = None,
    ) -> TaggingSummary:
        """Tag every video in an index, one at a time.

        Args:
            index_id: Index to walk.
            force: Re-tag videos that already have tags.
            dry_run: Do not save metadata.
            limit: Stop after this many videos.

        Returns:
            TaggingSummary with one result per processed video.
        """
        videos = await self.client.fetch_all_videos(index_id, page_limit=self.config.page_limit)
        if limit is not None:
            videos = videos[:limit]

        summary = TaggingSummary(index_id=index_id, total=len(videos))
        _logger.info(f"Tagging {summary.total} videos in index {index_id}")

        for position, video in enumerate(videos):
            video_id = video.get("_id", "")
            result = await self.tag_video(index_id, video_id, force=force, dry_run=dry_run)
            summary.results.append(result)

            if self._progress_callback:
                await self._progress_callback(result, summary)

            if position < len(videos) - 1 and self.config.request_delay_seconds > 0:
                await asyncio.sleep(self.config.request_delay_seconds)

        _logger.info(
            f"Done index {index_id} | total={summary.total} | tagged={summary.tagged} | "
            f"skipped={summary.skipped} | no_hashtags={summary.no_hashtags} | failed={summary.failed}"
        )
        return summary
