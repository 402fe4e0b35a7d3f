"""Services for tagging indexed videos."""

from .tagging import (
    ContentTagger,
    TaggingStatus,
    TaggingSummary,
    VideoTaggingResult,
    has_existing_tags,
)

__all__ = [
    "ContentTagger",
    "TaggingStatus",
    "TaggingSummary",
    "VideoTaggingResult",
    "has_existing_tags",
]
