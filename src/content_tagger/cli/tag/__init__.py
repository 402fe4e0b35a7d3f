"""Tag feature - hashtag classification and video metadata commands."""

from .commands import classify, generate_tags, show, tag_video, update_metadata

__all__ = [
    "classify",
    "generate_tags",
    "show",
    "tag_video",
    "update_metadata",
]
