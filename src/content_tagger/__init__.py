"""Hashtag metadata tagging for indexed video libraries."""

from .hashtag import HashtagClassifier, VideoMetadata, classify_hashtags

__version__ = "0.1.0"

__all__ = ["HashtagClassifier", "VideoMetadata", "classify_hashtags", "__version__"]
