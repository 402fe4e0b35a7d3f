"""Hashtag classification module.

Provides:
- HashtagClassifier: Buckets generated hashtags into metadata categories
- VideoMetadata: Six-field user_metadata record
- metadata_to_tags: Display tags for a stored user_metadata mapping
- validate_metadata_update: Checks hand-edited metadata before saving
"""

from .classifier import (
    HashtagClassifier,
    HashtagToken,
    VideoMetadata,
    classify_hashtags,
    extract_hashtag_tokens,
)
from .constants import METADATA_FIELDS
from .tags import MetadataTag, metadata_to_tags
from .validator import MetadataValidationResult, validate_metadata_update

__all__ = [
    "METADATA_FIELDS",
    "HashtagClassifier",
    "HashtagToken",
    "VideoMetadata",
    "classify_hashtags",
    "extract_hashtag_tokens",
    "MetadataTag",
    "metadata_to_tags",
    "MetadataValidationResult",
    "validate_metadata_update",
]
