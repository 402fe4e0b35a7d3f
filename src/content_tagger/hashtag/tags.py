"""Display tags built from a video's user_metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

# (metadata field, display label) in display order
TAG_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("source", "Source"),
    ("demographics", "Demographics"),
    ("sector", "Sector"),
    ("emotions", "Emotions"),
    ("brands", "Brands"),
    ("locations", "Location"),
)


@dataclass(frozen=True)
class MetadataTag:
    """One labelled tag shown for a video."""

    category: str
    value: str


def metadata_to_tags(metadata: Optional[Mapping[str, Any]]) -> list[MetadataTag]:
    """Convert a user_metadata mapping into display tags.

    Only non-empty string values produce a tag.

    Args:
        metadata: user_metadata as stored on the video, or None.

    Returns:
        Tags in fixed category order.
    """
    if not metadata:
        return []

    tags = []
    for field_name, label in TAG_CATEGORIES:
        value = metadata.get(field_name)
        if value and isinstance(value, str):
            tags.append(MetadataTag(category=label, value=value))
    return tags
