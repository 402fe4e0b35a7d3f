"""Hashtag classification.

Turns the free-text hashtag list written by the analysis endpoint into a
structured user_metadata record. Every token is resolved either by exact
keyword membership or by position, never by asking a model:

- Tokens are `#`-prefixed words, matched lowercase with the `#` stripped
- Keyword categories are tried in the order demographics, sector,
  emotions, locations, brands
- The first unmatched token fills an empty `locations`, the next one an
  empty `brands`; anything else unmatched is dropped
"""

from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass
from typing import Optional

from .constants import CLASSIFICATION_ORDER

# Whitespace plus the byte order mark, which str.split() keeps inside words
_WORD_SEPARATOR = re.compile(r"[\s\ufeff]+")

_logger = logging.getLogger("hashtag_classifier")


@dataclass(frozen=True)
class HashtagToken:
    """A single `#`-prefixed word taken from generated text."""

    raw: str

    @property
    def normalized(self) -> str:
        """Match key: `#` stripped and lowercased."""
        return self.raw[1:].lower()


@dataclass
class VideoMetadata:
    """Structured user_metadata for one video.

    Each field is either empty or a comma-and-space joined list of
    lowercase values. `source` is never derived from hashtags.
    """

    source: str = ""
    sector: str = ""
    emotions: str = ""
    brands: str = ""
    locations: str = ""
    demographics: str = ""

    def to_dict(self) -> dict[str, str]:
        """Convert to the six-key mapping stored on the video."""
        return asdict(self)

    @property
    def is_empty(self) -> bool:
        """Check if every field is empty."""
        return not any(self.to_dict().values())


def extract_hashtag_tokens(text: str) -> list[HashtagToken]:
    """Extract `#`-prefixed tokens from text in appearance order.

    Args:
        text: Raw text, possibly spanning several lines.

    Returns:
        List of tokens whose first character is `#`.
    """
    if not text:
        return []
    words = _WORD_SEPARATOR.split(text)
    return [HashtagToken(word) for word in words if word.startswith("#")]


class HashtagClassifier:
    """Buckets generated hashtags into the fixed metadata categories.

    Instances hold no per-call state, so one classifier can be shared by
    every caller.

    Example:
        classifier = HashtagClassifier()
        metadata = classifier.classify("#female #beauty #seoul #fentybeauty")
        print(metadata.sector)  # "beauty"
        print(metadata.brands)  # "fentybeauty"
    """

    def __init__(self, categories: tuple[tuple[str, tuple[str, ...]], ...] = CLASSIFICATION_ORDER):
        self.categories = categories

    def match_category(self, key: str) -> Optional[str]:
        """Return the first category whose keywords contain `key`."""
        for category, keywords in self.categories:
            if key in keywords:
                return category
        return None

    def classify(self, hashtag_text: str) -> VideoMetadata:
        """Classify a hashtag blob into VideoMetadata.

        Args:
            hashtag_text: Generated hashtag text. Any string is accepted.

        Returns:
            VideoMetadata with all six fields set (empty when unmatched).
        """
        buckets: dict[str, list[str]] = {category: [] for category, _ in self.categories}
        unclassified: list[str] = []

        for token in extract_hashtag_tokens(hashtag_text):
            key = token.normalized
            category = self.match_category(key)
            if category is None:
                unclassified.append(key)
            else:
                buckets[category].append(key)

        if unclassified and not buckets["locations"]:
            buckets["locations"].append(unclassified.pop(0))

        if unclassified and not buckets["brands"]:
            buckets["brands"].append(unclassified.pop(0))

        if unclassified:
            _logger.debug(f"HASHTAG_DROP | unclassified={unclassified}")

        return VideoMetadata(
            **{category: ", ".join(values) for category, values in buckets.items()}
        )


_default_classifier = HashtagClassifier()


def classify_hashtags(hashtag_text: str) -> VideoMetadata:
    """Classify hashtag text with the shared default classifier."""
    return _default_classifier.classify(hashtag_text)
