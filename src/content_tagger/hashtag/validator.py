"""Validation for hand-edited user_metadata.

Sector, emotion and demographic values must come from the allowed option lists. Values
the classifier itself produces are also accepted, so generated metadata
can always be saved back unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .classifier import VideoMetadata
from .constants import (
    ALLOWED_DEMOGRAPHICS,
    ALLOWED_EMOTIONS,
    ALLOWED_SECTORS,
    DEMOGRAPHICS_KEYWORDS,
    EMOTION_KEYWORDS,
    METADATA_FIELDS,
    SECTOR_KEYWORDS,
)

_logger = logging.getLogger("hashtag_validator")

# field -> (options shown to the user, extra accepted keywords)
_RESTRICTED_FIELDS: dict[str, tuple[tuple[str, ...], tuple[str, ...]]] = {
    "sector": (ALLOWED_SECTORS, SECTOR_KEYWORDS),
    "emotions": (ALLOWED_EMOTIONS, EMOTION_KEYWORDS),
    "demographics": (ALLOWED_DEMOGRAPHICS, DEMOGRAPHICS_KEYWORDS),
}

_FIELD_LABELS: dict[str, str] = {
    "sector": "sector",
    "emotions": "emotion",
    "demographics": "demographic",
}


@dataclass
class MetadataValidationResult:
    """Result of validating a metadata update."""

    is_valid: bool
    metadata: VideoMetadata = field(default_factory=VideoMetadata)
    error: Optional[str] = None

    @property
    def message(self) -> str:
        """Get a human-readable status message."""
        if self.error:
            return f"[X] Metadata validation error: {self.error}"
        return "[OK] Metadata valid"


def _split_values(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def is_valid_option(value: str, field_name: str) -> bool:
    """Check a comma-separated value against a restricted field's options.

    Unrestricted fields accept anything.
    """
    if field_name not in _RESTRICTED_FIELDS:
        return True

    options, keywords = _RESTRICTED_FIELDS[field_name]
    accepted = {option.lower() for option in options} | set(keywords)
    return all(part.lower() in accepted for part in _split_values(value))


def validate_metadata_update(metadata: Mapping[str, Optional[str]]) -> MetadataValidationResult:
    """Validate a partial user_metadata update.

    Args:
        metadata: Field name to value. Missing or None fields become empty.

    Returns:
        MetadataValidationResult with the cleaned six-field metadata.
    """
    unknown = sorted(set(metadata) - set(METADATA_FIELDS))
    if unknown:
        return MetadataValidationResult(
            is_valid=False,
            error=f"Unknown metadata fields: {', '.join(unknown)}",
        )

    cleaned: dict[str, str] = {}
    for field_name in METADATA_FIELDS:
        value = metadata.get(field_name) or ""
        cleaned[field_name] = ", ".join(_split_values(value))

    for field_name, (options, _) in _RESTRICTED_FIELDS.items():
        value = cleaned[field_name]
        if value and not is_valid_option(value, field_name):
            _logger.info(f"METADATA_REJECT | field={field_name} | value={value}")
            return MetadataValidationResult(
                is_valid=False,
                error=f"Invalid {_FIELD_LABELS[field_name]}. Allowed values: {', '.join(options)}",
            )

    return MetadataValidationResult(is_valid=True, metadata=VideoMetadata(**cleaned))
