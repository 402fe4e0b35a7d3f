"""Data models for the TwelveLabs video-indexing API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class TwelveLabsSettings(BaseSettings):
    """API credentials and index ids loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="TWELVELABS_",
        env_file=".env",
        extra="ignore",
    )

    api_key: str | None = None
    api_base_url: str | None = None
    content_index_id: str | None = None
    ads_index_id: str | None = None

    def require_credentials(self) -> None:
        """Raise ValueError when the API key or base URL is missing."""
        missing = []
        if not self.api_key:
            missing.append("TWELVELABS_API_KEY")
        if not self.api_base_url:
            missing.append("TWELVELABS_API_BASE_URL")

        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}\n"
                "Please add them to your .env file."
            )

    def resolve_index_id(self, index_id: str | None = None, ads: bool = False) -> str:
        """Pick an explicit index id, else the ads or content index."""
        if index_id:
            return index_id

        resolved = self.ads_index_id if ads else self.content_index_id
        if not resolved:
            name = "TWELVELABS_ADS_INDEX_ID" if ads else "TWELVELABS_CONTENT_INDEX_ID"
            raise ValueError(f"No index id given and {name} is not set")
        return resolved


@dataclass
class PageInfo:
    """Pagination block of a video listing."""

    page: int = 1
    total_page: int = 1
    total_results: int = 0

    @classmethod
    def from_api(cls, data: dict[str, Any] | None) -> "PageInfo":
        data = data or {}
        return cls(
            page=int(data.get("page", 1)),
            total_page=int(data.get("total_page", 1) or 1),
            total_results=int(data.get("total_results", 0)),
        )


@dataclass
class VideoPage:
    """One page of videos from an index."""

    videos: list[dict[str, Any]] = field(default_factory=list)
    page_info: PageInfo | None = None


def video_title(video: dict[str, Any]) -> str:
    """Best display name for a video record."""
    system = video.get("system_metadata") or {}
    return system.get("video_title") or system.get("filename") or video.get("_id", "")
