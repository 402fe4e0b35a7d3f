"""TwelveLabs video-indexing API client."""

from .client import TwelveLabsAPIError, TwelveLabsClient
from .models import PageInfo, TwelveLabsSettings, VideoPage, video_title

__all__ = [
    "TwelveLabsAPIError",
    "TwelveLabsClient",
    "PageInfo",
    "TwelveLabsSettings",
    "VideoPage",
    "video_title",
]
