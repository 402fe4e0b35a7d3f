"""TwelveLabs API client for listing videos, generating hashtags and saving metadata."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from ..config import HASHTAG_PROMPT
from ..hashtag import VideoMetadata
from .models import PageInfo, TwelveLabsSettings, VideoPage

_api_logger = logging.getLogger("twelvelabs_api")


class TwelveLabsAPIError(Exception):
    """Error response from the TwelveLabs API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable


def _is_retryable(error: BaseException) -> bool:
    """Retry on network failures, rate limits and server errors."""
    if isinstance(error, httpx.TransportError):
        return True
    if isinstance(error, TwelveLabsAPIError):
        return error.is_retryable
    return False


_api_retry = retry(
    retry=retry_if_exception(_is_retryable),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    reraise=True,
)


class TwelveLabsClient:
    """Async client for the TwelveLabs video-indexing API.

    Usage:
        settings = TwelveLabsSettings()
        async with TwelveLabsClient(settings) as client:
            videos = await client.fetch_all_videos(settings.content_index_id)
            text = await client.generate_hashtags(videos[0]["_id"])
    """

    def __init__(
        self,
        settings: TwelveLabsSettings,
        timeout: float = 60.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize client.

        Args:
            settings: Credentials and base URL. Must contain both.
            timeout: Request timeout in seconds.
            http_client: Optional preconfigured client (not closed by us).

        Raises:
            ValueError: If the API key or base URL is missing.
        """
        settings.require_credentials()
        self.settings = settings
        self.base_url = settings.api_base_url.rstrip("/")
        self.timeout = timeout
        self._http_client = http_client
        self._owns_client = http_client is None

    async def __aenter__(self) -> "TwelveLabsClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.timeout)
        return self._http_client

    async def close(self) -> None:
        """Close HTTP client if we created it."""
        if self._http_client is not None and self._owns_client:
            await self._http_client.aclose()
            self._http_client = None

    def _headers(self) -> dict[str, str]:
        return {
            "x-api-key": self.settings.api_key,
            "Accept": "application/json",
        }

    @_api_retry
    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send a request and return the decoded JSON body."""
        url = f"{self.base_url}{path}"
        _api_logger.debug(f"{method} {url}")

        response = await self._get_http_client().request(
            method, url, headers=self._headers(), **kwargs
        )

        if response.status_code >= 400:
            retryable = response.status_code == 429 or response.status_code >= 500
            _api_logger.error(f"{method} {url} -> {response.status_code}: {response.text}")
            raise TwelveLabsAPIError(
                f"API error: {response.status_code} - {response.text}",
                status_code=response.status_code,
                is_retryable=retryable,
            )

        if not response.content:
            return None
        return response.json()

    async def list_videos(self, index_id: str, page: int = 1, page_limit: int = 10) -> VideoPage:
        """Get one page of videos from an index."""
        data = await self._request(
            "GET",
            f"/indexes/{index_id}/videos",
            params={"page": page, "page_limit": page_limit},
        )
        data = data or {}
        videos = data.get("data")
        if not isinstance(videos, list):
            videos = []
        page_info = PageInfo.from_api(data["page_info"]) if data.get("page_info") else None
        return VideoPage(videos=videos, page_info=page_info)

    async def fetch_all_videos(self, index_id: str, page_limit: int = 10) -> list[dict[str, Any]]:
        """Walk every page of an index.

        A failing page stops the walk; videos collected so far are returned.
        """
        videos: list[dict[str, Any]] = []
        page = 1
        total_pages = 1

        while page <= total_pages:
            try:
                result = await self.list_videos(index_id, page=page, page_limit=page_limit)
            except (TwelveLabsAPIError, httpx.HTTPError) as e:
                _api_logger.error(f"Failed to list page {page} of index {index_id}: {e}")
                break

            if not result.videos:
                _api_logger.warning(f"Empty video page {page} for index {index_id}")
                break

            videos.extend(result.videos)
            if result.page_info is None:
                break
            total_pages = result.page_info.total_page
            page += 1

        _api_logger.info(f"Fetched {len(videos)} videos from index {index_id}")
        return videos

    async def get_video(self, index_id: str, video_id: str) -> dict[str, Any]:
        """Get one video's details, including user_metadata."""
        data = await self._request("GET", f"/indexes/{index_id}/videos/{video_id}")
        return data or {}

    async def generate_hashtags(self, video_id: str, prompt: str = HASHTAG_PROMPT) -> str:
        """Ask the analysis endpoint for a hashtag list.

        Returns:
            Raw hashtag text, or "" if generation failed for any reason.
        """
        try:
            data = await self._request(
                "POST",
                "/analyze",
                json={"prompt": prompt, "video_id": video_id, "stream": False},
            )
        except (TwelveLabsAPIError, httpx.HTTPError, ValueError) as e:
            _api_logger.error(f"Hashtag generation failed for video {video_id}: {e}")
            return ""

        text = data.get("data") if isinstance(data, dict) else None
        if not isinstance(text, str):
            _api_logger.warning(f"No hashtag text in analyze response for video {video_id}")
            return ""
        return text

    async def update_user_metadata(
        self,
        index_id: str,
        video_id: str,
        metadata: VideoMetadata,
    ) -> None:
        """Store user_metadata on a video.

        Raises:
            TwelveLabsAPIError: If the API rejects the update.
        """
        body = {"user_metadata": metadata.to_dict()}
        _api_logger.info(f"Updating metadata for video {video_id}: {body}")
        await self._request("PUT", f"/indexes/{index_id}/videos/{video_id}", json=body)
