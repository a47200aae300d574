"""Raw file content fetcher backed by httpx."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from loguru import logger

from gitpreview.preview.cache import ContentCache
from gitpreview.preview.errors import FetchError

if TYPE_CHECKING:
    from gitpreview.config.schema import FetchConfig


class ContentFetcher:
    """Fetch raw file text once per reference and remember it."""

    def __init__(self, config: "FetchConfig | None" = None, cache: ContentCache | None = None):
        from gitpreview.config.schema import FetchConfig

        self.config = config or FetchConfig()
        self.cache = cache if cache is not None else ContentCache()

    def request_url(self, reference: str) -> str:
        """Return the URL actually requested, with the proxy prefix if configured."""
        proxy = (self.config.proxy or "").strip()
        return f"{proxy}{reference}" if proxy else reference

    async def fetch(self, reference: str) -> str:
        """Return the full text behind a raw URL.

        Raises:
            FetchError: The request failed or returned a non-success status.
        """
        cached = self.cache.get(reference)
        if cached is not None:
            logger.debug("Raw content cache hit: {}", reference)
            return cached

        url = self.request_url(reference)
        logger.debug("Fetching raw content: {}", url)
        try:
            async with httpx.AsyncClient(follow_redirects=True) as client:
                response = await client.get(url, timeout=self.config.timeout)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(reference, detail=str(e) or type(e).__name__) from e

        if not response.is_success:
            raise FetchError(reference, status=response.status_code)

        text = response.text
        self.cache.put(reference, text)
        return text
