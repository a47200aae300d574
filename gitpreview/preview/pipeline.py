"""Message rewriting pipeline: links in, code previews out."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from gitpreview.preview.cache import ContentCache
from gitpreview.preview.errors import FetchError, MalformedUrlError, UnsupportedHostError
from gitpreview.preview.extractor import extract_lines
from gitpreview.preview.fetcher import ContentFetcher
from gitpreview.preview.formatter import render_preview
from gitpreview.preview.matcher import iter_matches, parse_url, replace_matches
from gitpreview.preview.models import MatchResult, PreviewResult
from gitpreview.preview.resolver import resolve_raw_url

if TYPE_CHECKING:
    from gitpreview.config.schema import Config

TRUNCATION_MARKER = "\n..."


def truncate_message(text: str, limit: int) -> str:
    """Cut text at the last line break before ``limit`` and mark the cut."""
    if len(text) <= limit:
        return text
    head = text[:limit]
    cut = head.rfind("\n")
    if cut > 0:
        head = head[:cut]
    return head + TRUNCATION_MARKER


class PreviewPipeline:
    """
    Turns forge file links inside a message into code previews.

    Settings are read from ``config`` on every call, so edits to the config
    object apply to the next message without rebuilding the pipeline.
    """

    def __init__(
        self,
        config: "Config | None" = None,
        cache: ContentCache | None = None,
        fetcher: ContentFetcher | None = None,
    ):
        from gitpreview.config.schema import Config

        self.config = config or Config()
        if fetcher is None:
            cache = cache if cache is not None else ContentCache(
                max_entries=self.config.cache.max_entries,
                ttl_seconds=self.config.cache.ttl_seconds,
            )
            fetcher = ContentFetcher(self.config.fetch, cache=cache)
        self.fetcher = fetcher

    @property
    def cache(self) -> ContentCache:
        return self.fetcher.cache

    async def preview_match(self, match: MatchResult) -> PreviewResult:
        """Build the preview for one matched link.

        Raises:
            UnsupportedHostError: The link's host has no raw-content rule.
            FetchError: The raw file could not be retrieved.
        """
        settings = self.config.preview
        raw_url = resolve_raw_url(match)
        content = await self.fetcher.fetch(raw_url)
        extract = extract_lines(
            content,
            match.line_start,
            match.line_end,
            default_lines=settings.default_lines,
            max_lines=settings.max_lines,
            fence_marker=settings.replace_triple_backticks,
        )
        return render_preview(
            match,
            raw_url,
            extract,
            message_format=settings.message_format,
            default_highlight=settings.default_highlight,
        )

    async def preview_url(self, url: str) -> PreviewResult:
        """Build the preview for a single link given on its own."""
        match = parse_url((url or "").strip())
        if match is None:
            raise MalformedUrlError(url)
        return await self.preview_match(match)

    async def process(self, text: str) -> str:
        """Rewrite every supported link in ``text``; failed links stay as they were."""
        replacements: dict[str, str] = {}
        for match in iter_matches(text):
            try:
                preview = await self.preview_match(match)
            except UnsupportedHostError as e:
                logger.debug("Skipping {}: {}", match.url, e)
                continue
            except FetchError as e:
                logger.warning("Skipping {}: {}", match.url, e)
                continue
            replacements[match.url] = preview.text

        if not replacements:
            return text

        rewritten = replace_matches(text, replacements)
        return truncate_message(rewritten, self.config.preview.max_message_length)
