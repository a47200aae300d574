"""Link matching, raw content fetching and preview rendering."""

from gitpreview.preview.cache import ContentCache
from gitpreview.preview.errors import (
    FetchError,
    GitPreviewError,
    MalformedUrlError,
    UnsupportedHostError,
)
from gitpreview.preview.fetcher import ContentFetcher
from gitpreview.preview.models import LineExtract, MatchResult, PreviewResult
from gitpreview.preview.pipeline import PreviewPipeline, truncate_message

__all__ = [
    "ContentCache",
    "ContentFetcher",
    "PreviewPipeline",
    "truncate_message",
    "MatchResult",
    "LineExtract",
    "PreviewResult",
    "GitPreviewError",
    "FetchError",
    "MalformedUrlError",
    "UnsupportedHostError",
]
