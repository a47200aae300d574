"""Find git forge file links in free-form message text."""

from __future__ import annotations

import re
from typing import Iterator, Mapping

from gitpreview.preview.models import MatchResult

# Links wrapped in <...> have their embeds suppressed and are left alone; a
# rendered preview ends with one, so re-processing an edit is a no-op.
_CANDIDATE_RE = re.compile(r"(?<![<\w])https?://[^\s<>()\[\]{}\"'`|]+", re.IGNORECASE)
_TRAILING_PUNCTUATION = ".,;:!?*_~"

_URL_PARTS_RE = re.compile(
    r"""
    ^(?P<scheme>https?)://
    (?P<host>[^/?\#\s]+)/
    (?P<user>[^/?\#\s]+)/
    (?P<repo>[^/?\#\s]+)/
    (?P<path>(?:[^/?\#\s]+/)+)
    (?P<file>[^/?\#\s]+)
    (?:\?[^\#\s]*)?
    (?:\#(?:L(?:ines-)?(?P<start>\d+)(?:-L?(?P<end>\d+))?$|\S*))?
    $
    """,
    re.IGNORECASE | re.VERBOSE,
)
_EXT_RE = re.compile(r"^[A-Za-z0-9_+-]{1,10}$")


def _trim(candidate: str) -> str:
    return candidate.rstrip(_TRAILING_PUNCTUATION)


def _split_ext(file: str) -> str | None:
    stem, dot, suffix = file.rpartition(".")
    if not dot or not stem or not _EXT_RE.match(suffix):
        return None
    return suffix


def parse_url(url: str) -> MatchResult | None:
    """Split a forge file URL into its parts, or return None if it has no file path."""
    m = _URL_PARTS_RE.match(url)
    if not m:
        return None

    start = m.group("start")
    end = m.group("end")
    file = m.group("file")
    return MatchResult(
        url=url,
        scheme=m.group("scheme").lower(),
        host=m.group("host"),
        user=m.group("user"),
        repo=m.group("repo"),
        path=m.group("path"),
        file=file,
        ext=_split_ext(file),
        line_start=int(start) if start else None,
        line_end=int(end) if end else None,
    )


def iter_matches(text: str) -> Iterator[MatchResult]:
    """Yield forge file links in order of appearance, each distinct URL once."""
    seen: set[str] = set()
    for candidate in _CANDIDATE_RE.finditer(text or ""):
        url = _trim(candidate.group(0))
        if url in seen:
            continue
        seen.add(url)

        match = parse_url(url)
        if match is not None:
            yield match


def replace_matches(text: str, replacements: Mapping[str, str]) -> str:
    """Replace every occurrence of each matched URL with its rendered text."""
    if not replacements:
        return text

    def _substitute(candidate: re.Match[str]) -> str:
        raw = candidate.group(0)
        url = _trim(raw)
        replacement = replacements.get(url)
        if replacement is None:
            return raw
        return replacement + raw[len(url):]

    return _CANDIDATE_RE.sub(_substitute, text)
