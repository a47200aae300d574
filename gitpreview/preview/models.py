"""Shared preview pipeline models."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class MatchResult:
    """One forge file link found in a message."""

    url: str
    scheme: str
    host: str
    user: str
    repo: str
    path: str
    file: str
    ext: str | None = None
    line_start: int | None = None
    line_end: int | None = None


@dataclass(slots=True)
class LineExtract:
    """Selected and cleaned lines of a file."""

    code: str
    line_start: int
    line_end: int

    @property
    def line_count(self) -> int:
        return self.line_end - self.line_start + 1


@dataclass(slots=True)
class PreviewResult:
    """Rendered preview plus the template values it was built from."""

    text: str
    file_name: str
    code_lang: str
    lines_label: str
    line_start: int
    line_end: int
    code_block: str
    url: str
    raw_url: str
    variables: dict[str, str] = field(default_factory=dict)
