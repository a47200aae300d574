"""Render link previews from a message template."""

from __future__ import annotations

import re

from gitpreview.preview.extractor import CODE_FENCE
from gitpreview.preview.models import LineExtract, MatchResult, PreviewResult

DEFAULT_MESSAGE_FORMAT = "**${file}** ${linesLabel}: ${lineStart}-${lineEnd}${codeBlock}<${url}>"

TEMPLATE_KEYS: tuple[str, ...] = (
    "url",
    "host",
    "user",
    "repo",
    "path",
    "file",
    "ext",
    "rawUrl",
    "code",
    "codeLang",
    "codeBlock",
    "linesLabel",
    "lineStart",
    "lineEnd",
)

_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")


def code_block(code: str, lang: str) -> str:
    return f"\n{CODE_FENCE}{lang}\n{code}\n{CODE_FENCE}\n"


def lines_label(extract: LineExtract) -> str:
    return "Lines" if extract.line_end > extract.line_start else "Line"


def build_variables(
    match: MatchResult,
    raw_url: str,
    extract: LineExtract,
    *,
    default_highlight: str,
) -> dict[str, str]:
    """Build the complete set of values a message template may reference."""
    lang = (match.ext or "").lower() or default_highlight
    return {
        "url": match.url,
        "host": match.host,
        "user": match.user,
        "repo": match.repo,
        "path": match.path,
        "file": match.file,
        "ext": match.ext or "",
        "rawUrl": raw_url,
        "code": extract.code,
        "codeLang": lang,
        "codeBlock": code_block(extract.code, lang),
        "linesLabel": lines_label(extract),
        "lineStart": str(extract.line_start),
        "lineEnd": str(extract.line_end),
    }


def render_template(template: str, variables: dict[str, str]) -> str:
    """Substitute ``${name}`` placeholders; unknown names render as empty text."""
    return _PLACEHOLDER_RE.sub(lambda m: variables.get(m.group(1).strip(), ""), template)


def render_preview(
    match: MatchResult,
    raw_url: str,
    extract: LineExtract,
    *,
    message_format: str = DEFAULT_MESSAGE_FORMAT,
    default_highlight: str = "sh",
) -> PreviewResult:
    variables = build_variables(match, raw_url, extract, default_highlight=default_highlight)
    return PreviewResult(
        text=render_template(message_format or DEFAULT_MESSAGE_FORMAT, variables),
        file_name=match.file,
        code_lang=variables["codeLang"],
        lines_label=variables["linesLabel"],
        line_start=extract.line_start,
        line_end=extract.line_end,
        code_block=variables["codeBlock"],
        url=match.url,
        raw_url=raw_url,
        variables=variables,
    )
