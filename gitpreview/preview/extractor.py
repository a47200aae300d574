"""Line range selection and cleanup for code previews."""

from __future__ import annotations

from gitpreview.preview.models import LineExtract

EMPTY_RANGE_PLACEHOLDER = "(no content in range)"
CODE_FENCE = "```"
TAB_WIDTH = 4


def resolve_line_range(
    line_start: int | None,
    line_end: int | None,
    *,
    default_lines: int,
    max_lines: int,
) -> tuple[int, int]:
    """Return the effective 1-indexed inclusive (start, end) for a request."""
    start = max(1, line_start or 1)
    default_lines = max(1, default_lines)
    max_lines = max(1, max_lines)

    end = line_end if line_end is not None else start + default_lines - 1
    end = max(end, start)
    return start, min(end, start + max_lines - 1)


def dedent_block(text: str, tab_width: int = TAB_WIDTH) -> str:
    """Expand tab indentation and strip the indentation shared by all non-blank lines."""
    lines = [line.replace("\t", " " * tab_width) for line in text.split("\n")]
    indents = [len(line) - len(line.lstrip(" ")) for line in lines if line.strip()]
    if not indents:
        return "\n".join(line.strip(" ") for line in lines)

    width = min(indents)
    if not width:
        return "\n".join(lines)
    return "\n".join(line[width:] if line.strip() else line.lstrip(" ") for line in lines)


def escape_code_fences(text: str, marker: str) -> str:
    """Replace triple backticks so a snippet cannot close its code block early."""
    if not marker or CODE_FENCE in marker:
        return text

    # Replacing can join stray backticks into a new fence; each pass shrinks the text.
    for _ in range(len(text)):
        if CODE_FENCE not in text:
            break
        text = text.replace(CODE_FENCE, marker)
    return text


def extract_lines(
    text: str,
    line_start: int | None = None,
    line_end: int | None = None,
    *,
    default_lines: int = 1,
    max_lines: int = 25,
    fence_marker: str = "~~~",
) -> LineExtract:
    """Select an inclusive line range from a file and clean it up for display."""
    start, end = resolve_line_range(
        line_start, line_end, default_lines=default_lines, max_lines=max_lines
    )

    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    lines = [line.rstrip("\r") for line in lines]

    selected = lines[start - 1:end]
    end = max(start, min(end, len(lines)))
    if not selected:
        return LineExtract(code=EMPTY_RANGE_PLACEHOLDER, line_start=start, line_end=end)

    code = dedent_block("\n".join(selected))
    code = escape_code_fences(code, fence_marker)
    if not code.strip():
        code = EMPTY_RANGE_PLACEHOLDER
    return LineExtract(code=code, line_start=start, line_end=end)
