"""Errors raised while building link previews."""


class GitPreviewError(Exception):
    """Base class for preview pipeline failures."""


class UnsupportedHostError(GitPreviewError):
    """Raised when a forge link has no raw-content rule."""

    def __init__(self, host: str, reason: str = "unsupported host"):
        super().__init__(f"{reason}: {host}")
        self.host = host
        self.reason = reason


class FetchError(GitPreviewError):
    """Raised when raw file content cannot be retrieved."""

    def __init__(self, reference: str, status: int | None = None, detail: str = ""):
        message = f"failed to fetch {reference}"
        if status is not None:
            message += f" (HTTP {status})"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.reference = reference
        self.status = status


class MalformedUrlError(GitPreviewError):
    """Raised when a single-link request does not look like a forge file URL."""

    def __init__(self, url: str):
        super().__init__(f"not a git file link: {url}")
        self.url = url
