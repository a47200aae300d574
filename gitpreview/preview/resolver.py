"""Map forge file links to the URL that serves the unrendered file."""

from collections.abc import Callable

from gitpreview.preview.errors import UnsupportedHostError
from gitpreview.preview.models import MatchResult

# Hosts whose raw endpoints need auth or an API round-trip.
_REJECTED_HOSTS = frozenset({"bitbucket.org"})

# Earliest marker segment wins: GitLab "-/blob/", Gitea/Forgejo "src/branch/".
_BLOB_SEGMENT = "blob"
_SRC_SEGMENT = "src"
_SRC_REF_KINDS = frozenset({"branch", "commit", "tag"})


def _normalize_host(host: str) -> str:
    host = host.lower()
    return host[4:] if host.startswith("www.") else host


def _resolve_github(match: MatchResult) -> str:
    segments = match.path.rstrip("/").split("/")
    if segments[0] not in ("blob", "raw") or len(segments) < 2:
        raise UnsupportedHostError(match.host, "not a github file link")
    ref_path = "/".join(segments[1:])
    return f"https://raw.githubusercontent.com/{match.user}/{match.repo}/{ref_path}/{match.file}"


def _resolve_by_segment(match: MatchResult) -> str:
    segments = match.path.rstrip("/").split("/")
    for index, segment in enumerate(segments):
        is_src_ref = (
            segment == _SRC_SEGMENT
            and index + 1 < len(segments)
            and segments[index + 1] in _SRC_REF_KINDS
        )
        if segment == _BLOB_SEGMENT or is_src_ref:
            segments[index] = "raw"
            path = "/".join(segments)
            return f"{match.scheme}://{match.host}/{match.user}/{match.repo}/{path}/{match.file}"
    raise UnsupportedHostError(match.host, "no raw file rule")


_HOST_RESOLVERS: dict[str, Callable[[MatchResult], str]] = {
    "github.com": _resolve_github,
}


def resolve_raw_url(match: MatchResult) -> str:
    """Return the raw-content URL for a matched link.

    Raises:
        UnsupportedHostError: The host is rejected or the path has no blob/src segment.
    """
    host = _normalize_host(match.host)
    if host in _REJECTED_HOSTS:
        raise UnsupportedHostError(match.host, "rejected host")

    resolver = _HOST_RESOLVERS.get(host, _resolve_by_segment)
    return resolver(match)
