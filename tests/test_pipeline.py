import httpx
import pytest

from gitpreview.config.schema import Config
from gitpreview.preview.cache import ContentCache
from gitpreview.preview.errors import FetchError, MalformedUrlError
from gitpreview.preview.pipeline import PreviewPipeline, truncate_message

URL = "https://github.com/acme/widgets/blob/main/src/app.sh#L3-L5"
RAW = "https://raw.githubusercontent.com/acme/widgets/main/src/app.sh"
OTHER_URL = "https://gitlab.com/acme/widgets/-/blob/main/lib/util.py#L1"
OTHER_RAW = "https://gitlab.com/acme/widgets/-/raw/main/lib/util.py"


class FakeFetcher:
    """Serves raw content from a dict and records requested references."""

    def __init__(self, files: dict[str, str]):
        self.files = files
        self.cache = ContentCache()
        self.requests: list[str] = []

    async def fetch(self, reference: str) -> str:
        self.requests.append(reference)
        if reference not in self.files:
            raise FetchError(reference, status=404)
        return self.files[reference]


def _pipeline(files: dict[str, str], config: Config | None = None) -> tuple[PreviewPipeline, FakeFetcher]:
    fetcher = FakeFetcher(files)
    return PreviewPipeline(config or Config(), fetcher=fetcher), fetcher


@pytest.mark.asyncio
async def test_text_without_links_is_unchanged() -> None:
    pipeline, fetcher = _pipeline({})
    text = "no links here\n" * 300

    assert await pipeline.process(text) == text
    assert fetcher.requests == []


@pytest.mark.asyncio
async def test_link_is_replaced_with_preview() -> None:
    pipeline, fetcher = _pipeline({RAW: "a\nb\nc\nd\ne\nf"})

    result = await pipeline.process(f"look at {URL}")

    assert result == f"look at **app.sh** Lines: 3-5\n```sh\nc\nd\ne\n```\n<{URL}>"
    assert fetcher.requests == [RAW]


@pytest.mark.asyncio
async def test_duplicate_links_fetch_once_and_replace_all() -> None:
    pipeline, fetcher = _pipeline({RAW: "a\nb\nc\nd\ne\nf"})

    result = await pipeline.process(f"{URL}\n{URL}")

    assert fetcher.requests == [RAW]
    assert result.count("```sh\nc\nd\ne\n```") == 2


@pytest.mark.asyncio
async def test_failed_fetch_does_not_drop_other_previews() -> None:
    pipeline, fetcher = _pipeline({OTHER_RAW: "import os\n"})

    result = await pipeline.process(f"{URL}\n{OTHER_URL}")

    assert fetcher.requests == [RAW, OTHER_RAW]
    assert result.startswith(URL + "\n")
    assert "**util.py** Line: 1-1\n```py\nimport os\n```" in result


@pytest.mark.asyncio
async def test_unsupported_host_is_left_untouched_without_fetching() -> None:
    pipeline, fetcher = _pipeline({})
    text = "https://bitbucket.org/acme/widgets/src/main/app.py#L1"

    assert await pipeline.process(text) == text
    assert fetcher.requests == []


@pytest.mark.asyncio
async def test_previews_keep_message_order() -> None:
    pipeline, _ = _pipeline({RAW: "a\nb\nc\nd\ne\nf", OTHER_RAW: "import os\n"})

    result = await pipeline.process(f"first {OTHER_URL} then {URL}")

    assert result.index("util.py") < result.index("app.sh")


@pytest.mark.asyncio
async def test_settings_changes_apply_without_rebuilding() -> None:
    config = Config()
    pipeline, _ = _pipeline({OTHER_RAW: "one\ntwo\nthree\n"}, config)
    link = OTHER_URL.split("#")[0]

    before = await pipeline.process(link)
    config.preview.default_lines = 2
    config.preview.message_format = "${code}"
    after = await pipeline.process(link)

    assert "one" in before and "two" not in before
    assert after == "one\ntwo"


@pytest.mark.asyncio
async def test_long_result_is_truncated_at_line_break() -> None:
    config = Config()
    config.preview.max_message_length = 60
    config.preview.max_lines = 25
    content = "\n".join(f"value_{i} = {i}" for i in range(1, 30))
    pipeline, _ = _pipeline({RAW: content}, config)

    result = await pipeline.process(URL.split("#")[0] + "#L1-L20")

    assert result.endswith("\n...")
    assert len(result) <= 60 + len("\n...")
    assert result.startswith("**app.sh** Lines: 1-20\n```sh\nvalue_1 = 1")


@pytest.mark.asyncio
async def test_preview_url_rejects_malformed_link() -> None:
    pipeline, _ = _pipeline({})

    with pytest.raises(MalformedUrlError):
        await pipeline.preview_url("hello there")


@pytest.mark.asyncio
async def test_preview_url_propagates_fetch_errors() -> None:
    pipeline, _ = _pipeline({})

    with pytest.raises(FetchError):
        await pipeline.preview_url(URL)


@pytest.mark.asyncio
async def test_real_fetcher_reuses_cache_across_messages(monkeypatch) -> None:
    requested: list[str] = []

    class StubClient:
        def __init__(self, *args, **kwargs):
            pass

        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc, tb):
            return False

        async def get(self, url, timeout=None):
            requested.append(url)
            return httpx.Response(200, text="a\nb\nc\nd\ne\nf")

    monkeypatch.setattr("gitpreview.preview.fetcher.httpx.AsyncClient", StubClient)
    pipeline = PreviewPipeline(Config())

    first = await pipeline.process(URL)
    second = await pipeline.process(f"again {URL}")

    assert requested == [RAW]
    assert "c\nd\ne" in first and "c\nd\ne" in second
    assert RAW in pipeline.cache


@pytest.mark.asyncio
async def test_invalid_link_authority_does_not_drop_other_previews(monkeypatch) -> None:
    bad_url = "https://gitlab.com:abc/acme/widgets/-/blob/main/lib/util.py#L1"

    class StubClient:
        def __init__(self, *args, **kwargs):
            pass

        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc, tb):
            return False

        async def get(self, url, timeout=None):
            httpx.URL(url)
            return httpx.Response(200, text="import os\n")

    monkeypatch.setattr("gitpreview.preview.fetcher.httpx.AsyncClient", StubClient)
    pipeline = PreviewPipeline(Config())

    result = await pipeline.process(f"{OTHER_URL}\n{bad_url}")

    assert "**util.py** Line: 1-1\n```py\nimport os\n```" in result
    assert result.endswith("\n" + bad_url)


@pytest.mark.asyncio
async def test_invalid_link_authority_raises_fetch_error(monkeypatch) -> None:
    class StubClient:
        def __init__(self, *args, **kwargs):
            pass

        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc, tb):
            return False

        async def get(self, url, timeout=None):
            httpx.URL(url)
            return httpx.Response(200, text="")

    monkeypatch.setattr("gitpreview.preview.fetcher.httpx.AsyncClient", StubClient)
    pipeline = PreviewPipeline(Config())

    with pytest.raises(FetchError) as exc:
        await pipeline.preview_url("https://gitlab.com:abc/acme/widgets/-/blob/main/x.py")

    assert exc.value.status is None


def test_truncate_message_cuts_at_last_newline() -> None:
    assert truncate_message("aaa\nbbb\nccc", 9) == "aaa\nbbb\n..."


def test_truncate_message_without_newline_cuts_at_limit() -> None:
    assert truncate_message("x" * 20, 10) == "x" * 10 + "\n..."


def test_truncate_message_short_text_unchanged() -> None:
    assert truncate_message("short", 1995) == "short"
