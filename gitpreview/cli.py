"""Command line entry point: rewrite a message the way the plugin would."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from loguru import logger

from gitpreview.config.loader import load_config
from gitpreview.preview.errors import GitPreviewError
from gitpreview.preview.pipeline import PreviewPipeline


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gitpreview",
        description="Replace git forge file links in a message with code previews.",
    )
    parser.add_argument("text", nargs="?", help="Message text (read from stdin when omitted)")
    parser.add_argument("--url", help="Preview a single link and fail if it cannot be rendered")
    parser.add_argument("--config", type=Path, help="Path to config.json")
    parser.add_argument("--proxy", help="Prefix prepended to raw URLs")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


async def run(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    if args.proxy is not None:
        config.fetch.proxy = args.proxy
    pipeline = PreviewPipeline(config)

    if args.url:
        try:
            preview = await pipeline.preview_url(args.url)
        except GitPreviewError as e:
            logger.error("{}", e)
            return 1
        print(preview.text)
        return 0

    text = args.text if args.text is not None else sys.stdin.read()
    print(await pipeline.process(text))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    return asyncio.run(run(args))


if __name__ == "__main__":
    raise SystemExit(main())
