"""
Command-line entry point.

Usage:
    slack-thread-archiver <slack-thread-url> [output-dir] [--debug]

Environment variables (set in .env file):
    SLACK_BOT_TOKEN=xoxb-... - Slack token with channels:history and files:read
    OUTPUT_DIR=./slack_thread - Default output directory
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from slack_archiver.config import get_settings
from slack_archiver.errors import ArchiverError
from slack_archiver.services.pipeline import ArchivePipeline

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slack-thread-archiver",
        description="Save a Slack thread (messages and images) as Markdown and a ZIP archive.",
    )
    parser.add_argument("url", nargs="?", help="Slack thread permalink")
    parser.add_argument(
        "output_dir",
        nargs="?",
        default=None,
        help="Output directory (default: OUTPUT_DIR setting or ./slack_thread)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(args.debug or settings.debug)

    if not args.url:
        print("Error: pass the Slack thread URL as the first argument", file=sys.stderr)
        return 1

    pipeline = ArchivePipeline.from_settings(settings, output_dir=args.output_dir)

    try:
        result = asyncio.run(pipeline.run(args.url))
    except (ArchiverError, OSError) as e:
        cause = f" (caused by: {e.__cause__!r})" if e.__cause__ else ""
        print(f"Error: {e}{cause}", file=sys.stderr)
        return 1

    print(f"Thread saved to {result.bundle_dir}")
    print(
        f"Messages: {result.message_count}, images: "
        f"{result.images_downloaded}/{result.images_planned} downloaded"
    )
    print(f"Archive: {result.archive_path}")
    print("Done!")
    return 0


def main_entry() -> None:
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
