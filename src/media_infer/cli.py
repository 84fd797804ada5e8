"""
cli.py
------

Command-line interface for media-infer.

Usage:
    media-infer PATH [PATH ...] [--all] [--json] [--read-size N] [--log-level L]
    media-infer --formats

Exit codes:
    0  every path was identified
    1  at least one path was not identified
    2  at least one path could not be opened or read
"""

import argparse
import json
import logging
import sys
from typing import Any

import structlog

from media_infer.config import get_settings
from media_infer.core.classifier import identify, matching_formats
from media_infer.core.reader import open_media, read_prefix
from media_infer.formats import ContainerType
from media_infer.utils.exceptions import AcquisitionError
from media_infer.utils.logging_config import configure_logging

logger = structlog.wrap_logger(logging.getLogger(__name__))

EXIT_OK = 0
EXIT_NOT_IDENTIFIED = 1
EXIT_ACQUISITION_ERROR = 2


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="media-infer",
        description="Identify media container formats by their magic bytes.",
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="Files to inspect")
    parser.add_argument("--all", action="store_true", dest="show_all",
                        help="Also list every matching format, not only the first")
    parser.add_argument("--json", action="store_true", dest="as_json",
                        help="Print one JSON object per path")
    parser.add_argument("--read-size", type=_positive_int, default=None,
                        help="Bytes to read from each file (default from settings)")
    parser.add_argument("--log-level", default=None, type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Log level override")
    parser.add_argument("--formats", action="store_true",
                        help="List accepted format names and exit")
    return parser


def inspect_path(path: str, read_size: int | None = None, show_all: bool = False) -> dict[str, Any]:
    """Classify one path and describe the outcome as a plain dict."""
    record: dict[str, Any] = {"path": path, "format": None, "display_name": None, "error": None}

    try:
        with open_media(path) as stream:
            data = read_prefix(stream, read_size)
    except AcquisitionError as e:
        record["error"] = e.message
        return record

    container = identify(data)
    if container is not None:
        record["format"] = container.value
        record["display_name"] = container.display_name
    if show_all:
        record["matches"] = [c.value for c in matching_formats(data)]
    return record


def _render(record: dict[str, Any]) -> str:
    if record["error"]:
        line = f"{record['path']}: error: {record['error']}"
    elif record["format"] is None:
        line = f"{record['path']}: not identified"
    else:
        line = f"{record['path']}: {record['display_name']}"
    if record.get("matches"):
        line += f" (matches: {', '.join(record['matches'])})"
    return line


def _exit_code(records: list[dict[str, Any]]) -> int:
    code = EXIT_OK
    for record in records:
        if record["error"]:
            return EXIT_ACQUISITION_ERROR
        if record["format"] is None:
            code = EXIT_NOT_IDENTIFIED
    return code


def cmd_formats() -> int:
    for name in ContainerType.names():
        print(f"{name:8} {ContainerType.from_name(name).display_name}")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if args.formats:
        return cmd_formats()

    if not args.paths:
        parser.error("at least one PATH is required")

    settings = get_settings()
    read_size = args.read_size or settings.detection.read_size
    logger.debug("Inspecting files", count=len(args.paths), read_size=read_size)

    records = []
    for path in args.paths:
        record = inspect_path(path, read_size=read_size, show_all=args.show_all)
        records.append(record)
        if args.as_json:
            print(json.dumps(record), flush=True)
        else:
            print(_render(record), flush=True)

    return _exit_code(records)


if __name__ == "__main__":
    sys.exit(main())
