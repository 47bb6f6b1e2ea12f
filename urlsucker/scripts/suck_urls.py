"""
Replay captured JavaScript responses through the URL discovery engine.

Reads a JSONL capture (one response per line), extracts URL-like strings from
every JavaScript response, resolves them against the originating request and
prints the deduplicated results grouped by host.

Usage:
    urlsucker --input captures/javascript_events.jsonl
    urlsucker --input captures/javascript_events.jsonl --conservative
    urlsucker --input captures/javascript_events.jsonl --filter api --format json
    urlsucker --input captures/javascript_events.jsonl --output urls.json --format json
"""

import argparse
import sys
from typing import TextIO

from urlsucker.config import Config
from urlsucker.url_discovery.capture_loader import load_captured_responses
from urlsucker.url_discovery.models import ExtractionSettings, SnapshotRow
from urlsucker.url_discovery.reporter import write_json, write_table
from urlsucker.url_discovery.session import UrlSuckerSession
from urlsucker.utils.exceptions import CaptureFileNotFoundError
from urlsucker.utils.logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="urlsucker",
        description="Find URLs and paths hidden in captured JavaScript responses.",
    )
    parser.add_argument(
        "--input", "-i",
        required=True,
        help="Path to a JSONL capture of responses",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output file path (default: stdout)",
    )
    parser.add_argument(
        "--format", "-f",
        choices=["table", "json"],
        default="table",
        help="Output format (default: table)",
    )
    strategy = parser.add_mutually_exclusive_group()
    strategy.add_argument(
        "--greedy",
        dest="greedy",
        action="store_true",
        default=Config.GREEDY,
        help="Match any quoted string containing a '/' (default unless URLSUCKER_GREEDY=false)",
    )
    strategy.add_argument(
        "--conservative",
        dest="greedy",
        action="store_false",
        help="Only match quoted or parenthesized runs of URL characters",
    )
    parser.add_argument(
        "--filter",
        default="",
        help="Only show rows containing this text (case-insensitive)",
    )
    return parser


def run(input_path: str, greedy: bool, search_filter: str = "") -> list[SnapshotRow]:
    """
    Replay a capture file and return the resulting view rows.

    Raises:
        CaptureFileNotFoundError: If the capture file does not exist.
    """
    session = UrlSuckerSession(settings=ExtractionSettings(greedy=greedy))
    for response in load_captured_responses(input_path):
        session.handle_response_received(response)
    session.set_search_filter(search_filter)
    rows = session.rows()
    logger.info("Discovered %d URLs across %d hosts", len(session.store), len(session.store.origins()))
    return rows


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        rows = run(args.input, greedy=args.greedy, search_filter=args.filter)
    except CaptureFileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            _write_output(rows, f, args.format)
        print(f"Results written to {args.output}", file=sys.stderr)
    else:
        _write_output(rows, sys.stdout, args.format)


def _write_output(rows: list[SnapshotRow], output: TextIO, fmt: str) -> None:
    """Dispatch to the appropriate writer."""
    if fmt == "json":
        write_json(rows, output)
    else:
        write_table(rows, output)


if __name__ == "__main__":
    main()
