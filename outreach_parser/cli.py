"""Command line interface for previewing how a pasted blob will be parsed."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TextIO

from .config import DEFAULT_SETTINGS, load_settings
from .ingestion import load_blob, results_to_dataframe
from .models import BatchParseResult
from .orchestrator import BatchOrchestrator


def build_parser(prog: str | None = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Recover names, phone numbers and room numbers from pasted contact lines",
    )
    parser.add_argument("input", help="Path to a text file, CSV or Excel spreadsheet, or '-' for stdin")
    parser.add_argument(
        "--config",
        default=None,
        help="Optional configuration file (YAML or JSON) with a 'parser' section",
    )
    parser.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="How to print the parsed contacts",
    )
    parser.add_argument(
        "--concurrent",
        action="store_true",
        help="Parse lines on a thread pool (output order is preserved)",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=None,
        help="Maximum number of workers to use in concurrent mode",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING)",
    )
    return parser


def parse_args(argv: list[str] | None = None, prog: str | None = None) -> argparse.Namespace:
    return build_parser(prog=prog).parse_args(argv)


def _print_table(result: BatchParseResult, stream: TextIO) -> None:
    frame = results_to_dataframe(result, include_raw_text=False)
    if frame.empty:
        print("No contacts recognised.", file=stream)
    else:
        print(frame.to_string(index=False), file=stream)
    print(
        f"\nTotal lines: {result.total_lines}  Contacts found: {result.successfully_parsed}  Errors: {len(result.errors)}",
        file=stream,
    )
    for message in result.error_messages:
        print(f"  {message}", file=stream)


def main(argv: list[str] | None = None, prog: str | None = None) -> int:
    args = parse_args(argv, prog=prog)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    settings = load_settings(args.config) if args.config else DEFAULT_SETTINGS
    blob = sys.stdin.read() if args.input == "-" else load_blob(args.input)

    orchestrator = BatchOrchestrator(
        settings,
        concurrent=args.concurrent,
        max_workers=args.max_workers,
    )
    result = orchestrator.parse(blob)

    if args.format == "json":
        print(json.dumps(result.as_dict(), indent=2, ensure_ascii=False))
    else:
        _print_table(result, sys.stdout)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
