#!/usr/bin/env python3
"""
Receipt Analyzer Main Entry Point

Pipeline (strictly sequential):
1. Fetch the receipt JSON from the receipt endpoint
2. Parse it into products sorted by name
3. Split products into Domestic and Imported groups
4. Total each group and print the report

Every failure is terminal: one line goes to stdout and the run stops.
"""

import argparse
import logging
import math
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .aggregator import summarize_group
from .classifier import partition_products
from .errors import ConfigError, ErrorKind, Failure, Result
from .fetcher import ReceiptFetcher
from .logger import setup_logger
from .parser import parse_receipt_json
from .reporter import render_report
from .settings_loader import LOG_LEVELS, load_settings

logger = logging.getLogger(__name__)


def analyze_receipt(text: str, allow_empty: bool = False) -> Result[List[str]]:
    """
    Turn raw receipt JSON into report lines

    Args:
        text: Receipt JSON text
        allow_empty: Render an empty report for "[]" instead of failing

    Returns:
        Result with the report lines, or a PARSE / NO_PRODUCTS failure
    """
    parsed = parse_receipt_json(text)
    if not parsed.ok:
        return Result(error=parsed.error)

    products = parsed.value
    if not products and not allow_empty:
        logger.warning("Receipt contains no products")
        return Result.failure(ErrorKind.NO_PRODUCTS)

    groups = partition_products(products)
    lines = render_report(
        groups,
        summarize_group(groups.domestic),
        summarize_group(groups.imported),
    )
    return Result.success(lines)


def report_failure(failure: Failure, out: TextIO) -> int:
    """Print the fixed message for a failure and return its exit code"""
    print(failure.message, file=out)
    return failure.kind.exit_code


def run(fetcher: ReceiptFetcher, allow_empty: bool = False, out: Optional[TextIO] = None) -> int:
    """
    Run the full pipeline and write the report

    Args:
        fetcher: Source of the receipt JSON
        allow_empty: Render an empty report for an empty receipt
        out: Output stream (defaults to stdout)

    Returns:
        Process exit code (0 on success)
    """
    out = out or sys.stdout

    fetched = fetcher.fetch()
    if not fetched.ok:
        return report_failure(fetched.error, out)

    report = analyze_receipt(fetched.value, allow_empty=allow_empty)
    if not report.ok:
        return report_failure(report.error, out)

    for line in report.value:
        print(line, file=out)
    logger.info("Receipt report complete")
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='receipt-analyzer',
        description='Fetch receipt details and print a Domestic/Imported cost report',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        '--url',
        type=str,
        default=None,
        help='Receipt endpoint URL (default: built-in receipt endpoint)'
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=None,
        help='Request timeout in seconds (default: 10)'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='YAML settings file (keys: url, timeout, allow_empty, log_level)'
    )
    parser.add_argument(
        '--allow-empty',
        action='store_true',
        default=None,
        help='Print an empty report when the receipt has no items'
    )
    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help='Logging level for diagnostics on stderr (default: WARNING)'
    )
    parser.add_argument(
        '--log-dir',
        type=str,
        default=None,
        help='Also write logs to <log-dir>/receipt_analyzer.log'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for receipt-analyzer"""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.timeout is not None and not (math.isfinite(args.timeout) and args.timeout > 0):
        parser.error("--timeout must be a positive number")

    try:
        settings = load_settings(Path(args.config) if args.config else None)
    except ConfigError as e:
        parser.error(str(e))

    url = args.url or settings.url
    timeout = args.timeout if args.timeout is not None else settings.timeout
    allow_empty = settings.allow_empty if args.allow_empty is None else args.allow_empty
    log_level = args.log_level or settings.log_level

    try:
        setup_logger(log_level, Path(args.log_dir) if args.log_dir else None)
    except OSError as e:
        parser.error(f"Cannot write logs to {args.log_dir}: {e}")
    logger.info(f"Receipt URL: {url}")
    logger.info(f"Timeout: {timeout}")

    return run(ReceiptFetcher(url, timeout), allow_empty=allow_empty)


if __name__ == "__main__":
    sys.exit(main())
