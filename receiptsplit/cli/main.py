#!/usr/bin/env python3

import argparse
import logging
from collections.abc import Sequence


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Split a receipt between people",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  parse <text_file> [--json] Extract items from OCR text or an AI JSON response
                             ("-" reads stdin)
  split <text_file> --person NAME ... --assign INDEX=NAME[,NAME]
                             Assign items and show what everyone owes
  scan <image> [--ocr-url]   Send a receipt photo to the OCR service

Examples:
  receiptsplit parse receipt.txt
  receiptsplit split receipt.txt --person Alice --person Bob --assign 1=Alice,Bob --assign 2=Bob
""",
    )
    parser.add_argument("--config", default=None, help="Settings TOML file (default: ./receiptsplit.toml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parse_parser = subparsers.add_parser("parse", help="Extract items from OCR text")
    parse_parser.add_argument("text_file", help='OCR text file, or "-" for stdin')
    parse_parser.add_argument("--no-placeholders", action="store_true", help="Never seed placeholder items")
    parse_parser.add_argument("--json", action="store_true", help="Input is an AI extractor JSON response")

    split_parser = subparsers.add_parser("split", help="Assign items and compute per-person totals")
    split_parser.add_argument("text_file", help='OCR text file, or "-" for stdin')
    split_parser.add_argument("--person", action="append", help="Participant name (repeatable)")
    split_parser.add_argument(
        "--assign",
        action="append",
        metavar="INDEX=NAMES",
        help="Toggle item INDEX (1-based) for comma-separated NAMES (repeatable)",
    )
    split_parser.add_argument("--no-placeholders", action="store_true", help="Never seed placeholder items")
    split_parser.add_argument("--json", action="store_true", help="Input is an AI extractor JSON response")

    scan_parser = subparsers.add_parser("scan", help="Scan a receipt image via the OCR service")
    scan_parser.add_argument("image", help="Path to receipt image")
    scan_parser.add_argument("--ocr-url", default=None, help="OCR service URL (default: from settings)")
    scan_parser.add_argument("--no-placeholders", action="store_true", help="Never seed placeholder items")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.verbose:
        from receiptsplit.runtime import configure_logging, set_log_level

        configure_logging()
        set_log_level(logging.DEBUG)

    if args.command == "parse":
        from receiptsplit.cli.receipt import cmd_parse

        return cmd_parse(args)
    elif args.command == "split":
        from receiptsplit.cli.receipt import cmd_split

        return cmd_split(args)
    elif args.command == "scan":
        from receiptsplit.cli.receipt import cmd_scan

        return cmd_scan(args)

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
