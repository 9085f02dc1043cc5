"""Receipt command handlers used by the unified CLI."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from receiptsplit.application.session import SplitSession
from receiptsplit.receipt.formatter import format_items, format_results
from receiptsplit.receipt.receipt_parser import parse_receipt_text
from receiptsplit.receipt.structured_response import parse_structured_response
from receiptsplit.runtime import Settings, get_logger, load_settings

logger = get_logger(__name__)


def _print_error(error: str) -> None:
    for line in error.splitlines():
        print(line)


def _load_settings(args: argparse.Namespace) -> Settings | None:
    try:
        return load_settings(getattr(args, "config", None))
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}")
        return None


def _read_text(source: str) -> str | None:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.exists():
        print(f"Error: file not found: {path}")
        return None
    return path.read_text(encoding="utf-8")


def _seed_placeholders(args: argparse.Namespace, settings: Settings) -> bool:
    return settings.seed_placeholders and not getattr(args, "no_placeholders", False)


def _parse_assignment(assignment: str) -> tuple[int, list[str]] | None:
    """Parse "INDEX=Name1,Name2" into (1-based index, names)."""
    index_text, sep, names_text = assignment.partition("=")
    if not sep or not index_text.strip().isdigit():
        return None
    names = [name.strip() for name in names_text.split(",") if name.strip()]
    return int(index_text.strip()), names


def cmd_parse(args: argparse.Namespace) -> int:
    """Parse receipt text and list the extracted items."""
    settings = _load_settings(args)
    if settings is None:
        return 1
    text = _read_text(args.text_file)
    if text is None:
        return 1

    if getattr(args, "json", False):
        items = parse_structured_response(text, seed_placeholders=_seed_placeholders(args, settings))
    else:
        items = parse_receipt_text(
            text,
            seed_placeholders=_seed_placeholders(args, settings),
            extra_noise_keywords=settings.extra_noise_keywords,
        )
    print(format_items(items, settings.currency_symbol))
    return 0 if items else 1


def cmd_split(args: argparse.Namespace) -> int:
    """Parse receipt text, apply assignments and print what everyone owes."""
    settings = _load_settings(args)
    if settings is None:
        return 1
    text = _read_text(args.text_file)
    if text is None:
        return 1

    session = SplitSession(
        seed_placeholders=_seed_placeholders(args, settings),
        extra_noise_keywords=settings.extra_noise_keywords,
    )
    for name in args.person or []:
        error = session.add_participant(name)
        if error is not None:
            print(f"Invalid participant {name!r}: {error}")
            return 1

    loaded = session.load_structured_response(text) if getattr(args, "json", False) else session.load_text(text)
    if not loaded:
        _print_error(session.state.error_message or "No items found.")
        return 1

    items = session.state.items
    for assignment in args.assign or []:
        parsed = _parse_assignment(assignment)
        if parsed is None:
            print(f"Invalid assignment {assignment!r}; expected INDEX=Name1,Name2")
            return 1
        index, names = parsed
        if not 1 <= index <= len(items):
            print(f"Invalid assignment {assignment!r}; item index must be between 1 and {len(items)}")
            return 1
        for name in names:
            if name not in session.state.participants:
                print(f"Invalid assignment {assignment!r}; unknown participant {name!r}")
                return 1
            session.toggle_assignment(items[index - 1].id, name)

    print(format_items(session.state.items, settings.currency_symbol))
    print()
    print(format_results(session.person_totals(), session.summary(), settings.currency_symbol))
    return 0


def cmd_scan(args: argparse.Namespace) -> int:
    """Send a receipt image to the OCR service and list the extracted items."""
    from receiptsplit.runtime.ocr_client import OcrServiceExtractor

    settings = _load_settings(args)
    if settings is None:
        return 1

    image_path = Path(args.image)
    if not image_path.exists():
        logger.error("Receipt file not found: %s", image_path)
        print(f"Error: Receipt file not found: {image_path}")
        return 1

    extractor = OcrServiceExtractor(args.ocr_url or settings.ocr_url, timeout=settings.ocr_timeout)
    session = SplitSession(
        seed_placeholders=_seed_placeholders(args, settings),
        extra_noise_keywords=settings.extra_noise_keywords,
    )
    if not session.process_receipt_image(image_path.read_bytes(), extractor):
        _print_error(session.state.error_message or "Receipt processing failed.")
        return 1

    print(format_items(session.state.items, settings.currency_symbol))
    return 0
