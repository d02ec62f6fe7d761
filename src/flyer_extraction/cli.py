#!/usr/bin/env python3
"""Command-line interface for the flyer extraction engine.

Commands:
  - flyer-extract text   : Extract event fields from OCR text (file or stdin)
  - flyer-extract image  : Run OCR on a flyer image, then extract

Typical usage:
  flyer-extract text flyer.txt --reference-date 2025-01-01
  cat flyer.txt | flyer-extract text - --format summary
  flyer-extract image flyer.png --json-logs
"""

from __future__ import annotations

import argparse
import datetime
import json
import sys
from pathlib import Path

from flyer_extraction.configs.settings import get_settings
from flyer_extraction.extraction.parser import EventTextParser, get_default_parser
from flyer_extraction.extraction.tables import load_extraction_tables
from flyer_extraction.formatting import format_record_summary
from flyer_extraction.observability.logging import (
    LoggingOptions,
    setup_logging,
    with_context,
)
from flyer_extraction.schemas.event import PartialEventRecord


def _reference_date(value: str) -> datetime.date:
    try:
        return datetime.date.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from e


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--reference-date",
        type=_reference_date,
        default=None,
        help="Date used to fill in omitted years (default: today)",
    )
    common.add_argument(
        "--format",
        "-f",
        choices=["json", "summary"],
        default="json",
        help="Output format",
    )
    common.add_argument("--json-logs", action="store_true", default=settings.LOG_JSON)
    common.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level")

    p = argparse.ArgumentParser(
        prog="flyer-extract", description="Extract event details from flyer text"
    )
    p.add_argument("--version", action="store_true", help="Print version and exit")
    sub = p.add_subparsers(dest="cmd")

    pt = sub.add_parser("text", parents=[common], help="Extract from OCR text")
    pt.add_argument("path", help="Text file, or '-' for stdin")

    pi = sub.add_parser("image", parents=[common], help="Run OCR, then extract")
    pi.add_argument("path", help="Flyer image file")
    pi.add_argument("--lang", default=settings.OCR_LANGUAGE, help="Tesseract language")
    pi.add_argument("--include-text", action="store_true", help="Print the OCR text too")

    return p.parse_args(argv)


def _build_parser() -> EventTextParser:
    path = get_settings().EXTRACTION_CONFIG_PATH
    if path:
        return EventTextParser(load_extraction_tables(Path(path)))
    return get_default_parser()


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _render(record: PartialEventRecord, fmt: str, text: str | None = None) -> str:
    if fmt == "summary":
        out = format_record_summary(record)
        if text is not None:
            out = f"{out}\n\n--- OCR text ---\n{text}"
        return out

    payload = record.to_form_data()
    if text is not None:
        payload = {"extractedText": text, **payload}
    return json.dumps(payload, indent=2, ensure_ascii=False)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI with the given arguments."""
    try:
        return _main_impl(argv)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ImportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _main_impl(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    if args.version:
        from flyer_extraction import __version__

        print(f"flyer-extract version {__version__}")
        return 0

    if not args.cmd:
        print("Error: Command required. Use --help for usage info.", file=sys.stderr)
        return 1

    logger = setup_logging(
        LoggingOptions(level=args.log_level, json_logs=args.json_logs)
    )
    parser = _build_parser()

    if args.cmd == "text":
        log = with_context(logger, source=args.path, stage="extract")
        text = _read_text(args.path)
        log.info(f"Read {len(text)} characters")
        record = parser.parse(text, args.reference_date)
        print(_render(record, args.format))
        return 0

    if args.cmd == "image":
        from flyer_extraction.ocr.processor import FlyerProcessor
        from flyer_extraction.ocr.tesseract import TesseractOCREngine

        settings = get_settings()
        if not Path(args.path).exists():
            raise FileNotFoundError(f"Image not found: {args.path}")

        engine = TesseractOCREngine(
            language=args.lang, tesseract_cmd=settings.TESSERACT_CMD
        )
        log = with_context(logger, source=args.path, stage="ocr", engine=engine.name)
        result = FlyerProcessor(engine, parser).process(args.path, args.reference_date)
        if result.ocr_error:
            log.error(f"OCR failed: {result.ocr_error}")
        print(
            _render(
                result.record,
                args.format,
                result.extracted_text if args.include_text else None,
            )
        )
        return 0 if result.ocr_error is None else 2

    return 1


if __name__ == "__main__":
    sys.exit(main())
