"""CLI entry point for the purchase tracker."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from .codec import DecodeError
from .config import load_config
from .prompts import PurchasePrompter
from .report import bucket_by_category, report, report_as_dict
from .store import PurchaseFile

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="purchases",
        description="Record purchases and report spend per category",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to a TOML configuration file",
    )
    parser.add_argument(
        "--file",
        "-f",
        type=str,
        default=None,
        help="Purchase file (default: purchase.txt)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # add
    sub.add_parser("add", help="Enter purchases interactively")

    # report
    report_parser = sub.add_parser("report", help="Show spend per category")
    report_parser.add_argument("--json", action="store_true", help="Output as JSON")
    report_parser.add_argument(
        "--strict", action="store_true",
        help="Fail on records with missing fields instead of skipping them",
    )
    report_parser.add_argument(
        "--pdf", type=str, default=None, metavar="FILE",
        help="Also write the report to a PDF file",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    load_dotenv()
    config = load_config(args.config)
    level = "DEBUG" if args.verbose else config.logging.level
    logging.basicConfig(
        level=_log_level(level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    store = PurchaseFile(args.file or config.store.path, strict=config.store.strict)

    match args.command:
        case "add":
            _cmd_add(config, store)
        case "report":
            _cmd_report(store, args)


def _log_level(name: str) -> int:
    """Map a level name to its number, WARNING for anything unknown."""
    level = logging.getLevelName(name.upper())
    if isinstance(level, int):
        return level
    logger.warning("Unknown log level %r, using WARNING", name)
    return logging.WARNING


def _cmd_add(config, store: PurchaseFile) -> None:
    prompter = PurchasePrompter(store, affirmative=config.prompt.affirmative)
    try:
        added = prompter.run()
    except OSError as e:
        print(f"Could not write {store.path}: {e}", file=sys.stderr)
        sys.exit(1)
    logger.info("Added %d purchases to %s", len(added), store.path)


def _cmd_report(store: PurchaseFile, args) -> None:
    strict = True if args.strict else None
    try:
        purchases = store.load_all(strict=strict)
    except FileNotFoundError:
        print(f"No purchase file found at {store.path}", file=sys.stderr)
        sys.exit(1)
    except DecodeError as e:
        print(f"Corrupt record in {store.path}: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Could not read {store.path}: {e}", file=sys.stderr)
        sys.exit(1)

    buckets = bucket_by_category(purchases)

    if args.json:
        print(json.dumps(report_as_dict(buckets), ensure_ascii=False, indent=2))
    else:
        report(buckets)

    if args.pdf:
        from .pdf import generate_pdf

        try:
            pdf_path = generate_pdf(buckets, args.pdf)
        except (ImportError, OSError) as e:
            print(f"PDF error: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"PDF saved: {pdf_path}", file=sys.stderr)
