"""CLI entrypoint for stripping emoji from the documentation sources."""

from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from docclean.config import DEFAULT_CONFIG, resolve_source_dir
from docclean.processing.stripper import ERROR_POLICIES, StripResult, strip_directory
from docclean.services.document_service import (
    DocumentError,
    RemovalReport,
    SourceDirectoryMissingError,
)

LOGGER = logging.getLogger("docclean")


def _extension(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("extension must not be empty")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Remove emoji from markdown documents in place")
    parser.add_argument(
        "source_dir",
        nargs="?",
        type=Path,
        help="Directory holding the markdown documents "
        f"(default: ${DEFAULT_CONFIG.source_dir_env_vars[0]} or {DEFAULT_CONFIG.source_dir})",
    )
    parser.add_argument(
        "--extension",
        default=DEFAULT_CONFIG.extension,
        type=_extension,
        help="File name suffix of documents to clean (default: .md)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would be removed without writing any file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Dry run that exits with status 1 if any document contains emoji",
    )
    parser.add_argument(
        "--backup-suffix",
        help="Save each original as <name><suffix> before rewriting it (e.g. .bak)",
    )
    parser.add_argument(
        "--on-error",
        default=DEFAULT_CONFIG.on_error,
        choices=list(ERROR_POLICIES),
        help="Abort on the first unreadable/unwritable document or skip it (default: abort)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def format_report(report: RemovalReport, *, dry_run: bool = False) -> str:
    prefix = "[dry-run] " if dry_run else ""
    return f"{prefix}Processed: {report.filename} ({report.removed} characters removed)"


def format_summary(result: StripResult) -> str:
    summary = (
        f"Done: {result.total_removed} characters removed from "
        f"{result.changed} of {len(result.reports)} files in {result.source_dir}"
    )
    if result.skipped:
        summary += f" ({len(result.skipped)} skipped: {', '.join(result.skipped)})"
    return summary


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))
    load_dotenv()

    dry_run = args.dry_run or args.check
    config = dataclasses.replace(
        DEFAULT_CONFIG,
        extension=args.extension,
        dry_run=dry_run,
        backup_suffix=args.backup_suffix,
        on_error=args.on_error,
    )
    source_dir = resolve_source_dir(args.source_dir, config)

    try:
        result = strip_directory(
            source_dir,
            config=config,
            on_report=lambda report: print(format_report(report, dry_run=dry_run)),
        )
    except SourceDirectoryMissingError as exc:
        LOGGER.error("%s", exc)
        return 1
    except DocumentError as exc:
        LOGGER.error("Aborted: %s", exc)
        return 1
    except ValueError as exc:
        LOGGER.error("%s", exc)
        return 1

    print()
    print(format_summary(result))

    if args.check and result.total_removed:
        LOGGER.error("Emoji found in %d document(s)", result.changed)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
