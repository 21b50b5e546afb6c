"""CLI entry point for CSV import.

Usage:
    python -m scripts.import_csv [--file data.csv] [--dry-run] [--log-level DEBUG]

Reads NOTION_TOKEN and NOTION_PAGE_ID from the environment (or a .env file).
Without --file a file dialog is shown.
"""

import argparse
import logging
import sys

from ingestion.importer import run_import
from ingestion.selection import DialogSelector, PathSelector
from notionflow import create_client
from notionflow.config import LOG_LEVELS, Settings
from notionflow.errors import ConfigurationError

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Import a CSV file into a new Notion table")
    parser.add_argument("--file", help="Path to CSV file (opens a file dialog when omitted)")
    parser.add_argument(
        "--dry-run", action="store_true", help="Use an in-memory store instead of the Notion API"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: NOTIONFLOW_LOG_LEVEL or INFO)",
    )
    args = parser.parse_args(argv)

    settings = None
    config_error = None
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        config_error = e

    level = args.log_level or (settings.log_level if settings else "INFO")
    logging.basicConfig(level=level, format=LOG_FORMAT)

    if config_error is not None and not args.dry_run:
        logger.error("Error :: %s", config_error)
        return 1

    client = create_client(settings, dry_run=args.dry_run)
    parent_id = settings.parent_id if settings else "dry-run"
    selector = PathSelector(args.file) if args.file else DialogSelector()

    try:
        result = run_import(client, parent_id, selector)
    finally:
        client.close()

    if not result.ok:
        return 1
    if result.failures:
        logger.warning(
            "%d row(s) failed: %s",
            result.failed,
            ", ".join(failure.row_label for failure in result.failures),
        )
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
