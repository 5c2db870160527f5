# stock/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from stock import db
from stock.config import load_settings, parse_log_level
from stock.errors import ConfigurationError, StoreError
from stock.menu import InventoryShell

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="stock-manager", description="Manage a local product inventory.")
    parser.add_argument("--db", default=None,
                        help="Path of the SQLite datastore (default: $STOCK_DB_PATH or stock.db).")
    parser.add_argument("--test-mode", action="store_true",
                        help="Initialize the datastore and exit without entering the menu.")
    parser.add_argument("--log-level", default=None,
                        help="Logging level, e.g. DEBUG or INFO (default: $STOCK_LOG_LEVEL or WARNING).")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
        level = parse_log_level(args.log_level or settings.log_level)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    db_path = args.db or settings.db_path

    try:
        conn = db.initialize(db_path)
    except StoreError as e:
        print(f"Could not initialize the database: {e}", file=sys.stderr)
        return 1

    try:
        if args.test_mode:
            return 0
        InventoryShell(conn).run()
        return 0
    finally:
        db.close(conn)


if __name__ == "__main__":
    sys.exit(main())
