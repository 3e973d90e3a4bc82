#!/usr/bin/env python3
"""Create (or reset) the Ad Copy Assistant database.

Usage:
    python scripts/init_database.py                 # create tables if missing
    python scripts/init_database.py --db /tmp/a.db  # explicit database path
    python scripts/init_database.py --reset         # drop and recreate tables
"""

import argparse
import asyncio
import shutil
import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config import ConfigError, ConfigManager  # noqa: E402
from storage.database import init_database  # noqa: E402


def backup_database(db_path: Path):
    """Create backup before destructive changes."""
    if db_path.exists():
        backup_path = db_path.with_name(
            f"{db_path.stem}_backup_{datetime.now().strftime('%Y%m%d_%H%M%S')}{db_path.suffix}"
        )
        shutil.copy(db_path, backup_path)
        print(f"Backup created: {backup_path}")
        return backup_path
    return None


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Initialize the Ad Copy Assistant database")
    parser.add_argument("--db", help="Database path (defaults to the configured path)")
    parser.add_argument("--reset", action="store_true", help="Drop and recreate all tables")
    parser.add_argument("--yes", action="store_true", help="Skip the reset confirmation prompt")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    if args.db:
        db_path = Path(args.db).expanduser()
    else:
        try:
            db_path = ConfigManager().get_config().db_path
        except ConfigError as e:
            print(f"Error: {e}")
            return 1

    if args.reset and not args.yes:
        confirm = input(f"\nThis will DELETE all campaigns, ad copies and performance logs in {db_path}.\nContinue? (yes/no): ")
        if confirm.lower() != "yes":
            print("Cancelled.")
            return 1

    if args.reset:
        backup_database(db_path)

    asyncio.run(init_database(db_path, reset=args.reset))
    print(f"Database ready: {db_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
