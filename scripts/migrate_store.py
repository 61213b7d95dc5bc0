#!/usr/bin/env python3
"""
Store Migration Tool for hourrs
Copies a JSON store directory into a new SQLite store.

Usage:
    python migrate_store.py [--source data] [--target data/hours.db]
"""
import argparse
import logging
import os
import sys

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from hourrs.data.store import JsonStore, SqliteStore
from hourrs.utils.errors import StoreError


def migrate(source: str, target: str) -> int:
    """Copy source JSON store into target SQLite file; returns record count"""
    hours_data = JsonStore(source).load()
    SqliteStore(target).save(hours_data)
    return len(hours_data.dataframe)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Migrate a JSON hours store to SQLite"
    )
    parser.add_argument(
        '--source', '-s',
        default='data',
        help='Directory holding hours_dataframe.json and hours_names.json (default: data)'
    )
    parser.add_argument(
        '--target', '-t',
        default=os.path.join('data', 'hours.db'),
        help='Path for the SQLite target (default: data/hours.db)'
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    # Check source exists
    if not os.path.isdir(args.source):
        print(f"ERROR: Source directory not found: {args.source}")
        return 1

    # Check target doesn't exist
    if os.path.exists(args.target):
        print(f"ERROR: Target database already exists: {args.target}")
        print("Remove it first or choose a different target path")
        return 1

    print(f"Migrating {args.source} -> {args.target}")
    try:
        count = migrate(args.source, args.target)
    except StoreError as e:
        print(f"\n✗ Migration failed: {e}")
        return 1

    print(f"\n✓ Migration successful! {count} records copied.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
