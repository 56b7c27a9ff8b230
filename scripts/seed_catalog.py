#!/usr/bin/env python3
"""Import media sources into the VAMOS catalog.

Usage:
    python scripts/seed_catalog.py catalog.json [--db data/vamos.db]

The catalog file is a JSON array of objects:
    {"link": "dQw4w9WgXcQ", "title": "...", "artist": "...", "isVideo": true}

Entries whose link already exists are skipped.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from vamos.config import DB_PATH  # noqa: E402
from vamos.db.seed import load_catalog, seed_sources  # noqa: E402
from vamos.db.session import get_db_session, init_db  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Import sources into the VAMOS catalog")
    parser.add_argument("catalog", type=Path, help="JSON file with source entries")
    parser.add_argument("--db", type=Path, default=DB_PATH, help="SQLite database path")
    args = parser.parse_args(argv)

    entries = load_catalog(args.catalog)
    print(f"Loaded {len(entries)} entries from {args.catalog}")

    init_db(args.db)
    with get_db_session(args.db) as session:
        result = seed_sources(session, entries)

    print(f"Added: {result.added}, skipped: {result.skipped}")
    print(f"Database: {args.db}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
