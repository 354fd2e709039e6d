#!/usr/bin/env python3
"""
Write the default portfolio content into the configured store.

Usage:
  DATA_DIR=./data python scripts/seed_data.py
  DATABASE_URL=sqlite:///portfolio.db python scripts/seed_data.py
"""
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from portfolio.core.config import get_settings  # noqa: E402
from portfolio.core.logging import configure_logging  # noqa: E402
from portfolio.repositories import build_store  # noqa: E402


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    store = build_store(settings)
    seeded = store.seed_defaults()
    if seeded:
        print(f"Seeded: {', '.join(seeded)}")
    else:
        print("Nothing to seed; every collection already has content.")


if __name__ == "__main__":
    main()
