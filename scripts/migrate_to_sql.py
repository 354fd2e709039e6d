"""One-off migration script: JSON files in DATA_DIR -> DATABASE_URL."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Keep the package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from portfolio.core.config import get_settings  # noqa: E402
from portfolio.db.models import create_all  # noqa: E402
from portfolio.domain.collections import COLLECTIONS  # noqa: E402
from portfolio.repositories.json_storage import JSONStorage  # noqa: E402
from portfolio.repositories.sql_repository import SQLRepository  # noqa: E402


def migrate(data_dir: Path) -> dict[str, int]:
    settings = get_settings()
    if not settings.database_url:
        raise SystemExit("DATABASE_URL must be set")
    if not data_dir.exists():
        raise SystemExit(f"Data directory not found: {data_dir}")
    create_all()
    source = JSONStorage(data_dir)
    target = SQLRepository()
    counts: dict[str, int] = {}

    for kind, collection in COLLECTIONS.items():
        if target.list(kind):
            print(f"skip {kind}: target table is not empty")
            continue
        id_map: dict[int, int] = {}
        for record in sorted(source.list(kind), key=lambda r: r.id):
            id_map[record.id] = target.add(kind, record.model_dump()).id
        if collection.order_field:
            target.reorder(kind, [id_map[r.id] for r in source.list(kind)])
        counts[kind] = len(id_map)

    info = source.get_contact_info()
    if info is not None:
        target.put_contact_info(info.model_dump())
        counts["contact-info"] = 1
    return counts


def main() -> None:
    ap = argparse.ArgumentParser(description="Copy JSON content into the SQL database")
    ap.add_argument("--data-dir", default=None, help="Directory with the JSON files (default: DATA_DIR)")
    args = ap.parse_args()
    data_dir = Path(args.data_dir) if args.data_dir else get_settings().data_dir
    counts = migrate(data_dir)
    for kind, count in counts.items():
        print(f"{kind}: {count}")
    print("JSON data migrated to SQL successfully.")


if __name__ == "__main__":
    main()
