"""Create the database and the employees / attendance_records tables.

Usage: APP_ENV=production python scripts/init_db.py
Exits non-zero when a required table is still missing afterwards.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.productivity_analyzer.productivity_analyzer.database.bootstrap import REQUIRED_TABLES, ensure_schema


def main() -> int:
    settings_module = get_settings_module()
    db_config = dict(importlib.import_module(settings_module).DB_CONFIG)
    target = f"{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"

    try:
        ensure_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    except RuntimeError as e:
        print(f"FAILED ({settings_module}, {target}): {e}", file=sys.stderr)
        return 1

    for table in REQUIRED_TABLES:
        print(f"  {table}: ok")
    print(f"Schema ready on {target} ({settings_module})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
