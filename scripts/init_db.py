from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from attendance_tracker.database.bootstrap import apply_schema, list_tables
from attendance_tracker.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    database_path = str(settings.DATABASE_PATH)

    with DatabaseConnection(DBConfig(path=database_path)) as conn:
        apply_schema(conn)
        tables = list_tables(conn)
    print(f"OK: Applied schema.sql -> {database_path} (tables={len(tables)}: {', '.join(tables)})")


if __name__ == "__main__":
    main()
