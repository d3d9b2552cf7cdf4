from __future__ import annotations

import logging
from pathlib import Path

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    sql = Path(schema_path).read_text(encoding="utf-8")
    with conn_factory.lock:
        # executescript commits any pending transaction first
        conn_factory.connection().executescript(sql)
    logger.info("Schema applied from %s", schema_path)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with conn_factory.lock:
        cur = conn_factory.connection().execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
        )
        try:
            return [row[0] for row in cur.fetchall()]
        finally:
            cur.close()
