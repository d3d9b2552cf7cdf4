from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection):
    """Cursor inside a transaction: commit on success, rollback on error."""
    with conn_factory.lock:
        conn = conn_factory.connection()
        cur = conn.cursor()
        try:
            yield conn, cur
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cur.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return dict(row) if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    return [dict(r) for r in cur.fetchall() or []]


def is_unique_violation(exc: Exception, column: str) -> bool:
    message = str(exc)
    return "UNIQUE constraint failed" in message and column in message


def is_foreign_key_violation(exc: Exception) -> bool:
    return "FOREIGN KEY constraint failed" in str(exc)
