from __future__ import annotations

import logging
import sqlite3
import threading
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    path: str
    timeout: float = 5.0


class DatabaseConnection:
    """Owner of the single SQLite connection used by all repositories.

    The connection is opened explicitly at process start and closed at
    shutdown. Statements are serialized through a lock because Flask may
    serve requests from several threads.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._conn: Optional[sqlite3.Connection] = None
        self.lock = threading.RLock()

    def open(self) -> "DatabaseConnection":
        if self._conn is None:
            conn = sqlite3.connect(
                self._config.path,
                timeout=self._config.timeout,
                check_same_thread=False,
            )
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA foreign_keys = ON")
            self._conn = conn
            logger.info("Opened database %s", self._config.path)
        return self

    def close(self) -> None:
        with self.lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.info("Closed database %s", self._config.path)

    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("Database connection is not open")
        return self._conn

    def __enter__(self) -> "DatabaseConnection":
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()
