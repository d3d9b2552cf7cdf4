from __future__ import annotations

import sqlite3
from typing import Optional, Sequence

from ..core.exceptions import DuplicateCodeError
from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone, is_unique_violation
from .model import User
from .repository import UserRepository


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["id_usuarios"]),
        name=row["nombre"],
        office=row["oficina"],
        code=row["codigo"],
    )


class SQLiteUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id_usuarios, nombre, oficina, codigo FROM usuarios")
            return [_to_user(r) for r in fetchall(cur)]

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id_usuarios, nombre, oficina, codigo FROM usuarios WHERE id_usuarios=?",
                (user_id,),
            )
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_code(self, code: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id_usuarios, nombre, oficina, codigo FROM usuarios WHERE codigo=?",
                (code,),
            )
            row = fetchone(cur)
            return _to_user(row) if row else None

    def code_exists(self, code: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 FROM usuarios WHERE codigo=? LIMIT 1", (code,))
            return cur.fetchone() is not None

    def create_user(self, *, name: str, office: str, code: str) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO usuarios(nombre, oficina, codigo) VALUES(?,?,?)",
                    (name, office, code),
                )
                return int(cur.lastrowid)
        except sqlite3.IntegrityError as exc:
            if is_unique_violation(exc, "codigo"):
                raise DuplicateCodeError(f"Código {code} ya asignado") from exc
            raise

    def update_user(self, user_id: int, *, name: str, office: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE usuarios SET nombre=?, oficina=? WHERE id_usuarios=?",
                (name, office, user_id),
            )
            return cur.rowcount > 0

    def delete_by_id(self, user_id: int) -> bool:
        # Attendance rows go in the same transaction so none are left orphaned.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM asistencia WHERE id_usuarios=?", (user_id,))
            cur.execute("DELETE FROM usuarios WHERE id_usuarios=?", (user_id,))
            return cur.rowcount > 0
