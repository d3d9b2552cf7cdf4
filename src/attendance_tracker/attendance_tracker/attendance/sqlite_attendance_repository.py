from __future__ import annotations

import sqlite3
from datetime import date
from typing import Optional, Sequence

from ..core.exceptions import DuplicateCheckInError, NotFoundError
from ..database.connection import DatabaseConnection
from ..database.sqlite_base import (
    db_cursor,
    fetchall,
    fetchone,
    is_foreign_key_violation,
    is_unique_violation,
)
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "id_asistencia, id_usuarios, fecha_entrada, fecha_salida"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["id_asistencia"]),
        user_id=int(r["id_usuarios"]),
        check_in_at=r["fecha_entrada"],
        check_out_at=r.get("fecha_salida"),
    )


class SQLiteAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_recent_for_user(self, user_id: int, limit: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM asistencia
                WHERE id_usuarios=?
                ORDER BY id_asistencia DESC
                LIMIT ?
                """,
                (user_id, int(limit)),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM asistencia
                WHERE id_usuarios=? AND substr(fecha_entrada, 1, 10)=?
                """,
                (user_id, work_date.isoformat()),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_latest_open(self, user_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM asistencia
                WHERE id_usuarios=? AND fecha_salida IS NULL
                ORDER BY id_asistencia DESC
                LIMIT 1
                """,
                (user_id,),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def create_checkin(self, *, user_id: int, check_in_at: str) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO asistencia(id_usuarios, fecha_entrada) VALUES(?,?)",
                    (user_id, check_in_at),
                )
                return int(cur.lastrowid)
        except sqlite3.IntegrityError as exc:
            if is_unique_violation(exc, "ux_asistencia_usuario_dia"):
                raise DuplicateCheckInError("Ya registraste tu ingreso hoy") from exc
            if is_foreign_key_violation(exc):
                raise NotFoundError("El usuario no existe") from exc
            raise

    def update_checkout(self, *, attendance_id: int, check_out_at: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE asistencia
                SET fecha_salida=?
                WHERE id_asistencia=? AND fecha_salida IS NULL
                """,
                (check_out_at, attendance_id),
            )
            return cur.rowcount > 0
