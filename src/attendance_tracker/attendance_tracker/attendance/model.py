from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import day_of


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one check-in, optionally closed by a check-out.

    Timestamps are kept as the ISO-8601 strings stored in the database.
    """

    attendance_id: int
    user_id: int
    check_in_at: str
    check_out_at: Optional[str] = None

    @property
    def work_date(self) -> date:
        return day_of(self.check_in_at)

    @property
    def is_open(self) -> bool:
        return self.check_out_at is None

    def to_dict(self) -> dict:
        return {
            "id_asistencia": self.attendance_id,
            "id_usuarios": self.user_id,
            "fecha_entrada": self.check_in_at,
            "fecha_salida": self.check_out_at,
        }
