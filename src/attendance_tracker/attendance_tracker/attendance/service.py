from __future__ import annotations

import logging
from datetime import datetime
from typing import Sequence

from ..common.datetime_utils import now_local, to_iso
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.exceptions import DuplicateCheckInError, NoOpenSessionError, NotFoundError
from ..users.repository import UserRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Check-in / check-out per user and calendar day.

    A user goes NoSession -> CheckedIn -> CheckedOut within a day. The store
    holds a unique index over (user, day), so a concurrent second check-in
    fails with the same DuplicateCheckInError as the pre-check.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        *,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ):
        self._attendance = attendance
        self._users = users
        self._history_limit = int(history_limit)

    def _require_user(self, user_id: int) -> None:
        if not self._users.get_by_id(user_id):
            raise NotFoundError("El usuario no existe")

    def check_in(self, user_id: int, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or now_local()
        today = now.date()

        self._require_user(user_id)

        if self._attendance.get_for_user_and_date(user_id, today):
            raise DuplicateCheckInError("Ya registraste tu ingreso hoy")

        check_in_at = to_iso(now)
        attendance_id = self._attendance.create_checkin(user_id=user_id, check_in_at=check_in_at)
        logger.info("User %s checked in (attendance id=%s)", user_id, attendance_id)
        return AttendanceRecord(attendance_id=attendance_id, user_id=user_id, check_in_at=check_in_at)

    def check_out(self, user_id: int, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or now_local()

        record = self._attendance.get_latest_open(user_id)
        if not record:
            raise NoOpenSessionError("No tienes un ingreso pendiente")

        check_out_at = to_iso(now)
        if not self._attendance.update_checkout(attendance_id=record.attendance_id, check_out_at=check_out_at):
            # closed by another request between the lookup and the update
            raise NoOpenSessionError("No tienes un ingreso pendiente")

        logger.info("User %s checked out (attendance id=%s)", user_id, record.attendance_id)
        return AttendanceRecord(
            attendance_id=record.attendance_id,
            user_id=record.user_id,
            check_in_at=record.check_in_at,
            check_out_at=check_out_at,
        )

    def history(self, user_id: int, *, limit: int | None = None) -> Sequence[AttendanceRecord]:
        self._require_user(user_id)
        return self._attendance.get_recent_for_user(user_id, limit or self._history_limit)
