from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_recent_for_user(self, user_id: int, limit: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_latest_open(self, user_id: int) -> Optional[AttendanceRecord]:
        """Most recent record (highest id) of the user without a check-out."""
        raise NotImplementedError

    def create_checkin(self, *, user_id: int, check_in_at: str) -> int:
        """Insert an open record.

        Raises DuplicateCheckInError when the user already has a record on
        that calendar day and NotFoundError when the user does not exist.
        """
        raise NotImplementedError

    def update_checkout(self, *, attendance_id: int, check_out_at: str) -> bool:
        """Close an open record; returns False if it was already closed."""
        raise NotImplementedError
