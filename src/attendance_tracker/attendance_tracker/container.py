from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import AttendanceService
from .attendance.sqlite_attendance_repository import SQLiteAttendanceRepository
from .core.constants import DEFAULT_HISTORY_LIMIT, DEFAULT_MAX_CODE_ATTEMPTS
from .database.connection import DBConfig, DatabaseConnection
from .users.service import AuthService, UserService
from .users.sqlite_user_repository import SQLiteUserRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    users_repo: SQLiteUserRepository
    attendance_repo: SQLiteAttendanceRepository

    auth_service: AuthService
    user_service: UserService
    attendance_service: AttendanceService

    def close(self) -> None:
        self.conn.close()


def build_container(
    *,
    database_path: str,
    max_code_attempts: int = DEFAULT_MAX_CODE_ATTEMPTS,
    history_limit: int = DEFAULT_HISTORY_LIMIT,
) -> Container:
    conn = DatabaseConnection(DBConfig(path=str(database_path))).open()

    users_repo = SQLiteUserRepository(conn)
    attendance_repo = SQLiteAttendanceRepository(conn)

    auth_service = AuthService(users_repo)
    user_service = UserService(users_repo, max_code_attempts=max_code_attempts)
    attendance_service = AttendanceService(attendance_repo, users_repo, history_limit=history_limit)

    return Container(
        conn=conn,
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        auth_service=auth_service,
        user_service=user_service,
        attendance_service=attendance_service,
    )
