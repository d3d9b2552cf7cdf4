from __future__ import annotations

import logging
from typing import Sequence

from ..core.constants import DEFAULT_MAX_CODE_ATTEMPTS
from ..core.exceptions import AuthenticationError, CodeGenerationError, DuplicateCodeError
from .codes import Chooser, generate_code
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: resolve a user from their access code (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def login(self, code: str) -> User:
        # Exact match: codes from older databases may be shorter than six chars.
        user = self._users.get_by_code((code or "").strip())
        if not user:
            raise AuthenticationError("Código incorrecto")
        return user


class UserService:
    """Use case: manage the user roster."""

    def __init__(
        self,
        users: UserRepository,
        *,
        max_code_attempts: int = DEFAULT_MAX_CODE_ATTEMPTS,
        chooser: Chooser | None = None,
    ):
        self._users = users
        self._max_code_attempts = int(max_code_attempts)
        self._chooser = chooser

    def list_users(self) -> Sequence[User]:
        return self._users.list_all()

    def _new_code(self) -> str:
        if self._chooser is None:
            return generate_code()
        return generate_code(self._chooser)

    def create_user(self, *, name: str, office: str) -> User:
        """Insert a user under a freshly generated unique code.

        The existence check only avoids needless failed inserts; the UNIQUE
        constraint on `codigo` is what decides, and a violation means "draw
        again". Gives up after `max_code_attempts` draws.
        """
        for attempt in range(1, self._max_code_attempts + 1):
            code = self._new_code()
            if self._users.code_exists(code):
                logger.debug("Code collision on attempt %d", attempt)
                continue
            try:
                user_id = self._users.create_user(name=name, office=office, code=code)
            except DuplicateCodeError:
                logger.warning("Code %s taken concurrently, retrying (attempt %d)", code, attempt)
                continue

            logger.info("Created user id=%s", user_id)
            return User(user_id=user_id, name=name, office=office, code=code)

        raise CodeGenerationError(
            f"No se pudo generar un código único tras {self._max_code_attempts} intentos"
        )

    def update_user(self, user_id: int, *, name: str, office: str) -> bool:
        updated = self._users.update_user(user_id, name=name, office=office)
        if not updated:
            logger.warning("Update of user id=%s matched no rows", user_id)
        return updated

    def delete_user(self, user_id: int) -> bool:
        deleted = self._users.delete_by_id(user_id)
        if not deleted:
            logger.warning("Delete of user id=%s matched no rows", user_id)
        return deleted
