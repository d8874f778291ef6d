# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""User records and the password material that guards them."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from secrets import token_hex

from messagely.domain.users.entities import NewUser, User, UserSummary
from messagely.domain.users.exceptions import UserAlreadyExistsError, UserNotFoundError
from messagely.domain.users.repositories import PasswordHasher, UserRepository
from messagely.shared.logging import logger


def _utcnow() -> datetime:
    return datetime.now(UTC)


class CredentialStore:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._clock = clock
        self._dummy_hash: str | None = None

    def register(self, new_user: NewUser) -> User:
        """Persist a new user with a hashed password.

        `join_at` and `last_login_at` both start at the registration time.
        A concurrent registration that slips past the pre-check is rejected by
        the repository's unique constraint with the same error.
        """

        if self._users.find_by_username(new_user.username) is not None:
            raise UserAlreadyExistsError()
        now = self._clock()
        user = User(
            username=new_user.username,
            password_hash=self._password_hasher.hash(new_user.password),
            first_name=new_user.first_name,
            last_name=new_user.last_name,
            phone=new_user.phone,
            join_at=now,
            last_login_at=now,
        )
        persisted = self._users.add(user)
        logger.info(f"credentials.register: ok username={persisted.username}")
        return persisted

    def authenticate(self, username: str, password: str) -> bool:
        """Check a password; unknown users still pay for one hash verification."""

        user = self._users.find_by_username(username)
        if user is None:
            self._password_hasher.verify(password, self._unknown_user_hash())
            return False
        return self._password_hasher.verify(password, user.password_hash)

    def _unknown_user_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self._password_hasher.hash(token_hex(16))
        return self._dummy_hash

    def record_login(self, username: str) -> User:
        user = self._users.touch_last_login(username, self._clock())
        if user is None:
            raise UserNotFoundError(username)
        return user

    def get(self, username: str) -> User:
        user = self._users.find_by_username(username)
        if user is None:
            raise UserNotFoundError(username)
        return user

    def list(self) -> Sequence[UserSummary]:
        return self._users.list_all()
