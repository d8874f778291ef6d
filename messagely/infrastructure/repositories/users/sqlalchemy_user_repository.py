# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from messagely.domain.users.entities import User as DomainUser
from messagely.domain.users.entities import UserSummary
from messagely.domain.users.exceptions import UserAlreadyExistsError
from messagely.domain.users.repositories import UserRepository
from messagely.infrastructure.db.models import User
from messagely.infrastructure.repositories.mapping import summary_from_row, user_from_row
from messagely.infrastructure.unit_of_work import unit_of_work_scope
from messagely.shared.logging import logger


def _duplicate_username(_: IntegrityError) -> UserAlreadyExistsError:
    return UserAlreadyExistsError()


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory, "users.find") as session:
            row = session.get(User, username)
            return user_from_row(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        """Insert `user`; a taken username surfaces as `UserAlreadyExistsError`."""

        with unit_of_work_scope(
            self._session_factory, "users.add", on_integrity_error=_duplicate_username
        ) as session:
            row = User(
                username=user.username,
                password_hash=user.password_hash,
                first_name=user.first_name,
                last_name=user.last_name,
                phone=user.phone,
                join_at=user.join_at,
                last_login_at=user.last_login_at,
            )
            session.add(row)
            session.flush()
            persisted = user_from_row(row)
        logger.debug(f"users.add: username={persisted.username}")
        return persisted

    def touch_last_login(self, username: str, at: datetime) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory, "users.touch_last_login") as session:
            row = session.get(User, username)
            if row is None:
                return None
            row.last_login_at = at
            session.flush()
            return user_from_row(row)

    def list_all(self) -> Sequence[UserSummary]:
        with unit_of_work_scope(self._session_factory, "users.list") as session:
            rows = session.scalars(select(User).order_by(User.username.asc())).all()
            return [summary_from_row(row) for row in rows]
