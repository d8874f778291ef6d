# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from messagely.domain.messages.entities import Message as DomainMessage
from messagely.domain.messages.entities import MessageDetail, ReceivedMessage, SentMessage
from messagely.domain.messages.exceptions import MessageNotFoundError
from messagely.domain.messages.repositories import MessageRepository
from messagely.domain.users.exceptions import UserNotFoundError
from messagely.infrastructure.db.models import Message, User
from messagely.infrastructure.repositories.mapping import (
    detail_from_row,
    message_from_row,
    received_from_row,
    sent_from_row,
)
from messagely.infrastructure.unit_of_work import unit_of_work_scope
from messagely.shared.logging import logger


# SQLite INTEGER PRIMARY KEY is a signed 64-bit value
_MAX_MESSAGE_ID = 2**63 - 1


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _check_id(message_id: int) -> None:
    if not 0 < message_id <= _MAX_MESSAGE_ID:
        raise MessageNotFoundError(message_id)


class SqlAlchemyMessageRepository(MessageRepository):
    def __init__(
        self,
        session_factory: Callable[[], Session],
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._session_factory = session_factory
        self._clock = clock

    def create(self, from_username: str, to_username: str, body: str) -> DomainMessage:
        with unit_of_work_scope(
            self._session_factory,
            "messages.create",
            # a participant vanished between the existence check and the insert
            on_integrity_error=lambda _: UserNotFoundError(to_username),
        ) as session:
            known = set(
                session.scalars(
                    select(User.username).where(User.username.in_((from_username, to_username)))
                )
            )
            for username in (from_username, to_username):
                if username not in known:
                    raise UserNotFoundError(username)

            row = Message(
                from_username=from_username,
                to_username=to_username,
                body=body,
                sent_at=self._clock(),
                read_at=None,
            )
            session.add(row)
            session.flush()
            message = message_from_row(row)
        logger.info(f"messages.create: id={message.id} from={from_username} to={to_username}")
        return message

    def get(self, message_id: int) -> MessageDetail:
        _check_id(message_id)
        with unit_of_work_scope(self._session_factory, "messages.get") as session:
            row = session.get(
                Message,
                message_id,
                options=[joinedload(Message.from_user), joinedload(Message.to_user)],
            )
            if row is None:
                raise MessageNotFoundError(message_id)
            return detail_from_row(row)

    def mark_read(self, message_id: int) -> DomainMessage:
        _check_id(message_id)
        with unit_of_work_scope(self._session_factory, "messages.mark_read") as session:
            row = session.get(Message, message_id)
            if row is None:
                raise MessageNotFoundError(message_id)
            # read_at is written once; later calls keep the first timestamp
            if row.read_at is None:
                row.read_at = self._clock()
                session.flush()
            return message_from_row(row)

    def list_sent_by(self, username: str) -> Sequence[SentMessage]:
        with unit_of_work_scope(self._session_factory, "messages.list_sent_by") as session:
            rows = session.scalars(
                select(Message)
                .options(joinedload(Message.to_user))
                .where(Message.from_username == username)
                .order_by(Message.id.asc())
            ).all()
            return [sent_from_row(row) for row in rows]

    def list_received_by(self, username: str) -> Sequence[ReceivedMessage]:
        with unit_of_work_scope(self._session_factory, "messages.list_received_by") as session:
            rows = session.scalars(
                select(Message)
                .options(joinedload(Message.from_user))
                .where(Message.to_username == username)
                .order_by(Message.id.asc())
            ).all()
            return [received_from_row(row) for row in rows]
