# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Conversions from ORM rows to domain entities."""

from __future__ import annotations

from datetime import UTC, datetime

from messagely.domain.messages.entities import (
    Message,
    MessageDetail,
    ReceivedMessage,
    SentMessage,
)
from messagely.domain.users.entities import User, UserSummary
from messagely.infrastructure.db import models


def as_utc(value: datetime | None) -> datetime | None:
    # SQLite hands back naive datetimes even for timezone-aware columns
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def user_from_row(row: models.User) -> User:
    return User(
        username=row.username,
        password_hash=row.password_hash,
        first_name=row.first_name,
        last_name=row.last_name,
        phone=row.phone,
        join_at=as_utc(row.join_at),
        last_login_at=as_utc(row.last_login_at),
    )


def summary_from_row(row: models.User) -> UserSummary:
    return UserSummary(
        username=row.username,
        first_name=row.first_name,
        last_name=row.last_name,
        phone=row.phone,
    )


def message_from_row(row: models.Message) -> Message:
    return Message(
        id=row.id,
        from_username=row.from_username,
        to_username=row.to_username,
        body=row.body,
        sent_at=as_utc(row.sent_at),
        read_at=as_utc(row.read_at),
    )


def detail_from_row(row: models.Message) -> MessageDetail:
    """Needs `from_user` and `to_user` loaded on the row."""

    return MessageDetail(
        id=row.id,
        body=row.body,
        sent_at=as_utc(row.sent_at),
        read_at=as_utc(row.read_at),
        from_user=summary_from_row(row.from_user),
        to_user=summary_from_row(row.to_user),
    )


def sent_from_row(row: models.Message) -> SentMessage:
    return SentMessage(
        id=row.id,
        body=row.body,
        sent_at=as_utc(row.sent_at),
        read_at=as_utc(row.read_at),
        to_user=summary_from_row(row.to_user),
    )


def received_from_row(row: models.Message) -> ReceivedMessage:
    return ReceivedMessage(
        id=row.id,
        body=row.body,
        sent_at=as_utc(row.sent_at),
        read_at=as_utc(row.read_at),
        from_user=summary_from_row(row.from_user),
    )
