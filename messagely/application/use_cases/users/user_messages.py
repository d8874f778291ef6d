# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from messagely.domain.messages.entities import ReceivedMessage, SentMessage
from messagely.domain.messages.repositories import MessageRepository
from messagely.shared.errors.base import NotAuthorizedError


class ListUserMessagesUseCase:
    """A user's outbox and inbox, visible only to that user."""

    def __init__(self, *, messages: MessageRepository) -> None:
        self._messages = messages

    def sent(self, username: str, viewer: str) -> Sequence[SentMessage]:
        self._ensure_owner(username, viewer)
        return self._messages.list_sent_by(username)

    def received(self, username: str, viewer: str) -> Sequence[ReceivedMessage]:
        self._ensure_owner(username, viewer)
        return self._messages.list_received_by(username)

    @staticmethod
    def _ensure_owner(username: str, viewer: str) -> None:
        if viewer != username:
            raise NotAuthorizedError()
