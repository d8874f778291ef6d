# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from messagely.domain.messages.entities import Message
from messagely.domain.messages.repositories import MessageRepository
from messagely.infrastructure.audit import AuditAction, audit_log


class SendMessageUseCase:
    def __init__(self, *, messages: MessageRepository) -> None:
        self._messages = messages

    def execute(self, sender: str, to_username: str, body: str) -> Message:
        """Store a message from the authenticated `sender`."""

        message = self._messages.create(sender, to_username, body)
        audit_log(
            AuditAction.MESSAGE_SENT,
            username=sender,
            details={"message_id": message.id, "to_username": to_username},
        )
        return message
