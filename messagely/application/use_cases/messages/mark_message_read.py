# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from messagely.domain.messages.entities import Message
from messagely.domain.messages.repositories import MessageRepository
from messagely.infrastructure.audit import AuditAction, audit_log
from messagely.shared.errors.base import NotAuthorizedError


class MarkMessageReadUseCase:
    def __init__(self, *, messages: MessageRepository) -> None:
        self._messages = messages

    def execute(self, message_id: int, viewer: str) -> Message:
        """Mark a message read on behalf of `viewer`, who must be its recipient."""

        message = self._messages.get(message_id)
        if not message.is_recipient(viewer):
            audit_log(
                AuditAction.ACCESS_DENIED,
                username=viewer,
                details={"message_id": message_id, "action": "mark_read"},
                success=False,
            )
            raise NotAuthorizedError()

        updated = self._messages.mark_read(message_id)
        audit_log(
            AuditAction.MESSAGE_READ,
            username=viewer,
            details={"message_id": message_id},
        )
        return updated
