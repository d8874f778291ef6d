# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .messages import Message, MessageDetail, MessageNotFoundError, ReceivedMessage, SentMessage
from .users import (
    InvalidCredentialsError,
    NewUser,
    SessionClaims,
    User,
    UserAlreadyExistsError,
    UserNotFoundError,
    UserSummary,
)

__all__ = [
    "InvalidCredentialsError",
    "Message",
    "MessageDetail",
    "MessageNotFoundError",
    "NewUser",
    "ReceivedMessage",
    "SentMessage",
    "SessionClaims",
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UserSummary",
]
