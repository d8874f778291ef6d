from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .users import UserSummaryDTO


class SendMessageRequestDTO(BaseModel):
    # any client-supplied from_username is dropped: the sender is the session user
    to_username: str = Field(min_length=1, max_length=64)
    body: str = Field(min_length=1, max_length=10_000)

    model_config = ConfigDict(extra="ignore")


class MessageDTO(BaseModel):
    id: int
    from_username: str
    to_username: str
    body: str
    sent_at: datetime
    read_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class MessageDetailDTO(BaseModel):
    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None = None
    from_user: UserSummaryDTO
    to_user: UserSummaryDTO

    model_config = ConfigDict(from_attributes=True)


class SentMessageDTO(BaseModel):
    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None = None
    to_user: UserSummaryDTO

    model_config = ConfigDict(from_attributes=True)


class ReceivedMessageDTO(BaseModel):
    id: int
    body: str
    sent_at: datetime
    read_at: datetime | None = None
    from_user: UserSummaryDTO

    model_config = ConfigDict(from_attributes=True)


class ReadReceiptDTO(BaseModel):
    id: int
    read_at: datetime | None

    model_config = ConfigDict(from_attributes=True)
