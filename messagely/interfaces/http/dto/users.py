from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserSummaryDTO(BaseModel):
    username: str
    first_name: str
    last_name: str
    phone: str

    model_config = ConfigDict(from_attributes=True)


class UserDetailDTO(UserSummaryDTO):
    """Profile view without any password material."""

    join_at: datetime
    last_login_at: datetime | None = None
