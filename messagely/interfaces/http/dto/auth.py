from __future__ import annotations

import re
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic_core import PydanticCustomError

from messagely.domain.users.entities import NewUser

_USERNAME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9_]*$")

# passwords are kept byte for byte so login hashes the same text
Trimmed = Annotated[str, StringConstraints(strip_whitespace=True)]


def _check_username(value: str) -> str:
    if not _USERNAME_RE.match(value):
        raise PydanticCustomError(
            "username_invalid_chars",
            "Username must start with a letter and contain only letters, digits or '_'",
            {"pattern": _USERNAME_RE.pattern},
        )
    return value


class RegisterRequestDTO(BaseModel):
    username: Trimmed = Field(min_length=1, max_length=64)
    password: str = Field(min_length=8, max_length=128)
    first_name: Trimmed = Field(min_length=1, max_length=128)
    last_name: Trimmed = Field(min_length=1, max_length=128)
    phone: Trimmed = Field(min_length=1, max_length=32)

    model_config = ConfigDict(extra="ignore")

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        return _check_username(value)

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value: str) -> str:
        if not re.fullmatch(r"\+?[0-9 ()\-]{3,32}", value):
            raise PydanticCustomError(
                "phone_invalid",
                "Phone may only contain digits, spaces, '(', ')', '-' and a leading '+'",
                {},
            )
        return value

    def to_new_user(self) -> NewUser:
        return NewUser(
            username=self.username,
            password=self.password,
            first_name=self.first_name,
            last_name=self.last_name,
            phone=self.phone,
        )


class LoginRequestDTO(BaseModel):
    username: Trimmed = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=128)  # No strength check on login

    model_config = ConfigDict(extra="ignore")


class TokenDTO(BaseModel):
    token: str
