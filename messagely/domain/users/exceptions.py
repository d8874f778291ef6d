# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from messagely.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    error_code = "user_already_exists"


class InvalidCredentialsError(DomainError):
    error_code = "invalid_credentials"


class UserNotFoundError(DomainError):
    error_code = "user_not_found"
    error_status = HTTPStatus.NOT_FOUND

    def __init__(self, username: str) -> None:
        super().__init__(context={"username": username})
