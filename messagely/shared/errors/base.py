# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Error hierarchy shared by every layer.

Each error carries a machine-readable ``code``, the HTTP ``status`` it maps to
and an optional ``context`` mapping that is returned to the client verbatim,
so nothing secret may go into it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, ClassVar


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DeclaredError(AppError):
    """An error whose code and status are fixed by the subclass."""

    error_code: ClassVar[str] = "domain_error"
    error_status: ClassVar[HTTPStatus] = HTTPStatus.BAD_REQUEST

    def __init__(self, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(code=self.error_code, status=self.error_status, context=context)


class DomainError(DeclaredError):
    pass


class InfrastructureError(DeclaredError):
    error_code = "infrastructure_error"
    error_status = HTTPStatus.INTERNAL_SERVER_ERROR


class StoreFailureError(InfrastructureError):
    """The database could not complete `operation`."""

    error_code = "store_failure"

    def __init__(self, operation: str) -> None:
        super().__init__({"operation": operation})


class ValidationError(DeclaredError):
    error_code = "validation_error"
    error_status = HTTPStatus.UNPROCESSABLE_ENTITY


class NotAuthenticatedError(DeclaredError):
    error_code = "unauthorized"
    error_status = HTTPStatus.UNAUTHORIZED

    def __init__(self) -> None:
        super().__init__()


class NotAuthorizedError(DeclaredError):
    error_code = "not_authorized"
    error_status = HTTPStatus.FORBIDDEN

    def __init__(self, message: str = "Not authorized") -> None:
        super().__init__({"message": message})


__all__ = [
    "AppError",
    "DeclaredError",
    "DomainError",
    "InfrastructureError",
    "NotAuthenticatedError",
    "NotAuthorizedError",
    "StoreFailureError",
    "ValidationError",
]
