# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .base import (
    AppError,
    DeclaredError,
    DomainError,
    InfrastructureError,
    NotAuthenticatedError,
    NotAuthorizedError,
    StoreFailureError,
    ValidationError,
)
from .http import configure_error_handling, error_response
from .validation import describe_errors, validate_payload

__all__ = [
    "AppError",
    "DeclaredError",
    "DomainError",
    "InfrastructureError",
    "NotAuthenticatedError",
    "NotAuthorizedError",
    "StoreFailureError",
    "ValidationError",
    "configure_error_handling",
    "describe_errors",
    "error_response",
    "validate_payload",
]
