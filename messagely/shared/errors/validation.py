# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def describe_errors(exc: PydanticValidationError) -> dict[str, list[str]]:
    """Group pydantic messages by dotted field path.

    Submitted values are never echoed, so a rejected password stays out of
    the response body.
    """

    fields: dict[str, list[str]] = {}
    for error in exc.errors(include_input=False, include_url=False):
        path = ".".join(str(part) for part in error.get("loc", ()) if part is not None)
        fields.setdefault(path or "body", []).append(error.get("msg", "Invalid value"))
    return fields


def validate_payload(model: type[ModelT], payload: Any) -> ModelT:
    """Parse a JSON body into `model`, raising a 422 error on failure."""

    try:
        return model.model_validate(payload if payload is not None else {})
    except PydanticValidationError as exc:
        raise ValidationError({"fields": describe_errors(exc)}) from exc


__all__ = ["describe_errors", "validate_payload"]
