# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Security-relevant events as structured log lines.

Lines are bound with ``audit=<action>`` so a sink can route them separately.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from messagely.shared.logging import logger

_REDACTED = "***REDACTED***"
_SENSITIVE_KEYS = ("password", "token", "secret", "phone", "body")


class AuditAction(str, Enum):
    REGISTER = "register"
    LOGIN_SUCCESS = "login_success"
    LOGIN_FAILED = "login_failed"
    MESSAGE_SENT = "message_sent"
    MESSAGE_READ = "message_read"
    ACCESS_DENIED = "access_denied"


def _redact(details: Mapping[str, Any]) -> dict[str, Any]:
    return {
        key: _REDACTED if any(marker in key.lower() for marker in _SENSITIVE_KEYS) else value
        for key, value in details.items()
    }


def audit_log(
    action: AuditAction,
    username: str | None = None,
    ip_address: str | None = None,
    details: Mapping[str, Any] | None = None,
    success: bool = True,
) -> None:
    fields: dict[str, Any] = {
        "user": username or "-",
        "ip": ip_address or "-",
        "success": success,
        **_redact(details or {}),
    }
    line = " ".join(f"{key}={value}" for key, value in fields.items())
    logger.bind(audit=action.value).log(
        "INFO" if success else "WARNING", f"audit.{action.value}: {line}"
    )


__all__ = ["AuditAction", "audit_log"]
