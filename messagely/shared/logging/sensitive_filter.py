# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Masks credentials and personal data before a log line reaches a sink."""

from __future__ import annotations

import re
from typing import Any

_MASK = "***REDACTED***"

_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    # signing secret
    (re.compile(r"(secret[_-]?key\s*[:=]\s*['\"]?)[\w\-]{8,}"), rf"\1{_MASK}"),
    # bearer tokens, then `token=` / `_token:` assignments, then any bare JWT
    (re.compile(r"(bearer\s+)[\w\-.]{20,}", re.IGNORECASE), rf"\1{_MASK}"),
    (re.compile(r"(_?token['\"]?\s*[:=]\s*['\"]?)[\w\-.]{20,}"), rf"\1{_MASK}"),
    (re.compile(r"\beyJ[\w\-]+\.[\w\-]+\.[\w\-]+"), "***JWT***"),
    # plaintext passwords and stored werkzeug hashes
    (
        re.compile(r"(password(?:_hash)?['\"]?\s*[:=]\s*['\"]?)[^'\"\s,}]+", re.IGNORECASE),
        rf"\1{_MASK}",
    ),
    (re.compile(r"\b(scrypt|pbkdf2):[^\s'\"]+\$[^\s'\"]+\$[0-9a-f]+"), r"\1:***HASH***"),
    # credentials embedded in database URLs
    (re.compile(r"((?:postgresql|postgres|mysql)(?:\+\w+)?://[^:/@\s]+):[^@\s]+@"), rf"\1:{_MASK}@"),
    # phone numbers given as phone=... or "phone": ...
    (re.compile(r"(phone['\"]?\s*[:=]\s*['\"]?)\+?[\d\-() ]{7,20}"), r"\1+***"),
    # raw Authorization headers
    (re.compile(r"(authorization\s*:\s*['\"]?)[^'\"\n]{10,}", re.IGNORECASE), rf"\1{_MASK}"),
)


def sanitize_message(message: str) -> str:
    for pattern, replacement in _RULES:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    """Loguru sink filter: rewrites the message in place and never drops it."""

    record["message"] = sanitize_message(record["message"])
    return True


__all__ = ["sanitize_message", "sanitize_record"]
