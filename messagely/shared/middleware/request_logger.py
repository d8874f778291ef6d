# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
import time

from flask import Flask, Response, g, request

from messagely.shared.config import load_config
from messagely.shared.logging import (
    clear_request_context,
    get_correlation_id,
    logger,
    set_correlation_id,
)

REQUEST_ID_HEADER = "X-Request-ID"


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "")
    return forwarded.split(",")[0].strip() or request.remote_addr or "unknown"


def _incoming_request_id() -> str:
    # client supplied ids are trusted only when short and printable
    value = request.headers.get(REQUEST_ID_HEADER, "")
    if value and len(value) <= 64 and value.isprintable():
        return value
    return secrets.token_hex(8)


def configure_request_logging(app: Flask) -> None:
    """Tag each request with a correlation id and log its outcome.

    The id is echoed back in ``X-Request-ID``. Bodies and headers are never
    logged, since they carry passwords, tokens and message text.
    """

    debug_mode = load_config().debug_logging

    @app.before_request
    def _start() -> None:
        set_correlation_id(_incoming_request_id())
        g.request_started = time.perf_counter()
        if debug_mode:
            logger.debug(
                f"-> {request.method} {request.path} from {_client_ip()} "
                f"body_size={request.content_length or 0}"
            )

    @app.after_request
    def _finish(response: Response) -> Response:
        elapsed_ms = (time.perf_counter() - g.get("request_started", time.perf_counter())) * 1000
        logger.info(
            f"{request.method} {request.path} -> {response.status_code} "
            f"in {elapsed_ms:.1f}ms user={g.get('username', '-')}"
        )
        response.headers[REQUEST_ID_HEADER] = get_correlation_id()
        return response

    @app.teardown_request
    def _teardown(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"request aborted: {type(exc).__name__} on {request.method} {request.path}")
        clear_request_context()


__all__ = ["REQUEST_ID_HEADER", "configure_request_logging"]
