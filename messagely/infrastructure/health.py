# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine

from messagely.infrastructure.db import ENGINE, Base
from messagely.infrastructure.db import models  # noqa: F401  registers the mapped tables


def missing_tables(engine: Engine = ENGINE) -> list[str]:
    """Ping the database and list mapped tables it does not have yet."""

    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
        present = set(inspect(connection).get_table_names())
    return sorted(set(Base.metadata.tables) - present)


__all__ = ["missing_tables"]
