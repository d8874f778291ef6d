# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Transaction boundary for the SQLAlchemy repositories."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from messagely.shared.errors.base import StoreFailureError
from messagely.shared.logging import logger

IntegrityErrorMapper = Callable[[IntegrityError], Exception]


@dataclass(slots=True)
class SqlAlchemyUnitOfWork(AbstractContextManager):
    """One session per store operation.

    The session is committed when the block succeeds and rolled back
    otherwise. Driver errors leave as `StoreFailureError` tagged with
    `operation`, except constraint violations when `on_integrity_error` maps
    them to a domain error. Errors raised by the block itself pass through.
    """

    session_factory: Callable[[], Session]
    operation: str
    on_integrity_error: IntegrityErrorMapper | None = None
    _session: Session | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self.session_factory()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        session = self.session
        try:
            if exc is None:
                session.commit()
                logger.debug(f"uow.{self.operation}: committed")
                return
            session.rollback()
            logger.debug(f"uow.{self.operation}: rolled back ({exc_type.__name__})")
            if isinstance(exc, SQLAlchemyError):
                raise self._translate(exc) from exc
        except SQLAlchemyError as commit_error:
            session.rollback()
            raise self._translate(commit_error) from commit_error
        finally:
            session.close()
            self._session = None

    def _translate(self, exc: SQLAlchemyError) -> Exception:
        if isinstance(exc, IntegrityError) and self.on_integrity_error is not None:
            logger.info(f"store.{self.operation}: constraint violated")
            return self.on_integrity_error(exc)
        logger.error(f"store.{self.operation}: {type(exc).__name__}: {exc}")
        return StoreFailureError(self.operation)

    @property
    def session(self) -> Session:
        if self._session is None:
            msg = "UnitOfWork session accessed before entering context"
            raise RuntimeError(msg)
        return self._session


@contextmanager
def unit_of_work_scope(
    factory: Callable[[], Session],
    operation: str,
    *,
    on_integrity_error: IntegrityErrorMapper | None = None,
) -> Iterator[Session]:
    with SqlAlchemyUnitOfWork(factory, operation, on_integrity_error) as uow:
        yield uow.session


__all__ = ["SqlAlchemyUnitOfWork", "unit_of_work_scope"]
