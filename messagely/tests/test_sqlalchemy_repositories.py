from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from messagely.domain.messages.exceptions import MessageNotFoundError
from messagely.domain.users.entities import User
from messagely.domain.users.exceptions import UserAlreadyExistsError, UserNotFoundError
from messagely.infrastructure.db import models
from messagely.infrastructure.db.session import Base, build_engine
from messagely.infrastructure.repositories.messages.sqlalchemy_message_repository import (
    SqlAlchemyMessageRepository,
)
from messagely.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from messagely.shared.config.settings import DatabaseConfig
from messagely.shared.errors.base import StoreFailureError

from conftest import StepClock

JOINED = datetime(2024, 1, 1, 9, 0, tzinfo=UTC)


@pytest.fixture()
def engine():
    engine = build_engine(DatabaseConfig(DATABASE_URL="sqlite://"))
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, expire_on_commit=False)


@pytest.fixture()
def users(session_factory) -> SqlAlchemyUserRepository:
    repo = SqlAlchemyUserRepository(session_factory)
    for username in ("alice", "bob", "carol"):
        repo.add(_user(username))
    return repo


@pytest.fixture()
def messages(session_factory, users) -> SqlAlchemyMessageRepository:
    return SqlAlchemyMessageRepository(session_factory, clock=StepClock(start=JOINED))


def _user(username: str) -> User:
    return User(
        username=username,
        password_hash=f"hashed:{username}",
        first_name=username.title(),
        last_name="Tester",
        phone="+15550000000",
        join_at=JOINED,
        last_login_at=JOINED,
    )


def test_user_round_trip_keeps_utc_timestamps(users: SqlAlchemyUserRepository) -> None:
    fetched = users.find_by_username("alice")

    assert fetched == _user("alice")
    assert fetched.join_at.tzinfo is not None
    assert users.find_by_username("ghost") is None


def test_user_add_duplicate_hits_unique_constraint(users: SqlAlchemyUserRepository) -> None:
    with pytest.raises(UserAlreadyExistsError):
        users.add(_user("alice"))


def test_touch_last_login(users: SqlAlchemyUserRepository) -> None:
    later = JOINED + timedelta(minutes=5)

    updated = users.touch_last_login("bob", later)

    assert updated is not None
    assert updated.last_login_at == later
    assert users.find_by_username("bob").last_login_at == later
    assert users.touch_last_login("ghost", later) is None


def test_list_all_sorted_summaries(users: SqlAlchemyUserRepository) -> None:
    assert [summary.username for summary in users.list_all()] == ["alice", "bob", "carol"]


def test_foreign_keys_enforced(session_factory, users) -> None:
    session = session_factory()
    try:
        session.add(
            models.Message(
                from_username="alice", to_username="ghost", body="x", sent_at=JOINED
            )
        )
        with pytest.raises(IntegrityError):
            session.flush()
    finally:
        session.rollback()
        session.close()


def test_create_message_unknown_participant(messages: SqlAlchemyMessageRepository) -> None:
    with pytest.raises(UserNotFoundError) as exc_info:
        messages.create("alice", "ghost", "hello")

    assert exc_info.value.context == {"username": "ghost"}
    assert messages.list_sent_by("alice") == []


def test_get_message_embeds_participants(messages: SqlAlchemyMessageRepository) -> None:
    created = messages.create("alice", "bob", "hello bob")

    detail = messages.get(created.id)

    assert detail.body == "hello bob"
    assert detail.from_user.username == "alice"
    assert detail.to_user.first_name == "Bob"
    assert detail.sent_at == created.sent_at
    assert detail.read_at is None


def test_get_missing_message(messages: SqlAlchemyMessageRepository) -> None:
    with pytest.raises(MessageNotFoundError):
        messages.get(12345)
    with pytest.raises(MessageNotFoundError):
        messages.mark_read(12345)


@pytest.mark.parametrize("message_id", [0, 2**63, 10**23])
def test_ids_outside_integer_range_are_not_found(
    messages: SqlAlchemyMessageRepository, message_id: int
) -> None:
    with pytest.raises(MessageNotFoundError):
        messages.get(message_id)
    with pytest.raises(MessageNotFoundError):
        messages.mark_read(message_id)


def test_mark_read_writes_once(messages: SqlAlchemyMessageRepository) -> None:
    created = messages.create("alice", "bob", "hello")

    first = messages.mark_read(created.id)
    second = messages.mark_read(created.id)

    assert first.read_at is not None
    assert first.read_at > created.sent_at
    assert second.read_at == first.read_at
    assert messages.get(created.id).read_at == first.read_at


def test_outbox_and_inbox(messages: SqlAlchemyMessageRepository) -> None:
    to_bob = messages.create("alice", "bob", "one")
    to_carol = messages.create("alice", "carol", "two")
    from_carol = messages.create("carol", "alice", "three")

    sent = messages.list_sent_by("alice")
    received = messages.list_received_by("alice")

    assert [(m.id, m.to_user.username) for m in sent] == [
        (to_bob.id, "bob"),
        (to_carol.id, "carol"),
    ]
    assert [(m.id, m.from_user.username) for m in received] == [(from_carol.id, "carol")]
    assert messages.list_received_by("bob")[0].body == "one"


def test_store_failure_is_translated() -> None:
    # no tables created, so every query fails at the driver
    engine = build_engine(DatabaseConfig(DATABASE_URL="sqlite://"))
    try:
        repo = SqlAlchemyUserRepository(sessionmaker(bind=engine))
        with pytest.raises(StoreFailureError) as exc_info:
            repo.find_by_username("alice")
    finally:
        engine.dispose()

    assert exc_info.value.status == 500
    assert exc_info.value.code == "store_failure"
