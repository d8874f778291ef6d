from __future__ import annotations

from unittest.mock import Mock

import pytest

from messagely.application.services.credential_store import CredentialStore
from messagely.application.services.password_hashing import WerkzeugPasswordHasher
from messagely.domain.users.entities import NewUser
from messagely.domain.users.exceptions import UserAlreadyExistsError, UserNotFoundError


def _new_user(username: str = "alice", password: str = "secret123") -> NewUser:
    return NewUser(
        username=username,
        password=password,
        first_name="Alice",
        last_name="Liddell",
        phone="+15550001111",
    )


@pytest.fixture()
def store(user_repository, hasher, clock) -> CredentialStore:
    return CredentialStore(users=user_repository, password_hasher=hasher, clock=clock)


def test_register_stores_hash_and_stamps_both_timestamps(store: CredentialStore) -> None:
    user = store.register(_new_user())

    assert user.username == "alice"
    assert user.password_hash != "secret123"
    assert user.join_at == user.last_login_at


def test_register_duplicate_username_rejected(store: CredentialStore) -> None:
    store.register(_new_user())

    with pytest.raises(UserAlreadyExistsError):
        store.register(_new_user(password="different1"))


def test_authenticate_outcomes(store: CredentialStore) -> None:
    store.register(_new_user())

    assert store.authenticate("alice", "secret123") is True
    assert store.authenticate("alice", "wrong-pass") is False
    assert store.authenticate("nobody", "secret123") is False


def test_authenticate_unknown_user_still_verifies_a_hash(user_repository, hasher, clock) -> None:
    spy = Mock(wraps=hasher)
    store = CredentialStore(users=user_repository, password_hasher=spy, clock=clock)

    assert store.authenticate("nobody", "secret123") is False
    assert store.authenticate("nobody", "other-pass") is False

    assert spy.verify.call_count == 2
    assert spy.hash.call_count == 1
    first_hash = spy.verify.call_args_list[0].args[1]
    assert spy.verify.call_args_list[1].args[1] == first_hash


def test_store_accepts_short_passwords(store: CredentialStore) -> None:
    store.register(_new_user(password="pw"))

    assert store.authenticate("alice", "pw") is True


def test_get_round_trips_registered_fields(store: CredentialStore) -> None:
    registered = store.register(_new_user())

    fetched = store.get("alice")

    assert fetched == registered
    assert fetched.first_name == "Alice"
    assert fetched.phone == "+15550001111"


def test_get_unknown_user_raises(store: CredentialStore) -> None:
    with pytest.raises(UserNotFoundError) as exc_info:
        store.get("ghost")

    assert exc_info.value.status == 404
    assert exc_info.value.context == {"username": "ghost"}


def test_record_login_moves_last_login_forward(store: CredentialStore) -> None:
    registered = store.register(_new_user())

    updated = store.record_login("alice")

    assert updated.last_login_at > registered.last_login_at
    assert updated.join_at == registered.join_at
    assert store.get("alice").last_login_at == updated.last_login_at


def test_record_login_unknown_user_raises(store: CredentialStore) -> None:
    with pytest.raises(UserNotFoundError):
        store.record_login("ghost")


def test_list_returns_summaries_sorted_by_username(store: CredentialStore) -> None:
    store.register(_new_user("carol"))
    store.register(_new_user("alice"))
    store.register(_new_user("bob"))

    summaries = store.list()

    assert [summary.username for summary in summaries] == ["alice", "bob", "carol"]
    assert not hasattr(summaries[0], "password_hash")


def test_werkzeug_hasher_never_stores_plaintext() -> None:
    hasher = WerkzeugPasswordHasher(method="pbkdf2:sha256:1000")

    hashed = hasher.hash("secret123")

    assert hashed.startswith("pbkdf2:sha256:1000$")
    assert "secret123" not in hashed
    assert hasher.verify("secret123", hashed) is True
    assert hasher.verify("secret124", hashed) is False
