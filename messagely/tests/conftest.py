from __future__ import annotations

import os
import tempfile

# Configuration is read once per process, so it has to be in place before
# anything under messagely is imported.
_TMP_DIR = tempfile.mkdtemp(prefix="messagely-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'messagely.db')}"
os.environ["SECRET_KEY"] = "test-secret-key-with-at-least-32-bytes!"
os.environ["PASSWORD_HASH_METHOD"] = "pbkdf2:sha256:1000"
os.environ["ENABLE_RATE_LIMIT"] = "false"
os.environ["APP_ENV"] = "test"
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "app.log")

from collections.abc import Callable, Sequence  # noqa: E402
from dataclasses import replace  # noqa: E402
from datetime import UTC, datetime, timedelta  # noqa: E402

import pytest  # noqa: E402

from messagely.domain.messages.entities import (  # noqa: E402
    Message,
    MessageDetail,
    ReceivedMessage,
    SentMessage,
)
from messagely.domain.messages.exceptions import MessageNotFoundError  # noqa: E402
from messagely.domain.messages.repositories import MessageRepository  # noqa: E402
from messagely.domain.users.entities import SessionClaims, User, UserSummary  # noqa: E402
from messagely.domain.users.exceptions import (  # noqa: E402
    UserAlreadyExistsError,
    UserNotFoundError,
)
from messagely.domain.users.repositories import (  # noqa: E402
    PasswordHasher,
    TokenService,
    UserRepository,
)
from messagely.shared.errors.base import NotAuthenticatedError  # noqa: E402


class StepClock:
    """Returns a strictly increasing time on every call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self._now = start or datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
        self._step = step

    def __call__(self) -> datetime:
        current = self._now
        self._now = self._now + self._step
        return current


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)

    def add(self, user: User) -> User:
        if user.username in self._users:
            raise UserAlreadyExistsError()
        self._users[user.username] = user
        return user

    def touch_last_login(self, username: str, at: datetime) -> User | None:
        user = self._users.get(username)
        if user is None:
            return None
        updated = replace(user, last_login_at=at)
        self._users[username] = updated
        return updated

    def list_all(self) -> Sequence[UserSummary]:
        return [self._users[name].summary() for name in sorted(self._users)]


class InMemoryMessageRepository(MessageRepository):
    def __init__(self, users: InMemoryUserRepository, clock: Callable[[], datetime]) -> None:
        self._users = users
        self._clock = clock
        self._messages: dict[int, Message] = {}
        self._seq = 1

    def _summary(self, username: str) -> UserSummary:
        user = self._users.find_by_username(username)
        if user is None:
            raise UserNotFoundError(username)
        return user.summary()

    def create(self, from_username: str, to_username: str, body: str) -> Message:
        self._summary(from_username)
        self._summary(to_username)
        message = Message(
            id=self._seq,
            from_username=from_username,
            to_username=to_username,
            body=body,
            sent_at=self._clock(),
            read_at=None,
        )
        self._seq += 1
        self._messages[message.id] = message
        return message

    def _row(self, message_id: int) -> Message:
        try:
            return self._messages[message_id]
        except KeyError:
            raise MessageNotFoundError(message_id) from None

    def get(self, message_id: int) -> MessageDetail:
        row = self._row(message_id)
        return MessageDetail(
            id=row.id,
            body=row.body,
            sent_at=row.sent_at,
            read_at=row.read_at,
            from_user=self._summary(row.from_username),
            to_user=self._summary(row.to_username),
        )

    def mark_read(self, message_id: int) -> Message:
        row = self._row(message_id)
        if row.read_at is None:
            row = replace(row, read_at=self._clock())
            self._messages[message_id] = row
        return row

    def list_sent_by(self, username: str) -> Sequence[SentMessage]:
        return [
            SentMessage(
                id=m.id,
                body=m.body,
                sent_at=m.sent_at,
                read_at=m.read_at,
                to_user=self._summary(m.to_username),
            )
            for m in self._messages.values()
            if m.from_username == username
        ]

    def list_received_by(self, username: str) -> Sequence[ReceivedMessage]:
        return [
            ReceivedMessage(
                id=m.id,
                body=m.body,
                sent_at=m.sent_at,
                read_at=m.read_at,
                from_user=self._summary(m.from_username),
            )
            for m in self._messages.values()
            if m.to_username == username
        ]


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


class FakeTokenService(TokenService):
    """Tokens of the form ``token-<username>``."""

    def __init__(self) -> None:
        self.issued: list[str] = []

    def issue(self, username: str) -> str:
        self.issued.append(username)
        return f"token-{username}"

    def decode(self, token: str) -> SessionClaims:
        if not token.startswith("token-"):
            raise NotAuthenticatedError()
        now = datetime.now(UTC)
        return SessionClaims(
            username=token.removeprefix("token-"),
            issued_at=now,
            expires_at=now + timedelta(hours=1),
        )


@pytest.fixture()
def clock() -> StepClock:
    return StepClock()


@pytest.fixture()
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def message_repository(
    user_repository: InMemoryUserRepository, clock: StepClock
) -> InMemoryMessageRepository:
    return InMemoryMessageRepository(user_repository, clock)


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def token_service() -> FakeTokenService:
    return FakeTokenService()
