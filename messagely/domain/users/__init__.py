from .entities import NewUser, SessionClaims, User, UserSummary
from .exceptions import InvalidCredentialsError, UserAlreadyExistsError, UserNotFoundError

__all__ = [
    "NewUser",
    "SessionClaims",
    "User",
    "UserSummary",
    "InvalidCredentialsError",
    "UserAlreadyExistsError",
    "UserNotFoundError",
]
