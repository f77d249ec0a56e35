"""Domain Exceptions."""

from apps.token_auth.domain.exceptions.auth import (
    InvalidRoleError,
    InvalidTokenError,
    MissingAuthorizationError,
    RefreshTokenNotFoundError,
    TokenExpiredError,
    TokenRevokedError,
)
from apps.token_auth.domain.exceptions.base import DomainError
from apps.token_auth.domain.exceptions.user import UserNotFoundError

__all__ = [
    "DomainError",
    "InvalidTokenError",
    "TokenExpiredError",
    "TokenRevokedError",
    "MissingAuthorizationError",
    "InvalidRoleError",
    "RefreshTokenNotFoundError",
    "UserNotFoundError",
]
