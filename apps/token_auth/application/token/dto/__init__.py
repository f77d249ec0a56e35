"""Token DTOs."""

from apps.token_auth.application.token.dto.token import (
    LogoutRequest,
    RefreshTokensRequest,
    TokenPair,
)

__all__ = ["LogoutRequest", "RefreshTokensRequest", "TokenPair"]
