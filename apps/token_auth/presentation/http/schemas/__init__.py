"""HTTP Schemas."""

from apps.token_auth.presentation.http.schemas.auth import (
    CurrentUserResponse,
    LogoutResponse,
    TokenResponse,
)

__all__ = ["CurrentUserResponse", "LogoutResponse", "TokenResponse"]
