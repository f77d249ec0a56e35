"""Token services."""

from apps.token_auth.application.token.services.token_service import (
    TokenService,
    generate_refresh_token,
)

__all__ = ["TokenService", "generate_refresh_token"]
