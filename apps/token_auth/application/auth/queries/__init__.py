"""Auth queries."""

from apps.token_auth.application.auth.queries.resolve import (
    Authentication,
    ResolveAuthenticationQueryService,
)

__all__ = ["Authentication", "ResolveAuthenticationQueryService"]
