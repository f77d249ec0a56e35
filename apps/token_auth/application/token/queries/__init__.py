"""Token queries."""

from apps.token_auth.application.token.queries.validate import (
    TokenValidity,
    ValidateTokenQueryService,
)

__all__ = ["TokenValidity", "ValidateTokenQueryService"]
