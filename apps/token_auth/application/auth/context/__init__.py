"""Request security context."""

from apps.token_auth.application.auth.context.security_context import (
    CurrentUserAccessor,
    SecurityContext,
)

__all__ = ["CurrentUserAccessor", "SecurityContext"]
