"""Auth HTTP Components."""

from apps.token_auth.presentation.http.auth.bearer import parse_bearer
from apps.token_auth.presentation.http.auth.dependencies import (
    authenticate_request,
    get_current_principal,
    get_security_context,
)

__all__ = [
    "authenticate_request",
    "get_current_principal",
    "get_security_context",
    "parse_bearer",
]
