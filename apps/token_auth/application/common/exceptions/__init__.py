"""Application Exceptions."""

from apps.token_auth.application.common.exceptions.base import ApplicationError
from apps.token_auth.application.common.exceptions.gateway import (
    GatewayError,
    StoreUnavailableError,
)

__all__ = [
    "ApplicationError",
    "GatewayError",
    "StoreUnavailableError",
]
