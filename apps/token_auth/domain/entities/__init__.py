"""Domain Entities."""

from apps.token_auth.domain.entities.user import User

__all__ = ["User"]
