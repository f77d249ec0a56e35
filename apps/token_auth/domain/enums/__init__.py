"""Domain Enums."""

from apps.token_auth.domain.enums.role import Role

__all__ = ["Role"]
