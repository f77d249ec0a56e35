"""Domain Value Objects."""

from apps.token_auth.domain.value_objects.principal import ANONYMOUS_USER_ID, Principal
from apps.token_auth.domain.value_objects.token_claims import TokenClaims

__all__ = ["ANONYMOUS_USER_ID", "Principal", "TokenClaims"]
