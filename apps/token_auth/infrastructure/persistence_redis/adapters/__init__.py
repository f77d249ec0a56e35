"""Redis adapters."""

from apps.token_auth.infrastructure.persistence_redis.adapters.refresh_token_store_redis import (
    RedisRefreshTokenStore,
)
from apps.token_auth.infrastructure.persistence_redis.adapters.revocation_store_redis import (
    RedisRevocationStore,
)

__all__ = ["RedisRefreshTokenStore", "RedisRevocationStore"]
