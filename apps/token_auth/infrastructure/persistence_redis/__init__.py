"""Redis Persistence Layer."""

from apps.token_auth.infrastructure.persistence_redis.adapters import (
    RedisRefreshTokenStore,
    RedisRevocationStore,
)
from apps.token_auth.infrastructure.persistence_redis.client import (
    get_refresh_token_redis,
    get_revocation_redis,
)

__all__ = [
    "get_refresh_token_redis",
    "get_revocation_redis",
    "RedisRefreshTokenStore",
    "RedisRevocationStore",
]
