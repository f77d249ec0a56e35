"""Redis Revocation Store.

RevocationStore 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from apps.token_auth.application.common.exceptions import StoreUnavailableError
from apps.token_auth.infrastructure.persistence_redis.constants import REVOCATION_KEY_PREFIX

if TYPE_CHECKING:
    import redis.asyncio as aioredis

logger = logging.getLogger(__name__)

STORE_NAME = "revocation"
REVOKED_MARKER = "1"


class RedisRevocationStore:
    """Redis 기반 토큰 블랙리스트.

    RevocationStore 구현체.
    Redis 키 TTL로 만료되므로 별도 정리 작업이 필요 없습니다.
    """

    def __init__(self, redis: "aioredis.Redis") -> None:
        self._redis = redis

    async def revoke(self, jti: str, ttl_seconds: int) -> None:
        """jti를 블랙리스트에 추가."""
        if ttl_seconds <= 0:
            return

        key = f"{REVOCATION_KEY_PREFIX}{jti}"
        try:
            await self._redis.setex(key, ttl_seconds, REVOKED_MARKER)
        except RedisError as e:
            logger.error("Failed to revoke token", extra={"jti": jti[:8]})
            raise StoreUnavailableError(STORE_NAME) from e

        logger.debug("Token added to blacklist", extra={"jti": jti[:8], "ttl": ttl_seconds})

    async def is_revoked(self, jti: str) -> bool:
        """블랙리스트 포함 여부 확인."""
        key = f"{REVOCATION_KEY_PREFIX}{jti}"
        try:
            return await self._redis.exists(key) > 0
        except RedisError as e:
            logger.error("Failed to read blacklist", extra={"jti": jti[:8]})
            raise StoreUnavailableError(STORE_NAME) from e
