"""Redis Refresh Token Store.

RefreshTokenStore 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from apps.token_auth.application.common.exceptions import StoreUnavailableError
from apps.token_auth.infrastructure.persistence_redis.constants import (
    REFRESH_TOKEN_KEY_PREFIX,
)

if TYPE_CHECKING:
    import redis.asyncio as aioredis

logger = logging.getLogger(__name__)

STORE_NAME = "refresh_token"


class RedisRefreshTokenStore:
    """Redis 기반 리프레시 토큰 저장소.

    RefreshTokenStore 구현체.
    키: refresh_token:{token} → 값: 소유자 real_id
    """

    def __init__(self, redis: "aioredis.Redis") -> None:
        self._redis = redis

    def _key(self, token: str) -> str:
        return f"{REFRESH_TOKEN_KEY_PREFIX}{token}"

    async def save(self, token: str, owner_id: str, ttl_seconds: int) -> None:
        """리프레시 토큰 저장."""
        try:
            await self._redis.setex(self._key(token), ttl_seconds, owner_id)
        except RedisError as e:
            logger.error("Failed to save refresh token")
            raise StoreUnavailableError(STORE_NAME) from e

    async def lookup(self, token: str) -> str | None:
        """소유자 조회."""
        try:
            value = await self._redis.get(self._key(token))
        except RedisError as e:
            logger.error("Failed to look up refresh token")
            raise StoreUnavailableError(STORE_NAME) from e

        if value is None:
            return None
        return value.decode("utf-8") if isinstance(value, bytes) else value

    async def consume(self, token: str) -> str | None:
        """GETDEL로 소유자 조회와 삭제를 한 번에 수행 (1회용)."""
        try:
            value = await self._redis.getdel(self._key(token))
        except RedisError as e:
            logger.error("Failed to consume refresh token")
            raise StoreUnavailableError(STORE_NAME) from e

        if value is None:
            return None
        return value.decode("utf-8") if isinstance(value, bytes) else value

    async def delete(self, token: str) -> None:
        """리프레시 토큰 삭제."""
        try:
            await self._redis.delete(self._key(token))
        except RedisError as e:
            logger.error("Failed to delete refresh token")
            raise StoreUnavailableError(STORE_NAME) from e
