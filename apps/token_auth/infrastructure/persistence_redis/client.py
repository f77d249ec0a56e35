"""Redis Client Provider.

블랙리스트용과 리프레시 토큰용 클라이언트를 분리합니다.

Retry 설정:
    - 블랙리스트: ExponentialBackoff 3회 재시도 (SETEX/EXISTS는 멱등)
    - 리프레시 토큰: 재시도 없음 (발급 실패는 그대로 호출자에게 보고)
    - health_check_interval: 30초마다 연결 상태 확인
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff, NoBackoff
from redis.exceptions import ConnectionError, TimeoutError

if TYPE_CHECKING:
    import redis.asyncio as aioredis

HEALTH_CHECK_INTERVAL = 30  # seconds
MAX_CONNECTIONS = 50
SOCKET_CONNECT_TIMEOUT = 5.0  # seconds
SOCKET_TIMEOUT = 5.0  # seconds
RETRY_ON_ERROR = [ConnectionError, TimeoutError]
REVOCATION_MAX_RETRIES = 3


def _build_async_client(redis_url: str, *, retries: int) -> "aioredis.Redis":
    """비동기 Redis 클라이언트 생성.

    Key configurations:
    - socket_keepalive: 네트워크 비활성으로 인한 연결 끊김 방지
    - socket_timeout: 원격 호출 시간 상한
    - max_connections: 연결 풀 크기 제한
    """
    import redis.asyncio as aioredis

    if retries > 0:
        retry = Retry(ExponentialBackoff(), retries=retries)
    else:
        retry = Retry(NoBackoff(), retries=0)

    return aioredis.from_url(
        redis_url,
        encoding="utf-8",
        decode_responses=True,
        # Health & Keepalive
        health_check_interval=HEALTH_CHECK_INTERVAL,
        socket_keepalive=True,
        # Timeouts
        socket_connect_timeout=SOCKET_CONNECT_TIMEOUT,
        socket_timeout=SOCKET_TIMEOUT,
        # Connection Pool
        max_connections=MAX_CONNECTIONS,
        retry=retry,
        retry_on_error=list(RETRY_ON_ERROR) if retries > 0 else [],
    )


@lru_cache
def get_revocation_redis() -> "aioredis.Redis":
    """토큰 블랙리스트용 Redis 클라이언트.

    환경변수:
        - AUTH_REDIS_REVOCATION_URL (default: redis://localhost:6379/0)
    """
    from apps.token_auth.setup.config import get_settings

    settings = get_settings()
    return _build_async_client(settings.redis_revocation_url, retries=REVOCATION_MAX_RETRIES)


@lru_cache
def get_refresh_token_redis() -> "aioredis.Redis":
    """리프레시 토큰 저장용 Redis 클라이언트.

    환경변수:
        - AUTH_REDIS_REFRESH_TOKEN_URL (default: redis://localhost:6379/1)
    """
    from apps.token_auth.setup.config import get_settings

    settings = get_settings()
    return _build_async_client(settings.redis_refresh_token_url, retries=0)
