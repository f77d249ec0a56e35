"""RefreshTokenStore Port."""

from typing import Protocol


class RefreshTokenStore(Protocol):
    """리프레시 토큰 저장소 인터페이스.

    리프레시 토큰 값 → 소유자 real_id 매핑을 TTL과 함께 저장합니다.

    구현체:
        - RedisRefreshTokenStore (infrastructure/persistence_redis/)
    """

    async def save(self, token: str, owner_id: str, ttl_seconds: int) -> None:
        """리프레시 토큰 저장.

        Raises:
            StoreUnavailableError: 저장소 접근 불가
        """
        ...

    async def lookup(self, token: str) -> str | None:
        """소유자 real_id 조회. 없으면 None.

        Raises:
            StoreUnavailableError: 저장소 접근 불가
        """
        ...

    async def consume(self, token: str) -> str | None:
        """소유자 조회와 삭제를 원자적으로 수행. 없으면 None.

        동시에 같은 토큰으로 호출되어도 소유자는 한 번만 반환됩니다.

        Raises:
            StoreUnavailableError: 저장소 접근 불가
        """
        ...

    async def delete(self, token: str) -> None:
        """리프레시 토큰 삭제.

        Raises:
            StoreUnavailableError: 저장소 접근 불가
        """
        ...
