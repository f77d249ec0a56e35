"""RevocationStore Port.

폐기된 토큰(jti) 블랙리스트 인터페이스입니다.
"""

from typing import Protocol


class RevocationStore(Protocol):
    """토큰 블랙리스트 저장소 인터페이스.

    항목은 토큰의 남은 수명 동안만 유지됩니다.

    구현체:
        - RedisRevocationStore (infrastructure/persistence_redis/)
    """

    async def revoke(self, jti: str, ttl_seconds: int) -> None:
        """jti를 ttl_seconds 동안 폐기 상태로 표시.

        Raises:
            StoreUnavailableError: 저장소 접근 불가
        """
        ...

    async def is_revoked(self, jti: str) -> bool:
        """폐기 여부 확인. 항목이 없으면 False.

        Raises:
            StoreUnavailableError: 저장소 접근 불가
        """
        ...
