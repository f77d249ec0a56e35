"""UsersQueryGateway Port.

사용자 저장소 조회 인터페이스입니다.
"""

from typing import Protocol

from apps.token_auth.domain.entities.user import User


class UsersQueryGateway(Protocol):
    """사용자 Query Gateway.

    구현체:
        - SqlaUsersQueryGateway (infrastructure/persistence_postgres/adapters/)
    """

    async def find_active_by_real_id(self, real_id: str) -> User | None:
        """탈퇴하지 않은 사용자를 real_id로 조회.

        Args:
            real_id: 안정적인 사용자 식별자

        Returns:
            사용자 엔티티 또는 None
        """
        ...
