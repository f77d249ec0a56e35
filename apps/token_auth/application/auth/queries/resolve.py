"""ResolveAuthentication Query.

검증된 클레임을 요청 단위 인증 객체로 변환합니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from apps.token_auth.domain.enums.role import Role
from apps.token_auth.domain.exceptions.auth import MissingAuthorizationError
from apps.token_auth.domain.exceptions.user import UserNotFoundError
from apps.token_auth.domain.value_objects.principal import Principal

if TYPE_CHECKING:
    from apps.token_auth.application.users.ports import UsersQueryGateway
    from apps.token_auth.domain.value_objects.token_claims import TokenClaims

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Authentication:
    """인증된 주체와 권한 집합.

    credentials는 클레임에 비밀번호가 없으면 None입니다.
    """

    principal: Principal
    authorities: frozenset[str] = field(default_factory=frozenset)
    credentials: str | None = field(default=None, repr=False)

    @property
    def is_authenticated(self) -> bool:
        return True


class ResolveAuthenticationQueryService:
    """인증 해석 Query Service.

    Workflow:
        1. role 클레임 확인 (누락 시 기본 권한으로 대체하지 않음)
        2. 활성 사용자 조회
        3. Role 변환 (알 수 없는 값은 실패)
        4. Principal 및 단일 권한 구성
    """

    def __init__(self, users_query_gateway: "UsersQueryGateway") -> None:
        self._users_query_gateway = users_query_gateway

    async def execute(self, claims: "TokenClaims") -> Authentication:
        """클레임에서 Authentication을 구성합니다.

        Raises:
            MissingAuthorizationError: role 클레임 누락
            UserNotFoundError: 사용자 없음 또는 탈퇴
            InvalidRoleError: 알 수 없는 role 값
        """
        if claims.role is None:
            raise MissingAuthorizationError()

        user = await self._users_query_gateway.find_active_by_real_id(claims.subject)
        if user is None:
            logger.debug("No active user for token subject")
            raise UserNotFoundError(claims.subject)

        role = Role.from_claim(claims.role)

        principal = Principal(
            id=user.id_,
            real_id=claims.subject,
            nickname=claims.nickname,
            role=role,
            name=claims.name,
        )
        return Authentication(
            principal=principal,
            authorities=frozenset({claims.role}),
            credentials=claims.password,
        )
