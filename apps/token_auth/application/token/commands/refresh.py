"""RefreshTokens Command.

토큰 갱신 Use Case입니다.

Architecture:
    - UseCase(지휘자): RefreshTokensInteractor
    - Services(연주자): TokenService
    - Ports(인프라): RefreshTokenStore, UsersQueryGateway
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.token_auth.domain.exceptions.auth import RefreshTokenNotFoundError
from apps.token_auth.domain.exceptions.user import UserNotFoundError

if TYPE_CHECKING:
    from apps.token_auth.application.token.dto import RefreshTokensRequest, TokenPair
    from apps.token_auth.application.token.ports import RefreshTokenStore
    from apps.token_auth.application.token.services import TokenService
    from apps.token_auth.application.users.ports import UsersQueryGateway

logger = logging.getLogger(__name__)


class RefreshTokensInteractor:
    """토큰 갱신 Interactor (지휘자).

    Workflow:
        1. 리프레시 토큰 소비 (GETDEL, 동시 요청 중 하나만 성공)
        2. 활성 사용자 조회
        3. 새 토큰 쌍 발급 및 등록 (TokenService)

    Note:
        삭제 후 발급이 실패하면 클라이언트는 재인증해야 합니다.
    """

    def __init__(
        self,
        # Services (연주자)
        token_service: "TokenService",
        # Ports (인프라)
        refresh_token_store: "RefreshTokenStore",
        users_query_gateway: "UsersQueryGateway",
    ) -> None:
        self._token_service = token_service
        self._refresh_token_store = refresh_token_store
        self._users_query_gateway = users_query_gateway

    async def execute(self, request: "RefreshTokensRequest") -> "TokenPair":
        """토큰을 갱신합니다.

        Raises:
            RefreshTokenNotFoundError: 저장소에 없는 리프레시 토큰
            UserNotFoundError: 사용자를 찾을 수 없음
            StoreUnavailableError: 저장소 접근 불가
        """
        # 1. 소유자 조회 및 기존 토큰 폐기 (원자적 rotation)
        owner_id = await self._refresh_token_store.consume(request.refresh_token)
        if owner_id is None:
            raise RefreshTokenNotFoundError()

        # 2. 사용자 조회
        user = await self._users_query_gateway.find_active_by_real_id(owner_id)
        if user is None:
            raise UserNotFoundError(owner_id)

        # 3. 새 토큰 발급
        token_pair = await self._token_service.issue(user.to_principal())

        logger.info("Token pair rotated", extra={"user_id": user.id_})
        return token_pair
