"""Logout Command.

로그아웃 Use Case입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.token_auth.domain.exceptions.base import DomainError

if TYPE_CHECKING:
    from apps.token_auth.application.token.dto import LogoutRequest
    from apps.token_auth.application.token.services import TokenService

logger = logging.getLogger(__name__)


class LogoutInteractor:
    """로그아웃 Interactor (지휘자).

    Workflow:
        1. Access 토큰 폐기 (블랙리스트 등록)
        2. 리프레시 토큰 삭제

    Note:
        유효하지 않은 토큰은 무시합니다 (멱등).
        저장소 장애는 전파합니다.
    """

    def __init__(self, token_service: "TokenService") -> None:
        self._token_service = token_service

    async def execute(self, request: "LogoutRequest") -> None:
        # 1. Access 토큰 처리
        if request.access_token:
            try:
                await self._token_service.revoke(request.access_token)
            except DomainError as e:
                logger.debug("Ignoring unusable access token on logout", extra={"reason": e.message})

        # 2. 리프레시 토큰 처리
        if request.refresh_token:
            await self._token_service.discard_refresh_token(request.refresh_token)

        logger.info("User logged out")
