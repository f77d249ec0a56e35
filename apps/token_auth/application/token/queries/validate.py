"""ValidateToken Query.

Access 토큰 검증 Query Service입니다.

공개 계약은 단일 boolean(execute)이며, 내부 분류(classify)는
실패 원인을 구분하여 로그로 남깁니다.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from apps.token_auth.domain.exceptions.auth import (
    InvalidTokenError,
    TokenExpiredError,
    TokenRevokedError,
)

if TYPE_CHECKING:
    from apps.token_auth.application.token.ports import RevocationStore, TokenIssuer
    from apps.token_auth.domain.value_objects.token_claims import TokenClaims

logger = logging.getLogger(__name__)


class TokenValidity(str, Enum):
    """토큰 검증 결과 분류."""

    VALID = "valid"
    INVALID = "invalid"
    EXPIRED = "expired"
    REVOKED = "revoked"


class ValidateTokenQueryService:
    """토큰 검증 Query Service.

    서명, 만료, 폐기 여부를 순서대로 확인합니다.

    Dependencies:
        - token_issuer: 서명 및 만료 검증
        - revocation_store: 블랙리스트 조회
    """

    def __init__(
        self,
        token_issuer: "TokenIssuer",
        revocation_store: "RevocationStore",
    ) -> None:
        self._token_issuer = token_issuer
        self._revocation_store = revocation_store

    async def verify(self, access_token: str) -> "TokenClaims":
        """토큰을 검증하고 클레임을 반환합니다.

        Raises:
            InvalidTokenError: 유효하지 않은 토큰
            TokenExpiredError: 만료된 토큰
            TokenRevokedError: 폐기된 토큰
            StoreUnavailableError: 블랙리스트 조회 실패
        """
        # 1. 서명 및 만료 검증
        claims = self._token_issuer.decode(access_token)

        # 2. 블랙리스트 확인
        if await self._revocation_store.is_revoked(claims.jti):
            raise TokenRevokedError(claims.jti)

        return claims

    async def classify(self, access_token: str) -> TokenValidity:
        """검증 결과를 분류합니다.

        저장소 장애(StoreUnavailableError)는 분류하지 않고 전파합니다.
        """
        try:
            await self.verify(access_token)
        except TokenExpiredError:
            logger.debug("Expired JWT token")
            return TokenValidity.EXPIRED
        except TokenRevokedError as e:
            logger.debug("Revoked JWT token", extra={"jti": e.jti[:8]})
            return TokenValidity.REVOKED
        except InvalidTokenError as e:
            logger.error("Invalid JWT token", extra={"reason": e.message})
            return TokenValidity.INVALID
        return TokenValidity.VALID

    async def execute(self, access_token: str) -> bool:
        """토큰이 현재 사용 가능한지 반환합니다."""
        return await self.classify(access_token) is TokenValidity.VALID
