"""TokenService - 토큰 발급 및 폐기 서비스.

"연주자" 역할: Access 토큰 서명, 리프레시 토큰 생성과 등록, 폐기를 담당합니다.
UseCase(지휘자)가 이 서비스를 호출하여 토큰 관련 작업을 위임합니다.
"""

from __future__ import annotations

import logging
import secrets
from typing import TYPE_CHECKING, Callable

from apps.token_auth.application.token.dto import TokenPair

if TYPE_CHECKING:
    from apps.token_auth.application.token.ports import (
        ClaimParser,
        RefreshTokenStore,
        RevocationStore,
        TokenIssuer,
    )
    from apps.token_auth.domain.value_objects.principal import Principal

logger = logging.getLogger(__name__)

REFRESH_TOKEN_BYTES = 32


def generate_refresh_token() -> str:
    """불투명한 리프레시 토큰 생성 (Access 토큰과 무관한 난수)."""
    return secrets.token_urlsafe(REFRESH_TOKEN_BYTES)


class TokenService:
    """토큰 발급 및 폐기 서비스.

    Responsibilities:
        - Access/리프레시 토큰 쌍 발급
        - 리프레시 토큰 저장소 등록
        - Access 토큰 폐기 (jti 블랙리스트)

    Collaborators:
        - TokenIssuer: Access 토큰 서명
        - ClaimParser: 폐기 대상 토큰의 클레임 조회
        - RefreshTokenStore: 리프레시 토큰 저장
        - RevocationStore: 블랙리스트
    """

    def __init__(
        self,
        issuer: "TokenIssuer",
        claim_parser: "ClaimParser",
        refresh_token_store: "RefreshTokenStore",
        revocation_store: "RevocationStore",
        *,
        refresh_token_expire_seconds: int,
        refresh_token_factory: Callable[[], str] = generate_refresh_token,
    ) -> None:
        self._issuer = issuer
        self._claim_parser = claim_parser
        self._refresh_token_store = refresh_token_store
        self._revocation_store = revocation_store
        self._refresh_token_expire_seconds = refresh_token_expire_seconds
        self._refresh_token_factory = refresh_token_factory

    async def issue(self, principal: "Principal") -> TokenPair:
        """토큰 쌍을 발급하고 리프레시 토큰을 등록합니다.

        저장소 등록이 실패하면 토큰을 반환하지 않습니다 (재시도 없음).
        호출자는 재인증부터 다시 시도해야 합니다.

        Args:
            principal: 인증된 주체

        Returns:
            TokenPair: 발급된 토큰 쌍

        Raises:
            StoreUnavailableError: 리프레시 토큰 저장 실패
        """
        # 1. Access 토큰 서명
        access = self._issuer.issue_access_token(principal)

        # 2. 리프레시 토큰 생성 및 등록
        refresh_token = self._refresh_token_factory()
        await self._refresh_token_store.save(
            refresh_token,
            principal.real_id,
            self._refresh_token_expire_seconds,
        )

        logger.info(
            "Token pair issued",
            extra={"user_id": principal.id, "access_jti": access.jti[:8]},
        )

        return TokenPair(
            access_token=access.token,
            refresh_token=refresh_token,
            access_jti=access.jti,
            access_expires_at=access.expires_at,
            refresh_expires_in=self._refresh_token_expire_seconds,
        )

    async def revoke(self, access_token: str) -> bool:
        """Access 토큰을 남은 수명 동안 폐기합니다.

        만료된 토큰도 클레임을 읽을 수 있지만, 이미 무해하므로 저장하지 않습니다.

        Returns:
            블랙리스트에 등록했으면 True

        Raises:
            InvalidTokenError: 서명 불일치 또는 형식 오류
            StoreUnavailableError: 블랙리스트 저장 실패
        """
        claims = self._claim_parser.parse_claims(access_token)
        ttl = claims.remaining_seconds()
        if ttl <= 0:
            logger.debug(
                "Token already expired, skipping revocation",
                extra={"jti": claims.jti[:8]},
            )
            return False

        await self._revocation_store.revoke(claims.jti, ttl)
        logger.info("Access token revoked", extra={"jti": claims.jti[:8], "ttl": ttl})
        return True

    async def discard_refresh_token(self, refresh_token: str) -> None:
        """리프레시 토큰을 저장소에서 제거합니다."""
        await self._refresh_token_store.delete(refresh_token)
