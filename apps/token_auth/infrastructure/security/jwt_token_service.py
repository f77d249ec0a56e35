"""JWT Token Service.

TokenIssuer 포트의 구현체입니다.
"""

from __future__ import annotations

import time
import uuid
from typing import Any

from jose import jwt

from apps.token_auth.application.token.ports import AccessToken
from apps.token_auth.domain.value_objects.principal import Principal
from apps.token_auth.domain.value_objects.token_claims import (
    CLAIM_EXPIRES_AT,
    CLAIM_ISSUED_AT,
    CLAIM_JTI,
    CLAIM_NAME,
    CLAIM_NICKNAME,
    CLAIM_ROLE,
    CLAIM_SUBJECT,
    TokenClaims,
)
from apps.token_auth.infrastructure.security.jwt_claim_parser import (
    DEFAULT_ALGORITHM,
    decode_claims,
)
from apps.token_auth.infrastructure.security.signing_key import SigningKey


class JwtTokenService:
    """JWT 토큰 서비스.

    TokenIssuer 구현체.
    """

    def __init__(
        self,
        *,
        signing_key: SigningKey,
        algorithm: str = DEFAULT_ALGORITHM,
        access_token_expire_seconds: int = 1800,
    ) -> None:
        self._signing_key = signing_key
        self._algorithm = algorithm
        self._access_token_expire_seconds = access_token_expire_seconds

    def _now_timestamp(self) -> int:
        """현재 UTC Unix timestamp 반환."""
        return int(time.time())

    def issue_access_token(self, principal: Principal) -> AccessToken:
        """Access 토큰 서명."""
        jti = str(uuid.uuid4())
        now = self._now_timestamp()
        expires_at = now + self._access_token_expire_seconds

        payload: dict[str, Any] = {
            CLAIM_SUBJECT: principal.real_id,
            CLAIM_JTI: jti,
            CLAIM_ISSUED_AT: now,
            CLAIM_EXPIRES_AT: expires_at,
            CLAIM_NICKNAME: principal.nickname,
            CLAIM_ROLE: principal.role.to_claim(),
            CLAIM_NAME: principal.name,
        }

        token = jwt.encode(payload, self._signing_key.value, algorithm=self._algorithm)
        return AccessToken(token=token, jti=jti, issued_at=now, expires_at=expires_at)

    def decode(self, token: str) -> TokenClaims:
        """토큰 디코딩 (서명 및 만료 검증)."""
        return decode_claims(token, self._signing_key, self._algorithm)
