"""TokenClaims Value Object.

Access 토큰 페이로드를 표현합니다.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Mapping

from apps.token_auth.domain.exceptions.auth import InvalidTokenError

CLAIM_SUBJECT = "sub"
CLAIM_JTI = "jti"
CLAIM_ISSUED_AT = "iat"
CLAIM_EXPIRES_AT = "exp"
CLAIM_NICKNAME = "nickname"
CLAIM_ROLE = "role"
CLAIM_NAME = "name"
CLAIM_PASSWORD = "password"


@dataclass(frozen=True, slots=True)
class TokenClaims:
    """검증된 토큰의 클레임 집합.

    Attributes:
        subject: 안정적인 사용자 식별자 (real_id)
        jti: 토큰 고유 ID (폐기 키)
        issued_at: 발급 시각 (Unix timestamp)
        expires_at: 만료 시각 (Unix timestamp)
        nickname: 닉네임
        role: 권한 문자열 (누락 가능, 해석 단계에서 검증)
        name: 표시 이름
        password: 비밀번호 기반이 아닌 토큰에서는 None
    """

    subject: str
    jti: str
    issued_at: int
    expires_at: int
    nickname: str | None = None
    role: str | None = None
    name: str | None = None
    password: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "TokenClaims":
        """디코딩된 JWT 페이로드에서 생성.

        Raises:
            InvalidTokenError: 필수 클레임(sub, jti, iat, exp) 누락
        """
        required = (CLAIM_SUBJECT, CLAIM_JTI, CLAIM_ISSUED_AT, CLAIM_EXPIRES_AT)
        if any(payload.get(claim) is None for claim in required):
            raise InvalidTokenError("Missing required claims")

        role = payload.get(CLAIM_ROLE)
        return cls(
            subject=str(payload[CLAIM_SUBJECT]),
            jti=str(payload[CLAIM_JTI]),
            issued_at=int(payload[CLAIM_ISSUED_AT]),
            expires_at=int(payload[CLAIM_EXPIRES_AT]),
            nickname=payload.get(CLAIM_NICKNAME),
            role=str(role) if role is not None else None,
            name=payload.get(CLAIM_NAME),
            password=payload.get(CLAIM_PASSWORD),
        )

    def is_expired(self, now: int | None = None) -> bool:
        now = int(time.time()) if now is None else now
        return self.expires_at <= now

    def remaining_seconds(self, now: int | None = None) -> int:
        """만료까지 남은 시간(초). 이미 만료되었으면 0."""
        now = int(time.time()) if now is None else now
        return max(self.expires_at - now, 0)
