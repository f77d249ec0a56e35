"""JWT Claim Parser.

ClaimParser 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
from typing import Any

from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError

from apps.token_auth.domain.exceptions.auth import InvalidTokenError, TokenExpiredError
from apps.token_auth.domain.value_objects.token_claims import TokenClaims
from apps.token_auth.infrastructure.security.signing_key import SigningKey

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "HS256"


def decode_claims(
    token: str,
    signing_key: SigningKey,
    algorithm: str,
    *,
    allow_expired: bool = False,
) -> TokenClaims:
    """서명을 검증하고 TokenClaims로 변환.

    라이브러리 예외는 도메인 예외로 분류하여 외부로 노출하지 않습니다.

    Raises:
        InvalidTokenError: 서명 불일치, 형식 오류, 지원하지 않는 알고리즘
        TokenExpiredError: 만료된 토큰 (allow_expired=False)
    """
    if not token or not token.strip():
        raise InvalidTokenError("JWT claims string is empty")

    try:
        payload = _decode(token, signing_key, algorithm, verify_exp=True)
    except ExpiredSignatureError as e:
        if not allow_expired:
            raise TokenExpiredError() from e
        # 만료된 토큰도 서명은 검증한 뒤 클레임 반환
        try:
            payload = _decode(token, signing_key, algorithm, verify_exp=False)
        except JWTError as inner:
            raise InvalidTokenError() from inner
    except JWTError as e:
        logger.debug("JWT decode failed", extra={"error_type": type(e).__name__})
        raise InvalidTokenError() from e

    try:
        return TokenClaims.from_payload(payload)
    except (TypeError, ValueError) as e:
        raise InvalidTokenError("Malformed claims") from e


def _decode(
    token: str,
    signing_key: SigningKey,
    algorithm: str,
    *,
    verify_exp: bool,
) -> dict[str, Any]:
    return jwt.decode(
        token,
        signing_key.value,
        algorithms=[algorithm],
        options={"verify_exp": verify_exp, "verify_aud": False},
    )


class JwtClaimParser:
    """JWT 클레임 파서.

    ClaimParser 구현체.
    만료된 토큰도 클레임을 반환합니다 (재발급 대상 식별용).
    """

    def __init__(self, signing_key: SigningKey, algorithm: str = DEFAULT_ALGORITHM) -> None:
        self._signing_key = signing_key
        self._algorithm = algorithm

    def parse_claims(self, token: str) -> TokenClaims:
        """클레임 추출 (만료 허용)."""
        return decode_claims(token, self._signing_key, self._algorithm, allow_expired=True)

    def get_subject(self, token: str) -> str:
        """토큰에서 real_id 추출 (만료 불허)."""
        return decode_claims(token, self._signing_key, self._algorithm).subject
