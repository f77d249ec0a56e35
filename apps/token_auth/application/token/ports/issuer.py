"""TokenIssuer Port.

Access 토큰 서명/검증을 위한 인터페이스입니다.
"""

from dataclasses import dataclass
from typing import Protocol

from apps.token_auth.domain.value_objects.principal import Principal
from apps.token_auth.domain.value_objects.token_claims import TokenClaims


@dataclass(frozen=True, slots=True)
class AccessToken:
    """서명된 Access 토큰."""

    token: str
    jti: str
    issued_at: int
    expires_at: int


class TokenIssuer(Protocol):
    """Access 토큰 발급자 인터페이스.

    구현체:
        - JwtTokenService (infrastructure/security/)
    """

    def issue_access_token(self, principal: Principal) -> AccessToken:
        """Access 토큰 서명.

        Args:
            principal: 인증된 주체

        Returns:
            서명된 토큰과 jti, 만료 시각
        """
        ...

    def decode(self, token: str) -> TokenClaims:
        """서명 및 만료 검증 후 클레임 반환.

        Raises:
            InvalidTokenError: 서명 불일치, 형식 오류, 지원하지 않는 알고리즘
            TokenExpiredError: 만료된 토큰
        """
        ...
