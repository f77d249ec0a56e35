"""ClaimParser Port."""

from typing import Protocol

from apps.token_auth.domain.value_objects.token_claims import TokenClaims


class ClaimParser(Protocol):
    """클레임 파서 인터페이스.

    구현체:
        - JwtClaimParser (infrastructure/security/)
    """

    def parse_claims(self, token: str) -> TokenClaims:
        """서명을 검증하고 클레임 반환.

        만료된 토큰도 클레임을 반환합니다.

        Raises:
            InvalidTokenError: 서명 불일치 또는 형식 오류
        """
        ...

    def get_subject(self, token: str) -> str:
        """유효한 토큰의 subject 반환.

        Raises:
            InvalidTokenError: 서명 불일치 또는 형식 오류
            TokenExpiredError: 만료된 토큰
        """
        ...
