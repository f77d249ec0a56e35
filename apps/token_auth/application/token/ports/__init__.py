"""Token domain ports.

토큰 서명/검증 및 저장소 관련 포트입니다.
"""

from apps.token_auth.application.token.ports.claim_parser import ClaimParser
from apps.token_auth.application.token.ports.issuer import AccessToken, TokenIssuer
from apps.token_auth.application.token.ports.refresh_token_store import RefreshTokenStore
from apps.token_auth.application.token.ports.revocation_store import RevocationStore

__all__ = [
    "AccessToken",
    "ClaimParser",
    "RefreshTokenStore",
    "RevocationStore",
    "TokenIssuer",
]
