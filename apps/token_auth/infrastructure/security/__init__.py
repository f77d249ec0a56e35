"""Security adapters."""

from apps.token_auth.infrastructure.security.jwt_claim_parser import JwtClaimParser
from apps.token_auth.infrastructure.security.jwt_token_service import JwtTokenService
from apps.token_auth.infrastructure.security.signing_key import SigningKey

__all__ = ["JwtClaimParser", "JwtTokenService", "SigningKey"]
