"""Token DTOs."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TokenPair:
    """발급된 토큰 쌍."""

    access_token: str
    refresh_token: str
    access_jti: str
    access_expires_at: int
    refresh_expires_in: int
    grant_type: str = "Bearer"


@dataclass(frozen=True, slots=True)
class RefreshTokensRequest:
    """토큰 갱신 요청."""

    refresh_token: str


@dataclass(frozen=True, slots=True)
class LogoutRequest:
    """로그아웃 요청."""

    access_token: str | None = None
    refresh_token: str | None = None
