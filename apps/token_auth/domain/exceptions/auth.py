"""Authentication Domain Exceptions.

토큰 검증 및 인증 해석 과정의 실패 분류입니다.
암호화 라이브러리의 원본 메시지는 포함하지 않습니다.
"""

from apps.token_auth.domain.exceptions.base import DomainError


class InvalidTokenError(DomainError):
    """서명 불일치 또는 형식이 잘못된 토큰."""

    def __init__(self, reason: str = "Invalid token") -> None:
        super().__init__(reason)


class TokenExpiredError(DomainError):
    """만료된 토큰."""

    def __init__(self) -> None:
        super().__init__("Token has expired")


class TokenRevokedError(DomainError):
    """폐기(블랙리스트)된 토큰."""

    def __init__(self, jti: str) -> None:
        self.jti = jti
        super().__init__("Token has been revoked")


class MissingAuthorizationError(DomainError):
    """role 클레임 누락.

    기본 권한으로 대체하지 않고 인증 실패로 처리합니다.
    """

    def __init__(self) -> None:
        super().__init__("Authorization claim is missing")


class InvalidRoleError(DomainError):
    """알 수 없는 role 클레임 값."""

    def __init__(self, role: str) -> None:
        self.role = role
        super().__init__(f"Unknown role: {role!r}")


class RefreshTokenNotFoundError(DomainError):
    """저장소에 없는 리프레시 토큰 (갱신 거부)."""

    def __init__(self) -> None:
        super().__init__("Refresh token not found")
