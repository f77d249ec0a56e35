"""Role Enum.

권한 수준 열거형입니다. 토큰 클레임에는 문자열(name)로 저장됩니다.
"""

from __future__ import annotations

from enum import Enum

from apps.token_auth.domain.exceptions.auth import InvalidRoleError


class Role(str, Enum):
    """사용자 권한.

    클레임 문자열과 손실 없이 상호 변환됩니다.
    """

    USER = "USER"
    ADMIN = "ADMIN"

    @classmethod
    def from_claim(cls, value: str) -> "Role":
        """클레임 문자열을 Role로 변환.

        Raises:
            InvalidRoleError: 알 수 없는 권한 문자열
        """
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidRoleError(value) from e

    def to_claim(self) -> str:
        return self.value
