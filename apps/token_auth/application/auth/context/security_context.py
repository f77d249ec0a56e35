"""Security Context.

요청마다 생성되는 인증 슬롯과 현재 사용자 접근자입니다.
프로세스 전역 상태를 사용하지 않고 요청 단위로 전달됩니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.token_auth.domain.value_objects.principal import ANONYMOUS_USER_ID

if TYPE_CHECKING:
    from apps.token_auth.application.auth.queries import Authentication
    from apps.token_auth.domain.value_objects.principal import Principal


class SecurityContext:
    """요청 단위 보안 컨텍스트.

    하나의 요청 동안 해석된 Authentication을 보관합니다.
    """

    __slots__ = ("_authentication",)

    def __init__(self, authentication: "Authentication | None" = None) -> None:
        self._authentication = authentication

    @property
    def authentication(self) -> "Authentication | None":
        return self._authentication

    def set_authentication(self, authentication: "Authentication") -> None:
        self._authentication = authentication

    def clear(self) -> None:
        self._authentication = None

    @property
    def is_authenticated(self) -> bool:
        return self._authentication is not None and self._authentication.is_authenticated

    def __repr__(self) -> str:
        return f"SecurityContext(authenticated={self.is_authenticated})"


class CurrentUserAccessor:
    """현재 사용자 접근자.

    인증되지 않은 경우 예외 대신 예약 ID(0)를 반환합니다.
    """

    def authenticated_user_id(self, context: SecurityContext | None) -> int:
        principal = self.current_principal(context)
        if principal is None:
            return ANONYMOUS_USER_ID
        return principal.id

    def current_principal(self, context: SecurityContext | None) -> "Principal | None":
        if context is None or not context.is_authenticated:
            return None
        return context.authentication.principal
