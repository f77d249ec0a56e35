"""User Domain Exceptions."""

from apps.token_auth.domain.exceptions.base import DomainError


class UserNotFoundError(DomainError):
    """사용자를 찾을 수 없음 (삭제된 사용자 포함)."""

    def __init__(self, real_id: str) -> None:
        self.real_id = real_id
        super().__init__("User not found")
