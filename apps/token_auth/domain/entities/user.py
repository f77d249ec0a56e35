"""User Entity.

사용자 저장소(외부 협력자)에서 조회되는 사용자입니다.
"""

from __future__ import annotations

from datetime import datetime

from apps.token_auth.domain.enums.role import Role
from apps.token_auth.domain.value_objects.principal import Principal


class User:
    """사용자 엔티티.

    Attributes:
        id_: 내부 ID
        real_id: 안정적인 사용자 식별자 (토큰 subject)
        nickname: 닉네임
        name: 표시 이름
        role: 권한
        deleted_at: 탈퇴 시각 (활성 사용자는 None)
    """

    __slots__ = ("id_", "real_id", "nickname", "name", "role", "deleted_at")

    def __init__(
        self,
        *,
        id_: int,
        real_id: str,
        nickname: str | None = None,
        name: str | None = None,
        role: Role = Role.USER,
        deleted_at: datetime | None = None,
    ) -> None:
        self.id_ = id_
        self.real_id = real_id
        self.nickname = nickname
        self.name = name
        self.role = role
        self.deleted_at = deleted_at

    @property
    def is_active(self) -> bool:
        return self.deleted_at is None

    def to_principal(self) -> Principal:
        """토큰 발급용 Principal 생성."""
        return Principal(
            id=self.id_,
            real_id=self.real_id,
            nickname=self.nickname,
            role=self.role,
            name=self.name,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.id_ == other.id_

    def __hash__(self) -> int:
        return hash(self.id_)

    def __repr__(self) -> str:
        return f"User(id_={self.id_}, real_id={self.real_id!r})"
