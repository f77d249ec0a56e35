"""SQLAlchemy Users Query Gateway.

UsersQueryGateway 포트의 구현체입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select

from apps.token_auth.domain.entities.user import User
from apps.token_auth.domain.enums.role import Role
from apps.token_auth.infrastructure.persistence_postgres.mappings.users import users_table

if TYPE_CHECKING:
    from sqlalchemy.engine import RowMapping
    from sqlalchemy.ext.asyncio import AsyncSession


class SqlaUsersQueryGateway:
    """SQLAlchemy 기반 Users Query Gateway.

    UsersQueryGateway 구현체.
    """

    def __init__(self, session: "AsyncSession") -> None:
        self._session = session

    async def find_active_by_real_id(self, real_id: str) -> User | None:
        """탈퇴하지 않은 사용자를 real_id로 조회."""
        stmt = select(users_table).where(
            users_table.c.real_id == real_id,
            users_table.c.deleted_at.is_(None),
        )
        result = await self._session.execute(stmt)
        row = result.mappings().one_or_none()
        if row is None:
            return None
        return _to_entity(row)


def _to_entity(row: "RowMapping") -> User:
    return User(
        id_=row["id"],
        real_id=row["real_id"],
        nickname=row["nickname"],
        name=row["name"],
        role=Role.from_claim(row["role"]),
        deleted_at=row["deleted_at"],
    )
