"""Test Factories.

테스트용 객체 생성 팩토리 및 인메모리 저장소.
"""

from __future__ import annotations

import asyncio
import time

from apps.token_auth.application.common.exceptions import StoreUnavailableError
from apps.token_auth.domain.entities.user import User
from apps.token_auth.domain.enums.role import Role


def create_user(
    *,
    id_: int = 1,
    real_id: str = "test-real-id",
    nickname: str | None = "test-user",
    name: str | None = "Test User",
    role: Role = Role.USER,
) -> User:
    """테스트용 User 생성."""
    return User(id_=id_, real_id=real_id, nickname=nickname, name=name, role=role)


class InMemoryRevocationStore:
    """RevocationStore 인메모리 구현 (만료 시각 포함)."""

    def __init__(self) -> None:
        self.entries: dict[str, float] = {}
        self.unavailable = False

    async def revoke(self, jti: str, ttl_seconds: int) -> None:
        if self.unavailable:
            raise StoreUnavailableError("revocation")
        if ttl_seconds <= 0:
            return
        self.entries[jti] = time.time() + ttl_seconds

    async def is_revoked(self, jti: str) -> bool:
        if self.unavailable:
            raise StoreUnavailableError("revocation")
        expires_at = self.entries.get(jti)
        return expires_at is not None and expires_at > time.time()


class InMemoryRefreshTokenStore:
    """RefreshTokenStore 인메모리 구현.

    모든 호출은 이벤트 루프에 한 번 양보합니다 (원격 왕복 흉내).
    """

    def __init__(self) -> None:
        self.entries: dict[str, tuple[str, int]] = {}
        self.unavailable = False

    async def save(self, token: str, owner_id: str, ttl_seconds: int) -> None:
        await asyncio.sleep(0)
        if self.unavailable:
            raise StoreUnavailableError("refresh_token")
        self.entries[token] = (owner_id, ttl_seconds)

    async def lookup(self, token: str) -> str | None:
        await asyncio.sleep(0)
        if self.unavailable:
            raise StoreUnavailableError("refresh_token")
        entry = self.entries.get(token)
        return entry[0] if entry else None

    async def consume(self, token: str) -> str | None:
        await asyncio.sleep(0)
        if self.unavailable:
            raise StoreUnavailableError("refresh_token")
        entry = self.entries.pop(token, None)
        return entry[0] if entry else None

    async def delete(self, token: str) -> None:
        await asyncio.sleep(0)
        if self.unavailable:
            raise StoreUnavailableError("refresh_token")
        self.entries.pop(token, None)
