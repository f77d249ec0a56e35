"""PostgreSQL Session Management.

사용자 조회 전용 비동기 엔진입니다. 엔진은 첫 요청 시 생성되고
애플리케이션 종료 시 dispose_engine()으로 정리됩니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

if TYPE_CHECKING:
    from apps.token_auth.setup.config import Settings


def build_async_engine(settings: "Settings") -> AsyncEngine:
    """Settings(AUTH_DATABASE_*)로 AsyncEngine 생성."""
    return create_async_engine(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_recycle=settings.database_pool_recycle_seconds,
        pool_pre_ping=True,
        echo=settings.database_echo,
    )


_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _get_session_factory() -> async_sessionmaker[AsyncSession]:
    global _engine, _session_factory
    if _session_factory is None:
        from apps.token_auth.setup.config import get_settings

        _engine = build_async_engine(get_settings())
        _session_factory = async_sessionmaker(_engine, expire_on_commit=False)
    return _session_factory


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """요청 단위 읽기 세션."""
    async with _get_session_factory()() as session:
        yield session


async def dispose_engine() -> None:
    global _engine, _session_factory
    if _engine is None:
        return
    await _engine.dispose()
    _engine = None
    _session_factory = None
