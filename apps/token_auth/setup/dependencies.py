"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from fastapi import Depends

from apps.token_auth.setup.config import Settings, get_settings

if TYPE_CHECKING:
    import redis.asyncio as aioredis
    from sqlalchemy.ext.asyncio import AsyncSession

    from apps.token_auth.infrastructure.security import SigningKey


# ============================================================
# Infrastructure Dependencies
# ============================================================


async def get_db_session() -> AsyncGenerator["AsyncSession", None]:
    """DB 세션 제공자."""
    from apps.token_auth.infrastructure.persistence_postgres.session import get_async_session

    async for session in get_async_session():
        yield session


def get_revocation_redis() -> "aioredis.Redis":
    """블랙리스트용 Redis 클라이언트 제공자."""
    from apps.token_auth.infrastructure.persistence_redis.client import get_revocation_redis

    return get_revocation_redis()


def get_refresh_token_redis() -> "aioredis.Redis":
    """리프레시 토큰용 Redis 클라이언트 제공자."""
    from apps.token_auth.infrastructure.persistence_redis.client import get_refresh_token_redis

    return get_refresh_token_redis()


@lru_cache
def get_signing_key() -> "SigningKey":
    """서명 키 (프로세스 단위 싱글톤)."""
    from apps.token_auth.infrastructure.security import SigningKey

    return SigningKey(get_settings().jwt_secret_key)


# ============================================================
# Gateway Dependencies (Adapters)
# ============================================================


async def get_users_query_gateway(
    session: "AsyncSession" = Depends(get_db_session),
):
    """UsersQueryGateway 제공자."""
    from apps.token_auth.infrastructure.persistence_postgres import SqlaUsersQueryGateway

    return SqlaUsersQueryGateway(session)


def get_revocation_store(
    redis: "aioredis.Redis" = Depends(get_revocation_redis),
):
    """RevocationStore 제공자."""
    from apps.token_auth.infrastructure.persistence_redis import RedisRevocationStore

    return RedisRevocationStore(redis)


def get_refresh_token_store(
    redis: "aioredis.Redis" = Depends(get_refresh_token_redis),
):
    """RefreshTokenStore 제공자."""
    from apps.token_auth.infrastructure.persistence_redis import RedisRefreshTokenStore

    return RedisRefreshTokenStore(redis)


def get_token_issuer(
    settings: Settings = Depends(get_settings),
    signing_key: "SigningKey" = Depends(get_signing_key),
):
    """TokenIssuer 제공자."""
    from apps.token_auth.infrastructure.security import JwtTokenService

    return JwtTokenService(
        signing_key=signing_key,
        algorithm=settings.jwt_algorithm,
        access_token_expire_seconds=settings.access_token_expire_seconds,
    )


def get_claim_parser(
    settings: Settings = Depends(get_settings),
    signing_key: "SigningKey" = Depends(get_signing_key),
):
    """ClaimParser 제공자."""
    from apps.token_auth.infrastructure.security import JwtClaimParser

    return JwtClaimParser(signing_key, algorithm=settings.jwt_algorithm)


# ============================================================
# Service Dependencies
# ============================================================


def get_token_service(
    settings: Settings = Depends(get_settings),
    issuer=Depends(get_token_issuer),
    claim_parser=Depends(get_claim_parser),
    refresh_token_store=Depends(get_refresh_token_store),
    revocation_store=Depends(get_revocation_store),
):
    """TokenService 제공자."""
    from apps.token_auth.application.token.services import TokenService

    return TokenService(
        issuer,
        claim_parser,
        refresh_token_store,
        revocation_store,
        refresh_token_expire_seconds=settings.refresh_token_expire_seconds,
    )


def get_current_user_accessor():
    """CurrentUserAccessor 제공자."""
    from apps.token_auth.application.auth.context import CurrentUserAccessor

    return CurrentUserAccessor()


# ============================================================
# Use Case Dependencies
# ============================================================


def get_validate_token_service(
    token_issuer=Depends(get_token_issuer),
    revocation_store=Depends(get_revocation_store),
):
    """ValidateTokenQueryService 제공자."""
    from apps.token_auth.application.token.queries import ValidateTokenQueryService

    return ValidateTokenQueryService(
        token_issuer=token_issuer,
        revocation_store=revocation_store,
    )


async def get_resolve_authentication_service(
    users_query_gateway=Depends(get_users_query_gateway),
):
    """ResolveAuthenticationQueryService 제공자."""
    from apps.token_auth.application.auth.queries import ResolveAuthenticationQueryService

    return ResolveAuthenticationQueryService(users_query_gateway)


async def get_refresh_tokens_interactor(
    token_service=Depends(get_token_service),
    refresh_token_store=Depends(get_refresh_token_store),
    users_query_gateway=Depends(get_users_query_gateway),
):
    """RefreshTokensInteractor 제공자."""
    from apps.token_auth.application.token.commands import RefreshTokensInteractor

    return RefreshTokensInteractor(
        token_service=token_service,
        refresh_token_store=refresh_token_store,
        users_query_gateway=users_query_gateway,
    )


def get_logout_interactor(token_service=Depends(get_token_service)):
    """LogoutInteractor 제공자."""
    from apps.token_auth.application.token.commands import LogoutInteractor

    return LogoutInteractor(token_service=token_service)
