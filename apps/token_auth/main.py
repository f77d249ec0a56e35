"""Token Auth API Application Entry Point.

JWT 액세스/리프레시 토큰의 발급, 검증, 폐기, 갱신을 담당합니다.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from apps.token_auth.presentation.http.controllers import root_router
from apps.token_auth.presentation.http.errors import register_exception_handlers
from apps.token_auth.setup.config import get_settings
from apps.token_auth.setup.logging import setup_logging

logger = logging.getLogger(__name__)


async def _close_resources() -> None:
    """DB 엔진과 Redis 연결 풀 정리."""
    from apps.token_auth.infrastructure.persistence_postgres.session import dispose_engine
    from apps.token_auth.infrastructure.persistence_redis.client import (
        get_refresh_token_redis,
        get_revocation_redis,
    )

    await dispose_engine()
    for factory in (get_revocation_redis, get_refresh_token_redis):
        if factory.cache_info().currsize:
            await factory().aclose()
            factory.cache_clear()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(
        "Token Auth API started",
        extra={
            "access_ttl": settings.access_token_expire_seconds,
            "refresh_ttl": settings.refresh_token_expire_seconds,
        },
    )
    yield
    await _close_resources()
    logger.info("Token Auth API stopped")


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = get_settings()
    setup_logging()

    app = FastAPI(
        title=settings.app_name,
        version=settings.service_version,
        lifespan=lifespan,
    )
    register_exception_handlers(app)
    app.include_router(root_router)

    @app.get("/health", include_in_schema=False)
    async def health():
        return {
            "status": "healthy",
            "service": settings.service_name,
            "version": settings.service_version,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("apps.token_auth.main:app", host="0.0.0.0", port=8000)
