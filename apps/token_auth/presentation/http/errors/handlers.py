"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
내부 진단 정보(암호화 라이브러리 메시지 등)는 응답에 포함하지 않습니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.token_auth.application.common.exceptions import (
    ApplicationError,
    StoreUnavailableError,
)
from apps.token_auth.domain.exceptions import (
    DomainError,
    InvalidRoleError,
    InvalidTokenError,
    MissingAuthorizationError,
    RefreshTokenNotFoundError,
    TokenExpiredError,
    TokenRevokedError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

STORE_RETRY_AFTER_SECONDS = "1"

# (예외, 에러 코드, 응답 메시지) - 모두 401
_UNAUTHORIZED_ERRORS: tuple[tuple[type[DomainError], str, str], ...] = (
    (InvalidTokenError, "INVALID_TOKEN", "Invalid token"),
    (TokenExpiredError, "TOKEN_EXPIRED", "Token has expired"),
    (TokenRevokedError, "TOKEN_REVOKED", "Token has been revoked"),
    (MissingAuthorizationError, "MISSING_AUTHORIZATION", "Authorization claim is missing"),
    (InvalidRoleError, "INVALID_ROLE", "Invalid authorization claim"),
    (UserNotFoundError, "PRINCIPAL_NOT_FOUND", "Authentication failed"),
    (RefreshTokenNotFoundError, "REFRESH_DENIED", "Refresh token is invalid"),
)


def _unauthorized(code: str, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=401,
        content={"detail": detail, "code": code},
        headers={"WWW-Authenticate": "Bearer"},
    )


def translate_domain_error(exc: DomainError) -> tuple[int, str, str]:
    """도메인 예외를 (status_code, code, detail)로 변환."""
    for exc_type, code, detail in _UNAUTHORIZED_ERRORS:
        if isinstance(exc, exc_type):
            return 401, code, detail
    return 400, "DOMAIN_ERROR", exc.message


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        status_code, code, detail = translate_domain_error(exc)
        logger.warning(
            f"Authentication failure: {code}",
            extra={
                "http.request.method": request.method,
                "url.path": request.url.path,
                "error.code": code,
            },
        )
        if status_code == 401:
            return _unauthorized(code, detail)
        return JSONResponse(status_code=status_code, content={"detail": detail, "code": code})

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailableError):
        logger.error(
            "Token store unavailable",
            extra={"url.path": request.url.path, "store": exc.store},
        )
        return JSONResponse(
            status_code=503,
            content={"detail": "Service temporarily unavailable", "code": "STORE_UNAVAILABLE"},
            headers={"Retry-After": STORE_RETRY_AFTER_SECONDS},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
