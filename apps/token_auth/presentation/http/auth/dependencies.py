"""Auth Dependencies.

FastAPI Depends용 인증 의존성입니다.

요청마다 SecurityContext를 생성하여 request.state에 보관합니다.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request, status

from apps.token_auth.application.auth.context import CurrentUserAccessor, SecurityContext
from apps.token_auth.application.auth.queries import ResolveAuthenticationQueryService
from apps.token_auth.application.token.queries import ValidateTokenQueryService
from apps.token_auth.domain.value_objects.principal import Principal
from apps.token_auth.presentation.http.auth.bearer import parse_bearer
from apps.token_auth.setup.dependencies import (
    get_current_user_accessor,
    get_resolve_authentication_service,
    get_validate_token_service,
)

logger = logging.getLogger(__name__)

SECURITY_CONTEXT_STATE_KEY = "security_context"


def get_security_context(request: Request) -> SecurityContext:
    """현재 요청의 SecurityContext (없으면 생성)."""
    context = getattr(request.state, SECURITY_CONTEXT_STATE_KEY, None)
    if context is None:
        context = SecurityContext()
        setattr(request.state, SECURITY_CONTEXT_STATE_KEY, context)
    return context


async def authenticate_request(
    context: SecurityContext = Depends(get_security_context),
    authorization: Optional[str] = Header(None, alias="Authorization"),
    validate_token_service: ValidateTokenQueryService = Depends(get_validate_token_service),
    resolve_service: ResolveAuthenticationQueryService = Depends(
        get_resolve_authentication_service
    ),
) -> SecurityContext:
    """Access 토큰을 검증하고 인증 정보를 컨텍스트에 설정합니다.

    토큰이 없으면 익명 컨텍스트를 반환합니다.
    검증/해석 실패는 도메인 예외로 전파되어 401로 변환됩니다.
    """
    access_token = parse_bearer(authorization)
    if access_token is None:
        return context

    claims = await validate_token_service.verify(access_token)
    authentication = await resolve_service.execute(claims)
    context.set_authentication(authentication)
    return context


async def get_current_principal(
    context: SecurityContext = Depends(authenticate_request),
    accessor: CurrentUserAccessor = Depends(get_current_user_accessor),
) -> Principal:
    """인증된 Principal (필수).

    Raises:
        HTTPException: 인증되지 않은 요청
    """
    principal = accessor.current_principal(context)
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return principal
