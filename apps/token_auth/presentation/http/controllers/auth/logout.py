"""Logout Controller.

로그아웃 엔드포인트입니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Header

from apps.token_auth.application.token.commands import LogoutInteractor
from apps.token_auth.application.token.dto import LogoutRequest
from apps.token_auth.presentation.http.auth.bearer import parse_bearer
from apps.token_auth.presentation.http.schemas import LogoutResponse
from apps.token_auth.setup.dependencies import get_logout_interactor

router = APIRouter()


@router.post(
    "/logout",
    response_model=LogoutResponse,
    summary="로그아웃",
)
async def logout(
    authorization: Optional[str] = Header(None, alias="Authorization"),
    refresh_authorization: Optional[str] = Header(None, alias="X-Refresh-Token"),
    interactor: LogoutInteractor = Depends(get_logout_interactor),
) -> LogoutResponse:
    """로그아웃을 처리합니다.

    1. Access 토큰 블랙리스트 등록
    2. 리프레시 토큰 삭제
    """
    request = LogoutRequest(
        access_token=parse_bearer(authorization),
        refresh_token=parse_bearer(refresh_authorization),
    )
    await interactor.execute(request)
    return LogoutResponse()
