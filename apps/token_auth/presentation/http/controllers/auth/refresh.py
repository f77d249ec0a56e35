"""Refresh Controller.

토큰 갱신 엔드포인트입니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException, status

from apps.token_auth.application.token.commands import RefreshTokensInteractor
from apps.token_auth.application.token.dto import RefreshTokensRequest
from apps.token_auth.presentation.http.auth.bearer import parse_bearer
from apps.token_auth.presentation.http.schemas import TokenResponse
from apps.token_auth.setup.dependencies import get_refresh_tokens_interactor

router = APIRouter()


@router.post(
    "/refresh",
    response_model=TokenResponse,
    summary="토큰 갱신",
    status_code=status.HTTP_201_CREATED,
)
async def refresh(
    refresh_authorization: Optional[str] = Header(None, alias="X-Refresh-Token"),
    interactor: RefreshTokensInteractor = Depends(get_refresh_tokens_interactor),
) -> TokenResponse:
    """리프레시 토큰으로 새 토큰 쌍을 발급합니다.

    헤더: X-Refresh-Token: Bearer <token>
    기존 리프레시 토큰은 1회용이며 갱신 시 폐기됩니다.
    """
    refresh_token = parse_bearer(refresh_authorization)
    if not refresh_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Refresh token is required",
        )

    pair = await interactor.execute(RefreshTokensRequest(refresh_token=refresh_token))

    return TokenResponse(
        grant_type=pair.grant_type,
        access_token=pair.access_token,
        refresh_token=pair.refresh_token,
        access_expires_at=pair.access_expires_at,
        refresh_expires_in=pair.refresh_expires_in,
    )
