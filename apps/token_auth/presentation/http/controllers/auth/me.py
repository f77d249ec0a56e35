"""Me Controller.

현재 사용자 조회 엔드포인트입니다. 익명 요청도 허용합니다.
"""

from fastapi import APIRouter, Depends

from apps.token_auth.application.auth.context import CurrentUserAccessor, SecurityContext
from apps.token_auth.presentation.http.auth.dependencies import authenticate_request
from apps.token_auth.presentation.http.schemas import CurrentUserResponse
from apps.token_auth.setup.dependencies import get_current_user_accessor

router = APIRouter()


@router.get(
    "/me",
    response_model=CurrentUserResponse,
    summary="현재 사용자",
)
async def me(
    context: SecurityContext = Depends(authenticate_request),
    accessor: CurrentUserAccessor = Depends(get_current_user_accessor),
) -> CurrentUserResponse:
    principal = accessor.current_principal(context)
    if principal is None:
        return CurrentUserResponse(
            user_id=accessor.authenticated_user_id(context),
            authenticated=False,
        )

    return CurrentUserResponse(
        user_id=accessor.authenticated_user_id(context),
        authenticated=True,
        nickname=principal.nickname,
        role=principal.role.value,
        name=principal.name,
    )
