"""Auth Router.

인증 관련 엔드포인트를 통합합니다.
"""

from fastapi import APIRouter

from apps.token_auth.presentation.http.controllers.auth.logout import router as logout_router
from apps.token_auth.presentation.http.controllers.auth.me import router as me_router
from apps.token_auth.presentation.http.controllers.auth.refresh import (
    router as refresh_router,
)

router = APIRouter(prefix="/auth", tags=["auth"])

router.include_router(me_router)
router.include_router(refresh_router)
router.include_router(logout_router)
