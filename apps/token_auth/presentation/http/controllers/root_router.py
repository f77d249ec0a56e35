"""Root Router."""

from fastapi import APIRouter

from apps.token_auth.presentation.http.controllers.auth.router import router as auth_router
from apps.token_auth.setup.config import get_settings

root_router = APIRouter(prefix=get_settings().api_v1_prefix)

root_router.include_router(auth_router)
