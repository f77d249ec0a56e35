"""HTTP Controllers."""

from apps.token_auth.presentation.http.controllers.root_router import root_router

__all__ = ["root_router"]
