"""Token commands."""

from apps.token_auth.application.token.commands.logout import LogoutInteractor
from apps.token_auth.application.token.commands.refresh import RefreshTokensInteractor

__all__ = ["LogoutInteractor", "RefreshTokensInteractor"]
