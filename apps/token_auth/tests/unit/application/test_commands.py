"""Token Commands 단위 테스트.

RefreshTokensInteractor, LogoutInteractor를 테스트합니다.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from apps.token_auth.application.common.exceptions import StoreUnavailableError
from apps.token_auth.application.token.commands import (
    LogoutInteractor,
    RefreshTokensInteractor,
)
from apps.token_auth.application.token.dto import (
    LogoutRequest,
    RefreshTokensRequest,
    TokenPair,
)
from apps.token_auth.application.token.services import TokenService
from apps.token_auth.domain.exceptions.auth import (
    InvalidTokenError,
    RefreshTokenNotFoundError,
)
from apps.token_auth.domain.exceptions.user import UserNotFoundError


@pytest.fixture
def token_service(
    jwt_token_service,
    claim_parser,
    refresh_token_store,
    revocation_store,
) -> TokenService:
    return TokenService(
        jwt_token_service,
        claim_parser,
        refresh_token_store,
        revocation_store,
        refresh_token_expire_seconds=1209600,
    )


class TestRefreshTokensInteractor:
    """RefreshTokensInteractor 테스트."""

    @pytest.fixture
    def interactor(
        self,
        token_service: TokenService,
        refresh_token_store,
        mock_users_query_gateway: MagicMock,
    ) -> RefreshTokensInteractor:
        return RefreshTokensInteractor(
            token_service=token_service,
            refresh_token_store=refresh_token_store,
            users_query_gateway=mock_users_query_gateway,
        )

    @pytest.mark.asyncio
    async def test_refresh_success(
        self,
        interactor: RefreshTokensInteractor,
        refresh_token_store,
    ) -> None:
        """정상적인 토큰 갱신 (기존 토큰 폐기)."""
        # Arrange
        await refresh_token_store.save("old-refresh", "abc", 1209600)

        # Act
        pair = await interactor.execute(RefreshTokensRequest(refresh_token="old-refresh"))

        # Assert
        assert isinstance(pair, TokenPair)
        assert await refresh_token_store.lookup("old-refresh") is None
        assert await refresh_token_store.lookup(pair.refresh_token) == "abc"

    @pytest.mark.asyncio
    async def test_refresh_token_is_single_use(
        self,
        interactor: RefreshTokensInteractor,
        refresh_token_store,
    ) -> None:
        await refresh_token_store.save("old-refresh", "abc", 1209600)
        await interactor.execute(RefreshTokensRequest(refresh_token="old-refresh"))

        with pytest.raises(RefreshTokenNotFoundError):
            await interactor.execute(RefreshTokensRequest(refresh_token="old-refresh"))

    @pytest.mark.asyncio
    async def test_concurrent_refresh_with_same_token(
        self,
        interactor: RefreshTokensInteractor,
        refresh_token_store,
    ) -> None:
        """같은 토큰으로 동시에 갱신하면 하나만 성공합니다."""
        # Arrange
        await refresh_token_store.save("old-refresh", "abc", 1209600)
        request = RefreshTokensRequest(refresh_token="old-refresh")

        # Act
        results = await asyncio.gather(
            interactor.execute(request),
            interactor.execute(request),
            return_exceptions=True,
        )

        # Assert
        pairs = [r for r in results if isinstance(r, TokenPair)]
        denied = [r for r in results if isinstance(r, RefreshTokenNotFoundError)]
        assert len(pairs) == 1
        assert len(denied) == 1
        assert list(refresh_token_store.entries) == [pairs[0].refresh_token]

    @pytest.mark.asyncio
    async def test_unknown_refresh_token(
        self,
        interactor: RefreshTokensInteractor,
        mock_users_query_gateway: MagicMock,
    ) -> None:
        with pytest.raises(RefreshTokenNotFoundError):
            await interactor.execute(RefreshTokensRequest(refresh_token="unknown"))

        mock_users_query_gateway.find_active_by_real_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_owner_no_longer_exists(
        self,
        token_service: TokenService,
        refresh_token_store,
    ) -> None:
        # Arrange
        gateway = AsyncMock()
        gateway.find_active_by_real_id.return_value = None
        interactor = RefreshTokensInteractor(
            token_service=token_service,
            refresh_token_store=refresh_token_store,
            users_query_gateway=gateway,
        )
        await refresh_token_store.save("old-refresh", "deleted-user", 1209600)

        # Act / Assert
        with pytest.raises(UserNotFoundError):
            await interactor.execute(RefreshTokensRequest(refresh_token="old-refresh"))
        assert await refresh_token_store.lookup("old-refresh") is None

    @pytest.mark.asyncio
    async def test_store_unavailable(
        self,
        interactor: RefreshTokensInteractor,
        refresh_token_store,
    ) -> None:
        refresh_token_store.unavailable = True

        with pytest.raises(StoreUnavailableError):
            await interactor.execute(RefreshTokensRequest(refresh_token="old-refresh"))


class TestLogoutInteractor:
    """LogoutInteractor 테스트."""

    @pytest.fixture
    def interactor(self, token_service: TokenService) -> LogoutInteractor:
        return LogoutInteractor(token_service=token_service)

    @pytest.mark.asyncio
    async def test_logout_revokes_and_discards(
        self,
        interactor: LogoutInteractor,
        token_service: TokenService,
        revocation_store,
        refresh_token_store,
        sample_user,
    ) -> None:
        # Arrange
        pair = await token_service.issue(sample_user.to_principal())

        # Act
        await interactor.execute(
            LogoutRequest(access_token=pair.access_token, refresh_token=pair.refresh_token)
        )

        # Assert
        assert await revocation_store.is_revoked(pair.access_jti) is True
        assert await refresh_token_store.lookup(pair.refresh_token) is None

    @pytest.mark.asyncio
    async def test_logout_ignores_invalid_access_token(
        self,
        interactor: LogoutInteractor,
        revocation_store,
    ) -> None:
        await interactor.execute(LogoutRequest(access_token="garbage"))

        assert revocation_store.entries == {}

    @pytest.mark.asyncio
    async def test_logout_without_tokens(self) -> None:
        service = MagicMock()
        service.revoke = AsyncMock()
        service.discard_refresh_token = AsyncMock()

        await LogoutInteractor(token_service=service).execute(LogoutRequest())

        service.revoke.assert_not_awaited()
        service.discard_refresh_token.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_logout_propagates_store_failure(
        self,
        interactor: LogoutInteractor,
        token_service: TokenService,
        revocation_store,
        sample_user,
    ) -> None:
        pair = await token_service.issue(sample_user.to_principal())
        revocation_store.unavailable = True

        with pytest.raises(StoreUnavailableError):
            await interactor.execute(LogoutRequest(access_token=pair.access_token))

    @pytest.mark.asyncio
    async def test_domain_error_is_swallowed_only_for_access_token(self) -> None:
        service = MagicMock()
        service.revoke = AsyncMock(side_effect=InvalidTokenError())
        service.discard_refresh_token = AsyncMock()

        await LogoutInteractor(token_service=service).execute(
            LogoutRequest(access_token="bad", refresh_token="rt")
        )

        service.discard_refresh_token.assert_awaited_once_with("rt")
