"""TokenService 단위 테스트."""

import time
from unittest.mock import AsyncMock

import pytest
from jose import jwt

from apps.token_auth.application.common.exceptions import StoreUnavailableError
from apps.token_auth.application.token.services import TokenService, generate_refresh_token
from apps.token_auth.domain.exceptions.auth import InvalidTokenError
from apps.token_auth.domain.value_objects.principal import Principal

REFRESH_TTL = 1209600


class TestTokenService:
    """TokenService 테스트."""

    @pytest.fixture
    def service(
        self,
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
            refresh_token_expire_seconds=REFRESH_TTL,
        )

    @pytest.fixture
    def principal(self, sample_user) -> Principal:
        return sample_user.to_principal()

    @pytest.mark.asyncio
    async def test_issue_registers_refresh_token(
        self,
        service: TokenService,
        refresh_token_store,
        principal: Principal,
    ) -> None:
        """발급된 리프레시 토큰은 소유자와 함께 저장됩니다."""
        # Act
        pair = await service.issue(principal)

        # Assert
        assert pair.grant_type == "Bearer"
        assert pair.refresh_expires_in == REFRESH_TTL
        assert refresh_token_store.entries[pair.refresh_token] == ("abc", REFRESH_TTL)

    @pytest.mark.asyncio
    async def test_refresh_token_is_not_a_jwt(
        self,
        service: TokenService,
        principal: Principal,
    ) -> None:
        pair = await service.issue(principal)

        assert pair.refresh_token != pair.access_token
        assert pair.refresh_token.count(".") != 2

    @pytest.mark.asyncio
    async def test_issue_fails_when_store_unavailable(
        self,
        service: TokenService,
        refresh_token_store,
        principal: Principal,
    ) -> None:
        """저장 실패 시 토큰을 반환하지 않습니다."""
        refresh_token_store.unavailable = True

        with pytest.raises(StoreUnavailableError):
            await service.issue(principal)

    @pytest.mark.asyncio
    async def test_revoke_uses_remaining_lifetime(
        self,
        service: TokenService,
        revocation_store,
        principal: Principal,
    ) -> None:
        pair = await service.issue(principal)

        revoked = await service.revoke(pair.access_token)

        assert revoked is True
        assert await revocation_store.is_revoked(pair.access_jti) is True
        remaining = revocation_store.entries[pair.access_jti] - time.time()
        assert 0 < remaining <= 1800

    @pytest.mark.asyncio
    async def test_revoke_expired_token_is_noop(
        self,
        service: TokenService,
        revocation_store,
        signing_key,
    ) -> None:
        now = int(time.time())
        token = jwt.encode(
            {"sub": "abc", "jti": "expired-jti", "iat": now - 120, "exp": now - 60, "role": "USER"},
            signing_key.value,
            algorithm="HS256",
        )

        revoked = await service.revoke(token)

        assert revoked is False
        assert revocation_store.entries == {}

    @pytest.mark.asyncio
    async def test_revoke_invalid_token(self, service: TokenService) -> None:
        with pytest.raises(InvalidTokenError):
            await service.revoke("garbage")

    @pytest.mark.asyncio
    async def test_discard_refresh_token(self, service: TokenService) -> None:
        store = AsyncMock()
        service._refresh_token_store = store

        await service.discard_refresh_token("opaque-token")

        store.delete.assert_awaited_once_with("opaque-token")


def test_generate_refresh_token_is_unique() -> None:
    tokens = {generate_refresh_token() for _ in range(100)}

    assert len(tokens) == 100
    assert all(len(token) >= 43 for token in tokens)
