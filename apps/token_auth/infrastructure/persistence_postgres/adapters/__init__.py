"""PostgreSQL adapters."""

from apps.token_auth.infrastructure.persistence_postgres.adapters.users_query_gateway_sqla import (
    SqlaUsersQueryGateway,
)

__all__ = ["SqlaUsersQueryGateway"]
