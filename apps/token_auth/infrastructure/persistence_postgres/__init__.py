"""PostgreSQL Persistence Layer."""

from apps.token_auth.infrastructure.persistence_postgres.adapters import SqlaUsersQueryGateway
from apps.token_auth.infrastructure.persistence_postgres.session import get_async_session

__all__ = ["SqlaUsersQueryGateway", "get_async_session"]
