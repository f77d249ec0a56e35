"""Users ports."""

from apps.token_auth.application.users.ports.users_query_gateway import UsersQueryGateway

__all__ = ["UsersQueryGateway"]
