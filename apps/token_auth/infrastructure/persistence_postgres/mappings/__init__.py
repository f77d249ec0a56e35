"""Table mappings."""

from apps.token_auth.infrastructure.persistence_postgres.mappings.users import (
    metadata,
    users_table,
)

__all__ = ["metadata", "users_table"]
