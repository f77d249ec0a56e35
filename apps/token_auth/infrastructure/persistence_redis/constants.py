"""Redis key prefixes."""

REVOCATION_KEY_PREFIX = "blacklist:"
REFRESH_TOKEN_KEY_PREFIX = "refresh_token:"
