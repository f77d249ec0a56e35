"""Bearer header parsing."""

from typing import Optional


def parse_bearer(header_value: Optional[str]) -> Optional[str]:
    """Bearer 토큰에서 실제 토큰 값을 추출합니다."""
    if not header_value:
        return None
    scheme, _, token = header_value.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
