"""Signing Key Holder.

설정된 시크릿에서 HMAC 서명 키를 생성합니다.
생성 후에는 읽기 전용이며 동시 요청 간에 잠금 없이 공유됩니다.
"""

from __future__ import annotations

# HS256 최소 키 길이 (256 bit)
MIN_KEY_BYTES = 32


class SigningKey:
    """대칭 서명 키."""

    __slots__ = ("_value",)

    def __init__(self, secret: str) -> None:
        key = secret.encode("utf-8")
        if len(key) < MIN_KEY_BYTES:
            raise ValueError(
                f"JWT secret key must be at least {MIN_KEY_BYTES} bytes, got {len(key)}"
            )
        object.__setattr__(self, "_value", key)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("SigningKey is immutable")

    @property
    def value(self) -> bytes:
        return self._value

    def __repr__(self) -> str:
        return "SigningKey(***)"
