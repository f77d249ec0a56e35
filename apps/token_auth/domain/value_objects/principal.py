"""Principal Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from apps.token_auth.domain.enums.role import Role

# 인증되지 않은 사용자를 나타내는 예약 ID
ANONYMOUS_USER_ID = 0


@dataclass(frozen=True, slots=True)
class Principal:
    """요청 단위로 해석된 인증 주체.

    검증된 클레임과 사용자 저장소 조회 결과로 구성되며 저장되지 않습니다.
    """

    id: int
    real_id: str
    nickname: str | None
    role: Role
    name: str | None
