"""Gateway Exceptions."""

from apps.token_auth.application.common.exceptions.base import ApplicationError


class GatewayError(ApplicationError):
    """외부 저장소/서비스 통신 실패."""


class StoreUnavailableError(GatewayError):
    """키-값 저장소(리프레시 토큰, 블랙리스트) 접근 불가.

    타임아웃, 연결 끊김 등 일시적 장애입니다.
    "없음"으로 해석하지 않으며, 호출자가 재시도할 수 있는 유일한 예외입니다.
    """

    def __init__(self, store: str, reason: str = "unavailable") -> None:
        self.store = store
        super().__init__(f"{store} store {reason}")
