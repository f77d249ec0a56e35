"""Logging Configuration.

ECS 호환 JSON 로깅 설정입니다.

민감 필드(토큰, 시크릿, 비밀번호)는 extra로 전달되더라도 마스킹됩니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import ecs_logging

from apps.token_auth.setup.config import get_settings

# 부분 문자열 매칭 (대소문자 무시)
SENSITIVE_FIELD_PATTERNS = frozenset({"password", "secret", "token", "authorization"})
MASK_PLACEHOLDER = "***REDACTED***"
MASK_PRESERVE_PREFIX = 4
MASK_PRESERVE_SUFFIX = 4
MASK_MIN_LENGTH = 10

NOISY_LOGGERS = ("redis", "sqlalchemy.engine", "sqlalchemy.pool", "uvicorn.access")

TEXT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# LogRecord 기본 속성 (extra 판별용)
_RESERVED_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({})).keys()) | {"message"}

# 모듈 로드 시점의 팩토리. setup_logging을 여러 번 호출해도 한 단계만 감쌉니다.
_BASE_RECORD_FACTORY = logging.getLogRecordFactory()
_service_metadata: dict[str, str] = {}


def _is_sensitive_key(key: str) -> bool:
    key_lower = key.lower()
    return any(pattern in key_lower for pattern in SENSITIVE_FIELD_PATTERNS)


def mask_value(value: Any) -> str:
    if value is None:
        return MASK_PLACEHOLDER
    str_value = str(value)
    if len(str_value) <= MASK_MIN_LENGTH:
        return MASK_PLACEHOLDER
    return f"{str_value[:MASK_PRESERVE_PREFIX]}...{str_value[-MASK_PRESERVE_SUFFIX:]}"


def service_record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
    """기본 LogRecord에 service.* 메타데이터를 추가합니다."""
    record = _BASE_RECORD_FACTORY(*args, **kwargs)
    record.service = dict(_service_metadata)
    return record


class SensitiveFieldFilter(logging.Filter):
    """extra 필드 중 민감 정보를 마스킹합니다."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in list(record.__dict__.items()):
            if key in _RESERVED_RECORD_ATTRS:
                continue
            if _is_sensitive_key(key):
                setattr(record, key, mask_value(value))
        return True


def setup_logging() -> None:
    """로깅 설정.

    AUTH_LOG_FORMAT=text 이면 로컬 개발용 평문 포맷을 사용합니다.
    """
    settings = get_settings()

    handler = logging.StreamHandler(sys.stdout)
    if settings.log_format == "text":
        handler.setFormatter(logging.Formatter(TEXT_LOG_FORMAT))
    else:
        handler.setFormatter(ecs_logging.StdlibFormatter())
    handler.addFilter(SensitiveFieldFilter())

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # service.* 메타데이터
    _service_metadata.clear()
    _service_metadata.update(
        name=settings.service_name,
        version=settings.service_version,
        environment=settings.environment,
    )
    logging.setLogRecordFactory(service_record_factory)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
