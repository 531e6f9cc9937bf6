"""
구조적 로깅 시스템 for CineVault.

TMDb 호출 결과와 클라이언트 에러를 JSON 또는 Rich 콘솔 로그로 남깁니다.
요청 URL에 포함된 API 키는 어떤 경로로도 로그에 기록되지 않습니다.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from cinevault.shared.errors import CineVaultError

_API_KEY_PATTERN = re.compile(r"(api_key=)[^&]*")

# LogRecord attributes copied into JSON entries when a helper sets them
_EXTRA_FIELDS = ("error_code", "context", "operation", "duration_ms", "result_info")

_CONSOLE_THEME = Theme(
    {
        "logging.level.debug": "cyan",
        "logging.level.info": "green",
        "logging.level.warning": "yellow",
        "logging.level.error": "red bold",
        "logging.level.critical": "red bold reverse",
        "log.time": "dim cyan",
    }
)


class StructuredFormatter(logging.Formatter):
    """로그 레코드를 한 줄짜리 JSON 객체로 직렬화합니다."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            {key: getattr(record, key) for key in _EXTRA_FIELDS if hasattr(record, key)}
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def mask_api_key(url: str) -> str:
    """URL 쿼리 문자열의 ``api_key`` 값을 ``****``로 바꿉니다."""
    return _API_KEY_PATTERN.sub(r"\1****", url)


def setup_structured_logger(
    name: str = "cinevault",
    level: str = "INFO",
    log_file: str | None = None,
    *,
    use_rich_console: bool = True,
) -> logging.Logger:
    """
    ``name`` 로거에 콘솔 핸들러와 (선택적으로) JSON 파일 핸들러를 설치합니다.

    기존 핸들러는 교체되며, 상위 로거로의 전파는 꺼집니다.

    Args:
        name: 로거 이름
        level: 로그 레벨 이름 (예: "DEBUG")
        log_file: JSON 로그 파일 경로 (선택사항)
        use_rich_console: True면 RichHandler, False면 JSON 스트림 핸들러

    Returns:
        설정된 로거
    """
    logger = logging.getLogger(name)
    logger.handlers.clear()
    log_level = logging.getLevelName(level.upper())
    logger.setLevel(log_level)

    console: logging.Handler
    if use_rich_console:
        console = RichHandler(
            console=Console(theme=_CONSOLE_THEME, stderr=True),
            markup=False,
            rich_tracebacks=True,
            log_time_format="[%H:%M:%S]",
        )
    else:
        console = logging.StreamHandler()
        console.setFormatter(StructuredFormatter())
    console.setLevel(log_level)
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def log_operation_error(
    logger: logging.Logger,
    error: CineVaultError,
    operation: str | None = None,
    additional_context: dict[str, Any] | None = None,
) -> None:
    """
    CineVaultError를 ERROR 레벨로 기록합니다.

    에러 컨텍스트는 ``safe_dict()``로 내보내므로 세션 ID는 마스킹됩니다.
    원인 예외가 있으면 그 트레이스백이 함께 기록됩니다.

    Args:
        logger: 로거
        error: 기록할 에러
        operation: 작업 이름 (없으면 에러 컨텍스트의 작업 이름)
        additional_context: 컨텍스트에 병합할 값 (선택사항)
    """
    context = error.context.safe_dict()
    context.update(additional_context or {})
    cause = error.original_error
    logger.error(
        error.message,
        extra={
            "error_code": error.code.name,
            "context": context,
            "operation": operation or error.context.operation,
        },
        exc_info=(type(cause), cause, cause.__traceback__) if cause is not None else None,
    )


def log_operation_success(
    logger: logging.Logger,
    operation: str,
    duration_ms: float,
    result_info: dict[str, Any] | None = None,
) -> None:
    """성공한 작업을 소요 시간과 함께 DEBUG 레벨로 기록합니다."""
    logger.debug(
        "Operation '%s' completed successfully",
        operation,
        extra={
            "operation": operation,
            "duration_ms": duration_ms,
            "result_info": result_info or {},
        },
    )


def log_api_call(
    logger: logging.Logger,
    endpoint: str,
    method: str = "GET",
    status_code: int | None = None,
    duration_ms: float | None = None,
    context: dict[str, Any] | None = None,
) -> None:
    """
    TMDb 호출 한 건을 기록합니다.

    상태 코드가 400 이상이면 WARNING, 그 외에는 DEBUG 레벨입니다.

    Args:
        logger: 로거
        endpoint: 요청 URL (API 키는 마스킹됨)
        method: HTTP 메서드
        status_code: 응답 상태 코드 (응답이 없으면 None)
        duration_ms: 소요 시간 (밀리초)
        context: 추가 컨텍스트
    """
    safe_endpoint = mask_api_key(endpoint)
    api_context: dict[str, Any] = {"endpoint": safe_endpoint, "method": method}
    if status_code is not None:
        api_context["status_code"] = status_code
    if duration_ms is not None:
        api_context["duration_ms"] = duration_ms
    api_context.update(context or {})

    failed = status_code is not None and status_code >= 400
    message = f"API call {method} {safe_endpoint}"
    if status_code is not None:
        outcome = "failed" if failed else "succeeded"
        message += f" {outcome} with status {status_code}"

    logger.log(
        logging.WARNING if failed else logging.DEBUG,
        message,
        extra={"operation": "api_call", "context": api_context},
    )
