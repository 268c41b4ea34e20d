"""
구조화 로깅 모듈

loguru 싱크 설정과 컨텍스트 변수(trace_id, component_name, scope)를 제공합니다.
배포 관리자는 활성화/비활성화마다 trace_id와 컴포넌트 키를, 바인더는
디렉터리 쓰기마다 스코프를 설정하므로 한 번의 배포 작업에서 나온 로그를
묶어 볼 수 있습니다.
"""

import os
import sys
import uuid
from contextvars import ContextVar
from functools import lru_cache
from typing import Any

from loguru import logger

_trace_id_var: ContextVar[str | None] = ContextVar("trace_id", default=None)
_component_name_var: ContextVar[str | None] = ContextVar("component_name", default=None)
_scope_var: ContextVar[str | None] = ContextVar("scope", default=None)

_CONTEXT_VARS = {
    "trace_id": _trace_id_var,
    "component_name": _component_name_var,
    "scope": _scope_var,
}

_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def set_trace_id(trace_id: str | None) -> None:
    _trace_id_var.set(trace_id)


def generate_trace_id() -> str:
    """배포 작업 하나를 식별하는 짧은 trace_id"""
    return uuid.uuid4().hex[:12]


def set_component_context(component_name: str | None) -> None:
    _component_name_var.set(component_name)


def set_scope_context(scope: str | None) -> None:
    _scope_var.set(scope)


def _get_context_extra() -> dict[str, Any]:
    return {key: var.get() for key, var in _CONTEXT_VARS.items() if var.get()}


def _json_formatter(record: dict[str, Any]) -> str:
    """
    한 줄 JSON 포맷터

    컨텍스트 키를 먼저, 나머지 extra 필드를 그 뒤에 기록합니다.
    """
    import orjson

    extra = record["extra"]
    log_entry = {
        "timestamp": record["time"].strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
        "level": record["level"].name,
        "message": record["message"],
        "logger": record["name"],
    }
    for key in _CONTEXT_VARS:
        if key in extra:
            log_entry[key] = extra[key]
    for key, value in extra.items():
        if key not in _CONTEXT_VARS and key != "serialized":
            log_entry[key] = value

    exception = record["exception"]
    if exception:
        log_entry["exception"] = {
            "type": exception.type.__name__ if exception.type else None,
            "value": str(exception.value) if exception.value else None,
        }

    # loguru는 포맷터 반환값을 다시 format 하므로 직렬화 결과는 extra로 넘긴다.
    # orjson이 모르는 타입(프록시 객체 등)은 문자열로 기록
    extra["serialized"] = orjson.dumps(log_entry, default=str).decode("utf-8")
    return "{extra[serialized]}\n"


def _console_formatter(record: dict[str, Any]) -> str:
    fmt = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    )

    extra = record["extra"]
    tags = []
    if "trace_id" in extra:
        tags.append("<yellow>trace={extra[trace_id]}</yellow>")
    if "component_name" in extra:
        tags.append("<blue>{extra[component_name]}</blue>")
    if "scope" in extra:
        tags.append("<magenta>@{extra[scope]}</magenta>")
    if tags:
        fmt += " ".join(tags) + " | "

    fmt += "<level>{message}</level>\n"
    if record["exception"]:
        fmt += "{exception}"
    return fmt


def configure_logging(
    level: str = "INFO",
    json_output: bool | None = None,
    log_file: str | None = None,
) -> None:
    """
    loguru 싱크를 다시 구성합니다.

    Args:
        level: 로그 레벨 (LOG_LEVEL 환경변수가 우선)
        json_output: JSON 출력 여부 (None이면 LOG_FORMAT=json 여부)
        log_file: JSON 파일 싱크 경로 (None이면 LOG_FILE)
    """
    log_level = os.getenv("LOG_LEVEL", level).upper()
    if log_level == "WARN":
        log_level = "WARNING"
    if log_level not in _LEVELS:
        log_level = "INFO"

    if json_output is None:
        json_output = os.getenv("LOG_FORMAT", "console").lower() == "json"
    if log_file is None:
        log_file = os.getenv("LOG_FILE")

    logger.remove()
    if json_output:
        logger.add(sys.stdout, format=_json_formatter, level=log_level)
    else:
        logger.add(sys.stdout, format=_console_formatter, level=log_level, colorize=True)

    if log_file:
        logger.add(
            log_file,
            format=_json_formatter,
            level=log_level,
            rotation="100 MB",
            retention="7 days",
            compression="gz",
        )

    logger.debug(f"로깅 설정: level={log_level}, json={json_output}, file={log_file}")


class BoundLogger:
    """
    이름과 (선택적) 컴포넌트 키가 고정된 로거

    호출 시점의 컨텍스트 변수와 키워드 인자를 extra로 함께 기록합니다.
    컨텍스트 변수의 component_name이 고정값보다 우선합니다.
    """

    def __init__(self, name: str, component_name: str | None = None) -> None:
        self._component_name = component_name
        self._logger = logger.bind(name=name)

    def _log(self, level: str, message: str, extra: dict[str, Any]) -> None:
        context = _get_context_extra()
        if self._component_name:
            context.setdefault("component_name", self._component_name)
        context.update(extra)
        # depth=2: debug()/info() 등을 거친 실제 호출 위치를 기록
        getattr(self._logger.bind(**context).opt(depth=2), level)(message)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("debug", message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("info", message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("warning", message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("error", message, kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """예외 정보와 함께 ERROR 레벨로 기록합니다. except 블록 안에서 호출합니다."""
        self._log("exception", message, kwargs)


@lru_cache(maxsize=128)
def get_logger(name: str, component_name: str | None = None) -> BoundLogger:
    """
    캐시된 BoundLogger를 반환합니다.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("바인딩 시작", view_count=3)

        >>> bean_logger = get_logger(__name__, component_name="shop/orders.jar/OrderBean")
    """
    return BoundLogger(name=name, component_name=component_name)


# 임포트 시 기본 설정. 테스트는 NAMING_BINDER_SKIP_DEFAULT_LOGGING으로 건너뛴다
if not os.getenv("NAMING_BINDER_SKIP_DEFAULT_LOGGING"):
    configure_logging()
