"""
에러 처리 모듈

naming_binder 전체에서 사용하는 예외 클래스와 에러 코드를 정의합니다.
모든 예외는 BinderError를 상속받아 일관된 에러 처리가 가능합니다.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """
    에러 코드 열거형

    HTTP 상태 코드와 매핑되어 REST API 응답에 사용됩니다.
    """

    # 네이밍 관련
    NAME_ALREADY_BOUND = "NAME_ALREADY_BOUND"   # 이미 바인딩된 이름
    NAME_NOT_FOUND = "NAME_NOT_FOUND"           # 바인딩되지 않은 이름
    DIRECTORY_FAILED = "DIRECTORY_FAILED"       # 디렉터리 연결/전송 오류
    PROXY_FAILED = "PROXY_FAILED"               # 프록시 생성 실패
    BINDER_NOT_CONFIGURED = "BINDER_NOT_CONFIGURED"  # 전역 컨텍스트/프록시 팩토리 미설정

    # 컴포넌트 생명주기 관련
    COMPONENT_NOT_FOUND = "COMPONENT_NOT_FOUND"                 # 등록되지 않은 컴포넌트
    COMPONENT_ALREADY_REGISTERED = "COMPONENT_ALREADY_REGISTERED"  # 중복 등록
    COMPONENT_ALREADY_ACTIVE = "COMPONENT_ALREADY_ACTIVE"       # 중복 활성화
    COMPONENT_NOT_ACTIVE = "COMPONENT_NOT_ACTIVE"               # 활성 상태가 아님
    COMPONENT_NAMES_LEFT = "COMPONENT_NAMES_LEFT"               # 실패 후 정리되지 않은 이름 남음

    # 설정 관련
    CONFIG_INVALID = "CONFIG_INVALID"           # 설정 검증 실패
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"       # 설정 파일 없음
    CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"   # 설정 파싱 오류

    # 일반
    INTERNAL_ERROR = "INTERNAL_ERROR"           # 내부 오류


# 에러 코드 → HTTP 상태 코드 매핑
_ERROR_CODE_TO_HTTP_STATUS: dict[ErrorCode, int] = {
    # 4xx Client Errors
    ErrorCode.NAME_NOT_FOUND: 404,
    ErrorCode.COMPONENT_NOT_FOUND: 404,
    ErrorCode.CONFIG_NOT_FOUND: 404,

    ErrorCode.CONFIG_INVALID: 400,
    ErrorCode.CONFIG_PARSE_ERROR: 400,

    ErrorCode.NAME_ALREADY_BOUND: 409,
    ErrorCode.COMPONENT_ALREADY_REGISTERED: 409,
    ErrorCode.COMPONENT_ALREADY_ACTIVE: 409,
    ErrorCode.COMPONENT_NOT_ACTIVE: 409,
    ErrorCode.COMPONENT_NAMES_LEFT: 409,

    # 5xx Server Errors
    ErrorCode.DIRECTORY_FAILED: 502,
    ErrorCode.PROXY_FAILED: 502,
    ErrorCode.BINDER_NOT_CONFIGURED: 500,
    ErrorCode.INTERNAL_ERROR: 500,
}


def get_http_status(error_code: ErrorCode) -> int:
    """
    에러 코드에 해당하는 HTTP 상태 코드를 반환합니다.

    Args:
        error_code: 에러 코드

    Returns:
        HTTP 상태 코드 (기본값: 500)
    """
    return _ERROR_CODE_TO_HTTP_STATUS.get(error_code, 500)


class BinderError(Exception):
    """
    naming_binder 기본 예외 클래스

    모든 커스텀 예외의 부모 클래스입니다.
    에러 코드, 메시지, 상세 정보를 포함합니다.

    Attributes:
        code: 에러 코드 (ErrorCode)
        message: 사용자에게 표시할 메시지
        details: 추가 상세 정보 (디버깅용)
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    @property
    def http_status(self) -> int:
        """HTTP 상태 코드 반환"""
        return get_http_status(self.code)

    def to_dict(self) -> dict[str, Any]:
        """
        예외 정보를 딕셔너리로 변환합니다.

        REST API 응답에서 사용됩니다.
        """
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


class NamingError(BinderError):
    """
    네이밍 디렉터리 관련 예외

    이름 바인딩/언바인딩 중 발생하는 오류를 나타냅니다.

    Attributes:
        name: 오류가 발생한 이름 (선택)
        scope: 오류가 발생한 스코프 (global, application, module)
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        name: str | None = None,
        scope: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.name = name
        self.scope = scope
        _details: dict[str, Any] = {}
        if name is not None:
            _details["name"] = name
        if scope is not None:
            _details["scope"] = scope
        if details:
            _details.update(details)
        super().__init__(code, message, _details)


class NameCollisionError(NamingError):
    """이미 바인딩된 이름에 다시 바인딩을 시도한 경우"""

    def __init__(
        self,
        name: str,
        scope: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            ErrorCode.NAME_ALREADY_BOUND,
            f"이미 바인딩된 이름입니다: {name}",
            name=name,
            scope=scope,
            details=details,
        )


class NameNotFoundError(NamingError):
    """바인딩되지 않은 이름을 언바인딩/조회하려는 경우"""

    def __init__(
        self,
        name: str,
        scope: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            ErrorCode.NAME_NOT_FOUND,
            f"바인딩되지 않은 이름입니다: {name}",
            name=name,
            scope=scope,
            details=details,
        )


class DirectoryError(NamingError):
    """
    디렉터리 서비스 오류

    연결 실패, 잘못된 경로 등 이름 충돌/부재 이외의 디렉터리 오류입니다.
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        scope: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            ErrorCode.DIRECTORY_FAILED,
            message,
            name=name,
            scope=scope,
            details=details,
        )


class ProxyError(BinderError):
    """
    프록시 생성/해석 실패

    Attributes:
        interface: 대상 뷰의 인터페이스 식별자 (no-interface 뷰는 None)
        view_type: 대상 뷰 종류
    """

    def __init__(
        self,
        message: str,
        interface: str | None = None,
        view_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.interface = interface
        self.view_type = view_type
        _details: dict[str, Any] = {}
        if interface is not None:
            _details["interface"] = interface
        if view_type is not None:
            _details["view_type"] = view_type
        if details:
            _details.update(details)
        super().__init__(ErrorCode.PROXY_FAILED, message, _details)


class ComponentError(BinderError):
    """
    컴포넌트 생명주기 관련 예외

    Attributes:
        component_key: 오류가 발생한 컴포넌트 키 (application/module/component)
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        component_key: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.component_key = component_key
        _details = {"component_key": component_key}
        if details:
            _details.update(details)
        super().__init__(code, message, _details)


class ConfigError(BinderError):
    """
    설정 관련 예외

    설정 파일의 로드, 파싱, 검증 중 발생하는 오류를 나타냅니다.

    Attributes:
        config_path: 오류가 발생한 설정 파일 경로 (선택)
        field_name: 오류가 발생한 필드 이름 (선택)
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        config_path: str | None = None,
        field_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.config_path = config_path
        self.field_name = field_name
        _details: dict[str, Any] = {}
        if config_path:
            _details["config_path"] = config_path
        if field_name:
            _details["field_name"] = field_name
        if details:
            _details.update(details)
        super().__init__(code, message, _details)
