"""
NamingBinder - 컴포넌트 뷰 이름 바인딩 엔진

배포된 컴포넌트가 노출하는 뷰마다 표준 이름을 계산하고, 3단계 네이밍
디렉터리(global / application / module)에 프록시를 바인딩하거나 해제합니다.
뷰가 하나뿐인 컴포넌트는 각 스코프에 인터페이스 없는 별칭도 바인딩됩니다.
"""

__version__ = "0.1.0"
__author__ = "NamingBinder Team"

from naming_binder.common.errors import (
    BinderError,
    ComponentError,
    ConfigError,
    DirectoryError,
    ErrorCode,
    NameCollisionError,
    NameNotFoundError,
    NamingError,
    ProxyError,
)
from naming_binder.common.logging import get_logger

__all__ = [
    "__version__",
    "BinderError",
    "ComponentError",
    "ConfigError",
    "DirectoryError",
    "ErrorCode",
    "NameCollisionError",
    "NameNotFoundError",
    "NamingError",
    "ProxyError",
    "get_logger",
]
