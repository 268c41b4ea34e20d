"""
Domain Layer

순수 네이밍 규칙과 엔티티를 정의합니다.
외부 라이브러리에 의존하지 않으며, 표준 라이브러리만 사용합니다.

구성 요소:
- interfaces: 디렉터리/프록시 팩토리/관찰자 인터페이스 (Protocol)
- models: 데이터 모델 (ComponentDescription, View, NamingOperation)
- naming: 스코프별 이름 유도 함수
"""

from naming_binder.domain.interfaces import NamingContext, NamingObserver, ProxyFactory
from naming_binder.domain.models import (
    Application,
    ComponentDescription,
    Module,
    NamingAction,
    NamingOperation,
    NamingScope,
    View,
    ViewType,
    enumerate_views,
)
from naming_binder.domain.naming import app_name, global_name, module_name, scoped_name

__all__ = [
    # 인터페이스
    "NamingContext",
    "NamingObserver",
    "ProxyFactory",
    # 디스크립션 모델
    "Application",
    "Module",
    "ComponentDescription",
    # 뷰 모델
    "View",
    "ViewType",
    "enumerate_views",
    # 작업 모델
    "NamingAction",
    "NamingOperation",
    "NamingScope",
    # 이름 유도
    "module_name",
    "app_name",
    "global_name",
    "scoped_name",
]
