"""
데이터 모델 모듈

컴포넌트 디스크립션, 뷰, 네이밍 작업 등 핵심 데이터 구조를 정의합니다.
"""

from naming_binder.domain.models.component import (
    Application,
    ComponentDescription,
    Module,
)
from naming_binder.domain.models.view import View, ViewType, enumerate_views
from naming_binder.domain.models.deployment import ComponentState, ComponentStatus
from naming_binder.domain.models.operation import (
    NamingAction,
    NamingOperation,
    NamingScope,
)

__all__ = [
    # 디스크립션
    "Application",
    "Module",
    "ComponentDescription",
    # 뷰
    "View",
    "ViewType",
    "enumerate_views",
    # 배포 상태
    "ComponentState",
    "ComponentStatus",
    # 작업
    "NamingAction",
    "NamingOperation",
    "NamingScope",
]
