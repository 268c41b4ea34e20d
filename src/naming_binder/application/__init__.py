"""
Application Layer

바인딩 오케스트레이션과 배포 생명주기를 구현합니다.
Domain Layer만 참조하며, Infrastructure와 Interface Layer에 의존하지 않습니다.

구성 요소:
- binder: 뷰 바인딩/언바인딩, 관찰자
- lifecycle: 컴포넌트 활성화/비활성화 관리
"""

from naming_binder.application.binder.binder import NamingBinder
from naming_binder.application.binder.observers import LoggingObserver
from naming_binder.application.lifecycle.manager import DeploymentManager

__all__ = [
    "NamingBinder",
    "LoggingObserver",
    "DeploymentManager",
]
