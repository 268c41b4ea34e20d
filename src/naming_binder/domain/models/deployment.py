"""
배포 상태 모델

생명주기 관리자가 컴포넌트별로 유지하는 상태를 정의합니다.
이 모듈은 외부 라이브러리에 의존하지 않습니다.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Any

from naming_binder.domain.models.component import ComponentDescription


class ComponentStatus(str, Enum):
    """컴포넌트 배포 상태"""

    REGISTERED = "REGISTERED"   # 등록됨 (아직 바인딩 전)
    ACTIVE = "ACTIVE"           # 바인딩 완료
    FAILED = "FAILED"           # 바인딩/언바인딩 실패 (디렉터리 상태 불확실)
    INACTIVE = "INACTIVE"       # 언바인딩 완료


@dataclass
class ComponentState:
    """
    컴포넌트 배포 상태

    Attributes:
        component: 컴포넌트 디스크립션
        status: 현재 상태
        last_error: 마지막 에러 메시지
        bound_names: 마지막 bind()로 바인딩된 이름 수
        activated_ts: 마지막 활성화 시각
    """

    component: ComponentDescription
    status: ComponentStatus = ComponentStatus.REGISTERED
    last_error: str | None = None
    bound_names: int = 0
    activated_ts: float | None = None

    @property
    def key(self) -> str:
        """컴포넌트 키 (편의 속성)"""
        return self.component.key

    @property
    def is_active(self) -> bool:
        return self.status == ComponentStatus.ACTIVE

    def set_status(self, status: ComponentStatus, error: str | None = None) -> None:
        """
        상태를 변경합니다.

        Args:
            status: 새 상태
            error: 에러 메시지 (FAILED 상태일 때)
        """
        self.status = status
        if error:
            self.last_error = error
        if status == ComponentStatus.ACTIVE:
            self.activated_ts = time.time()
            self.last_error = None

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            "key": self.key,
            "component": self.component.to_dict(),
            "status": self.status.value,
            "last_error": self.last_error,
            "bound_names": self.bound_names,
            "activated_ts": self.activated_ts,
            "is_active": self.is_active,
        }
