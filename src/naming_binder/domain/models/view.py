"""
뷰 모델

컴포넌트가 클라이언트에 노출하는 계약(뷰)과 뷰 열거 규칙을 정의합니다.
이 모듈은 외부 라이브러리에 의존하지 않습니다.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from naming_binder.domain.models.component import ComponentDescription


class ViewType(str, Enum):
    """
    뷰 종류

    열거 순서는 enumerate_views()가 뷰를 생성하는 순서와 같습니다.
    """

    BUSINESS_LOCAL = "BUSINESS_LOCAL"
    BUSINESS_REMOTE = "BUSINESS_REMOTE"
    HOME = "HOME"
    LOCAL_HOME = "LOCAL_HOME"
    LOCAL_BEAN = "LOCAL_BEAN"   # no-interface 로컬 뷰


@dataclass(frozen=True)
class View:
    """
    컴포넌트가 노출하는 하나의 클라이언트 계약

    생성 후 변경되지 않는 값 객체입니다.

    Attributes:
        interface: 인터페이스 식별자. None이면 no-interface 뷰
        type: 뷰 종류
        component: 뷰를 소유한 컴포넌트
    """

    interface: str | None
    type: ViewType
    component: ComponentDescription

    @property
    def is_no_interface(self) -> bool:
        """no-interface 뷰 여부"""
        return self.interface is None

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            "interface": self.interface,
            "type": self.type.value,
            "component": self.component.key,
        }

    def __str__(self) -> str:
        return f"{self.component.name}[{self.type.value}:{self.interface or '-'}]"


def _distinct(interfaces: Iterable[str] | None) -> list[str]:
    """입력 순서를 유지하면서 중복 인터페이스를 제거합니다."""
    if interfaces is None:
        return []
    return list(dict.fromkeys(interfaces))


def enumerate_views(component: ComponentDescription) -> tuple[View, ...]:
    """
    컴포넌트가 노출하는 뷰를 순서대로 열거합니다.

    순서:
        1. 비즈니스 로컬 인터페이스 (입력 순서, 목록 내 중복 제거)
        2. 비즈니스 원격 인터페이스 (입력 순서, 목록 내 중복 제거)
        3. 홈 인터페이스
        4. 로컬 홈 인터페이스
        5. no-interface 로컬 뷰

    종류가 다르면 같은 인터페이스라도 별개의 뷰입니다.
    목록이 없거나 뷰가 하나도 없어도 오류가 아닙니다.

    Args:
        component: 컴포넌트 디스크립션

    Returns:
        뷰 튜플 (불변)
    """
    views: list[View] = []

    for interface in _distinct(component.business_locals):
        views.append(View(interface, ViewType.BUSINESS_LOCAL, component))

    for interface in _distinct(component.business_remotes):
        views.append(View(interface, ViewType.BUSINESS_REMOTE, component))

    if component.home is not None:
        views.append(View(component.home, ViewType.HOME, component))

    if component.local_home is not None:
        views.append(View(component.local_home, ViewType.LOCAL_HOME, component))

    if component.local_bean:
        views.append(View(None, ViewType.LOCAL_BEAN, component))

    return tuple(views)
