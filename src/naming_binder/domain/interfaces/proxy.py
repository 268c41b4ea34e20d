"""
프록시 팩토리 인터페이스

뷰 하나를 받아 그 계약을 구현하는 호출 가능한 대리 객체를 만드는 역할입니다.
캐싱과 객체 동일성 정책은 구현체가 결정합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from naming_binder.domain.models.view import View


@runtime_checkable
class ProxyFactory(Protocol):
    """뷰 → 프록시 객체"""

    def produce(self, view: "View") -> Any:
        """
        뷰에 대한 프록시를 생성합니다.

        Args:
            view: 대상 뷰

        Returns:
            뷰 계약을 구현하는 객체
        """
        ...
