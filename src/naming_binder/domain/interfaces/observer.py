"""
네이밍 관찰자 인터페이스

디렉터리 쓰기 전후에 호출되는 훅입니다. 로깅 등 계측 용도이며
바인딩 흐름을 제어하지 않습니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from naming_binder.domain.models.operation import NamingOperation


@runtime_checkable
class NamingObserver(Protocol):
    """
    디렉터리 쓰기 관찰자

    before()는 쓰기 직전에, after()는 쓰기가 성공한 직후에 호출됩니다.
    쓰기가 실패하면 after()는 호출되지 않습니다.
    """

    def before(self, operation: "NamingOperation") -> None:
        ...

    def after(self, operation: "NamingOperation") -> None:
        ...
