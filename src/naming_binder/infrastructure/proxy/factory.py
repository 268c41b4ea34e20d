"""
뷰 프록시 팩토리

뷰마다 지연 해석 프록시를 하나씩 만들어 캐시합니다. 프록시는 처음 사용될 때
resolver로 실제 대상을 얻고, 이후 속성 접근과 호출을 그 대상에 위임합니다.
"""

from __future__ import annotations

import threading
from typing import Any, Callable

from naming_binder.common.errors import BinderError, ProxyError
from naming_binder.common.logging import get_logger
from naming_binder.domain.models.view import View

logger = get_logger(__name__)

# 뷰 → 실제 대상 객체
Resolver = Callable[[View], Any]


def describe_view(view: View) -> dict[str, Any]:
    """기본 resolver. 뷰 설명 딕셔너리를 대상으로 사용합니다."""
    return view.to_dict()


class ViewProxy:
    """
    뷰 하나에 대한 지연 해석 프록시

    resolver는 최초 사용 시 한 번만 호출되며 결과는 캐시됩니다.
    resolver 실패는 ProxyError로 전달됩니다.
    """

    def __init__(self, view: View, resolver: Resolver) -> None:
        self._view = view
        self._resolver = resolver
        self._target: Any = None
        self._resolved = False
        self._lock = threading.Lock()

    @property
    def view(self) -> View:
        return self._view

    @property
    def resolved(self) -> bool:
        """대상이 해석되었는지 여부"""
        return self._resolved

    def resolve(self) -> Any:
        """실제 대상을 반환합니다 (최초 호출 시 해석)."""
        with self._lock:
            if not self._resolved:
                try:
                    self._target = self._resolver(self._view)
                except BinderError:
                    raise
                except Exception as e:
                    raise ProxyError(
                        f"프록시 대상 해석 실패: {self._view}",
                        interface=self._view.interface,
                        view_type=self._view.type.value,
                        details={"error": str(e)},
                    ) from e
                self._resolved = True
                logger.debug(f"프록시 대상 해석: {self._view}")
            return self._target

    def __getattr__(self, item: str) -> Any:
        # 내부 속성은 위임하지 않는다 (초기화 전 접근, copy/pickle 프로토콜)
        if item.startswith("_"):
            raise AttributeError(item)
        return getattr(self.resolve(), item)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.resolve()(*args, **kwargs)

    def __repr__(self) -> str:
        return f"<ViewProxy {self._view} resolved={self._resolved}>"


class CachingProxyFactory:
    """
    뷰별 프록시 캐시

    같은 뷰에 대해서는 항상 같은 ViewProxy를 반환합니다.

    Attributes:
        produced_count: 새로 만든 프록시 수

    Example:
        >>> factory = CachingProxyFactory(lambda view: OrderServiceImpl())
        >>> proxy = factory.produce(view)
        >>> proxy.place_order("A-1")   # 최초 사용 시 대상 생성
    """

    def __init__(self, resolver: Resolver = describe_view) -> None:
        self._resolver = resolver
        self._proxies: dict[View, ViewProxy] = {}
        self._lock = threading.Lock()
        self.produced_count = 0

    def produce(self, view: View) -> ViewProxy:
        with self._lock:
            proxy = self._proxies.get(view)
            if proxy is None:
                proxy = ViewProxy(view, self._resolver)
                self._proxies[view] = proxy
                self.produced_count += 1
                logger.debug(f"프록시 생성: {view}")
            return proxy

    def proxies(self) -> list[ViewProxy]:
        with self._lock:
            return list(self._proxies.values())

    def clear(self) -> None:
        """캐시를 비웁니다."""
        with self._lock:
            self._proxies.clear()
