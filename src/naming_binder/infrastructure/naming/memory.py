"""
인메모리 네이밍 컨텍스트

'/'로 구분된 경로 이름을 계층적으로 저장하는 NamingContext 구현입니다.
bind()는 없는 중간 서브컨텍스트를 자동으로 만들고, unbind()는 마지막
구성 요소만 제거합니다.
"""

from __future__ import annotations

import threading
from typing import Any, Iterator

from naming_binder.common.errors import (
    DirectoryError,
    NameCollisionError,
    NameNotFoundError,
)
from naming_binder.common.logging import get_logger

logger = get_logger(__name__)

SEPARATOR = "/"


class InMemoryNamingContext:
    """
    계층형 인메모리 네이밍 컨텍스트

    서브컨텍스트는 루트와 같은 락을 공유합니다.

    Attributes:
        name: 컨텍스트 표시 이름 (예: "global", "shop/orders.jar")
        scope: 오류 보고용 스코프 이름

    Example:
        >>> ctx = InMemoryNamingContext("global", scope="global")
        >>> ctx.bind("orders.jar/OrderBean", proxy)
        >>> ctx.lookup("orders.jar/OrderBean") is proxy
        True
        >>> ctx.list_names()
        ['orders.jar/OrderBean']
    """

    def __init__(
        self,
        name: str = "",
        scope: str | None = None,
        lock: threading.RLock | None = None,
    ) -> None:
        self.name = name
        self.scope = scope
        self._lock = lock or threading.RLock()
        self._bindings: dict[str, Any] = {}

    # === NamingContext ===

    def bind(self, name: str, obj: Any) -> None:
        """
        name에 obj를 바인딩합니다. 중간 서브컨텍스트는 필요하면 생성합니다.

        Raises:
            NameCollisionError: 이미 바인딩된 이름
            DirectoryError: 잘못된 이름이거나 중간 경로가 컨텍스트가 아닌 경우
        """
        parts = self._split(name)
        with self._lock:
            parent = self._walk(name, parts[:-1], create=True)
            leaf = parts[-1]
            if leaf in parent._bindings:
                raise NameCollisionError(name, scope=self.scope)
            parent._bindings[leaf] = obj

    def unbind(self, name: str) -> None:
        """
        name의 바인딩을 제거합니다. 중간 서브컨텍스트는 남겨 둡니다.

        Raises:
            NameNotFoundError: 바인딩되지 않은 이름
            DirectoryError: 비어 있지 않은 서브컨텍스트를 제거하려는 경우
        """
        parts = self._split(name)
        with self._lock:
            parent = self._walk(name, parts[:-1], create=False)
            leaf = parts[-1]
            if leaf not in parent._bindings:
                raise NameNotFoundError(name, scope=self.scope)
            target = parent._bindings[leaf]
            if isinstance(target, InMemoryNamingContext) and target._bindings:
                raise DirectoryError(
                    f"비어 있지 않은 컨텍스트는 제거할 수 없습니다: {name}",
                    name=name,
                    scope=self.scope,
                )
            del parent._bindings[leaf]

    # === 조회 ===

    def lookup(self, name: str) -> Any:
        """
        name에 바인딩된 객체(또는 서브컨텍스트)를 반환합니다.

        Raises:
            NameNotFoundError: 바인딩되지 않은 이름
        """
        parts = self._split(name)
        with self._lock:
            parent = self._walk(name, parts[:-1], create=False)
            if parts[-1] not in parent._bindings:
                raise NameNotFoundError(name, scope=self.scope)
            return parent._bindings[parts[-1]]

    def contains(self, name: str) -> bool:
        try:
            self.lookup(name)
        except NameNotFoundError:
            return False
        return True

    def list_names(self) -> list[str]:
        """서브컨텍스트를 제외한 모든 바인딩 경로를 정렬해 반환합니다."""
        with self._lock:
            return sorted(path for path, _ in self._iter_leaves(""))

    def items(self) -> list[tuple[str, Any]]:
        """(경로, 객체) 목록"""
        with self._lock:
            return sorted(self._iter_leaves(""), key=lambda item: item[0])

    def clear(self) -> None:
        with self._lock:
            self._bindings.clear()

    def __len__(self) -> int:
        with self._lock:
            return sum(1 for _ in self._iter_leaves(""))

    def __repr__(self) -> str:
        return f"InMemoryNamingContext(name={self.name!r}, scope={self.scope!r})"

    # === 내부 구현 ===

    def _split(self, name: str) -> list[str]:
        parts = name.split(SEPARATOR) if name else []
        if not parts or any(not part for part in parts):
            raise DirectoryError(
                f"잘못된 이름입니다: {name!r}",
                name=name,
                scope=self.scope,
            )
        return parts

    def _walk(
        self,
        name: str,
        parts: list[str],
        create: bool,
    ) -> InMemoryNamingContext:
        # 기존 구성 요소를 모두 확인한 뒤에만 새 서브컨텍스트를 만든다
        context = self
        for index, part in enumerate(parts):
            if part not in context._bindings:
                if not create:
                    raise NameNotFoundError(name, scope=self.scope)
                return self._create_path(context, parts, index)
            child = context._bindings[part]
            if not isinstance(child, InMemoryNamingContext):
                raise DirectoryError(
                    f"중간 경로가 컨텍스트가 아닙니다: {SEPARATOR.join(parts[: index + 1])}",
                    name=name,
                    scope=self.scope,
                )
            context = child
        return context

    def _create_path(
        self,
        context: InMemoryNamingContext,
        parts: list[str],
        start: int,
    ) -> InMemoryNamingContext:
        prefix = [self.name] if self.name else []
        for index in range(start, len(parts)):
            child_name = SEPARATOR.join([*prefix, *parts[: index + 1]])
            child = InMemoryNamingContext(child_name, scope=self.scope, lock=self._lock)
            context._bindings[parts[index]] = child
            logger.debug(f"서브컨텍스트 생성: {child_name}", scope=self.scope)
            context = child
        return context

    def _iter_leaves(self, prefix: str) -> Iterator[tuple[str, Any]]:
        for key, value in self._bindings.items():
            path = f"{prefix}{SEPARATOR}{key}" if prefix else key
            if isinstance(value, InMemoryNamingContext):
                yield from value._iter_leaves(path)
            else:
                yield path, value
