"""
3단계 네이밍 디렉터리

전역 컨텍스트 하나와 애플리케이션별, (애플리케이션, 모듈)별 컨텍스트를
보관합니다. 설정 로더가 디스크립션 그래프를 만들 때 각 Application과
Module에 해당 컨텍스트를 연결합니다.
"""

from __future__ import annotations

import threading
from typing import Any

from naming_binder.common.errors import DirectoryError
from naming_binder.common.logging import get_logger
from naming_binder.domain.models.operation import NamingScope
from naming_binder.infrastructure.naming.memory import InMemoryNamingContext

logger = get_logger(__name__)


class NamingDirectory:
    """
    global / application / module 스코프 컨텍스트 저장소

    Example:
        >>> directory = NamingDirectory()
        >>> app_ctx = directory.application_context("shop")
        >>> mod_ctx = directory.module_context("shop", "orders.jar")
        >>> directory.global_context.list_names()
        []
    """

    def __init__(self) -> None:
        self.global_context = InMemoryNamingContext("global", scope=NamingScope.GLOBAL.value)
        self._application_contexts: dict[str, InMemoryNamingContext] = {}
        self._module_contexts: dict[tuple[str, str], InMemoryNamingContext] = {}
        self._lock = threading.RLock()

    def application_context(self, application: str) -> InMemoryNamingContext:
        """애플리케이션 컨텍스트를 반환합니다 (없으면 생성)."""
        with self._lock:
            context = self._application_contexts.get(application)
            if context is None:
                context = InMemoryNamingContext(application, scope=NamingScope.APPLICATION.value)
                self._application_contexts[application] = context
                logger.debug(f"애플리케이션 컨텍스트 생성: {application}")
            return context

    def module_context(self, application: str, module: str) -> InMemoryNamingContext:
        """모듈 컨텍스트를 반환합니다 (없으면 생성)."""
        with self._lock:
            key = (application, module)
            context = self._module_contexts.get(key)
            if context is None:
                context = InMemoryNamingContext(
                    f"{application}/{module}",
                    scope=NamingScope.MODULE.value,
                )
                self._module_contexts[key] = context
                logger.debug(f"모듈 컨텍스트 생성: {application}/{module}")
            return context

    def find_context(
        self,
        scope: NamingScope | str,
        application: str | None = None,
        module: str | None = None,
    ) -> InMemoryNamingContext | None:
        """
        기존 컨텍스트를 찾습니다. 새로 만들지 않습니다.

        Raises:
            DirectoryError: 스코프에 필요한 application/module이 없는 경우
        """
        scope = NamingScope(scope)
        if scope is NamingScope.GLOBAL:
            return self.global_context

        if not application:
            raise DirectoryError(
                f"{scope.value} 스코프에는 application이 필요합니다",
                scope=scope.value,
            )

        with self._lock:
            if scope is NamingScope.APPLICATION:
                return self._application_contexts.get(application)

            if not module:
                raise DirectoryError(
                    "module 스코프에는 module이 필요합니다",
                    scope=scope.value,
                )
            return self._module_contexts.get((application, module))

    def snapshot(self) -> dict[str, Any]:
        """모든 스코프의 바인딩 이름을 딕셔너리로 반환합니다."""
        with self._lock:
            return {
                NamingScope.GLOBAL.value: self.global_context.list_names(),
                NamingScope.APPLICATION.value: {
                    name: context.list_names()
                    for name, context in self._application_contexts.items()
                },
                NamingScope.MODULE.value: {
                    f"{app}/{module}": context.list_names()
                    for (app, module), context in self._module_contexts.items()
                },
            }

    def total_bindings(self) -> int:
        """전체 바인딩 수"""
        with self._lock:
            return (
                len(self.global_context)
                + sum(len(ctx) for ctx in self._application_contexts.values())
                + sum(len(ctx) for ctx in self._module_contexts.values())
            )
