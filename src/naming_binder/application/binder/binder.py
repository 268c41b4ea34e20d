"""
네이밍 바인더

컴포넌트의 뷰마다 세 스코프(global, application, module)의 이름을 유도하고
프록시를 바인딩/언바인딩합니다. 컴포넌트가 뷰를 정확히 하나만 노출하면
각 스코프에 인터페이스 한정자가 없는 별칭 이름도 함께 바인딩합니다.

실패 시 즉시 중단하며 롤백이나 재시도는 하지 않습니다. 복구는 호출자
(배포 생명주기)의 책임입니다.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable

from naming_binder.common.errors import (
    BinderError,
    DirectoryError,
    ErrorCode,
    NameNotFoundError,
    ProxyError,
)
from naming_binder.common.logging import get_logger, set_scope_context
from naming_binder.domain.interfaces.directory import NamingContext
from naming_binder.domain.interfaces.observer import NamingObserver
from naming_binder.domain.interfaces.proxy import ProxyFactory
from naming_binder.domain.models.component import ComponentDescription
from naming_binder.domain.models.operation import (
    NamingAction,
    NamingOperation,
    NamingScope,
)
from naming_binder.domain.models.view import View, enumerate_views
from naming_binder.domain.naming import scoped_name

# 바인딩은 global → application → module, 언바인딩은 그 역순
_BIND_ORDER = (NamingScope.GLOBAL, NamingScope.APPLICATION, NamingScope.MODULE)
_UNBIND_ORDER = tuple(reversed(_BIND_ORDER))


class NamingBinder:
    """
    컴포넌트 하나의 뷰를 네이밍 디렉터리에 바인딩합니다.

    뷰 목록은 생성 시 한 번 계산되어 고정되므로 bind()와 unbind()는
    항상 같은 이름 집합을 다룹니다. 부분 바인딩 상태는 추적하지 않습니다.

    bind()와 unbind()는 인스턴스마다 각각 한 번, 이 순서로 호출합니다.
    같은 인스턴스에 대한 동시 호출은 지원하지 않습니다.

    Example:
        >>> binder = NamingBinder(component)
        >>> binder.set_global_context(directory.global_context)
        >>> binder.set_proxy_factory(CachingProxyFactory(resolver))
        >>> binder.bind()      # 활성화
        >>> binder.unbind()    # 비활성화
    """

    def __init__(self, component: ComponentDescription) -> None:
        """
        Args:
            component: 컴포넌트 디스크립션
        """
        self._component = component
        self._views: tuple[View, ...] = enumerate_views(component)
        self._global_context: NamingContext | None = None
        self._proxy_factory: ProxyFactory | None = None
        self._observers: list[NamingObserver] = []
        self._logger = get_logger(__name__, component_name=component.key)

    @property
    def component(self) -> ComponentDescription:
        return self._component

    @property
    def views(self) -> tuple[View, ...]:
        """생성 시 고정된 뷰 목록"""
        return self._views

    def set_global_context(self, context: NamingContext) -> None:
        """전역 스코프 컨텍스트를 설정합니다."""
        self._global_context = context

    def set_proxy_factory(self, proxy_factory: ProxyFactory) -> None:
        """프록시 팩토리를 설정합니다."""
        self._proxy_factory = proxy_factory

    def add_observer(self, observer: NamingObserver) -> None:
        """디렉터리 쓰기 관찰자를 등록합니다."""
        self._observers.append(observer)

    def remove_observer(self, observer: NamingObserver) -> None:
        """등록된 관찰자를 제거합니다."""
        if observer in self._observers:
            self._observers.remove(observer)

    def has_single_view(self) -> bool:
        """
        뷰가 정확히 하나인지 여부

        True이면 각 스코프에 인터페이스 한정자 없는 별칭도 바인딩합니다.
        단, 유일한 뷰가 no-interface(LOCAL_BEAN) 뷰면 한정 이름과 별칭이
        같으므로 스코프마다 한 번만 쓰여 6회가 아닌 3회 쓰기가 됩니다.
        """
        return len(self._views) == 1

    # === 생명주기 ===

    def bind(self) -> None:
        """
        모든 뷰의 프록시를 세 스코프에 바인딩합니다.

        쓰기 횟수는 뷰가 N(≠1)개면 3N회, 뷰가 하나면 6회(한정 이름 + 별칭)입니다.
        유일한 뷰가 no-interface 뷰인 경우만 예외로 3회입니다 (has_single_view 참고).

        Raises:
            NameCollisionError: 이미 바인딩된 이름
            ProxyError: 프록시 생성 실패
            DirectoryError: 디렉터리 오류
            BinderError: 컨텍스트/프록시 팩토리 미설정 (BINDER_NOT_CONFIGURED)
        """
        if not self._views:
            self._logger.debug("노출된 뷰가 없어 바인딩을 건너뜁니다")
            return

        self._require_configured(need_proxy_factory=True)
        self._logger.info(
            f"바인딩 시작: {self._component.key} (뷰 {len(self._views)}개)",
            view_count=len(self._views),
        )

        count = 0
        for view in self._views:
            proxy = self._produce(view)
            for operation in self._operations(view, NamingAction.BIND):
                self._apply(operation, proxy)
                count += 1

        self._logger.info(f"바인딩 완료: {self._component.key}", name_count=count)

    def unbind(self) -> None:
        """
        bind()가 바인딩한 이름을 모두 제거합니다.

        Raises:
            NameNotFoundError: 바인딩되지 않은 이름
            DirectoryError: 디렉터리 오류
            BinderError: 컨텍스트 미설정 (BINDER_NOT_CONFIGURED)
        """
        if not self._views:
            self._logger.debug("노출된 뷰가 없어 언바인딩을 건너뜁니다")
            return

        self._require_configured(need_proxy_factory=False)
        self._logger.info(f"언바인딩 시작: {self._component.key}")

        count = 0
        for view in self._views:
            for operation in self._operations(view, NamingAction.UNBIND):
                self._apply(operation)
                count += 1

        self._logger.info(f"언바인딩 완료: {self._component.key}", name_count=count)

    def unbind_operations(
        self,
        operations: Iterable[NamingOperation],
        ignore_missing: bool = False,
    ) -> int:
        """
        지정한 바인딩 작업의 이름만 역순으로 언바인딩합니다.

        실패한 bind() 또는 unbind() 이후 실제로 남아 있는 이름을 정리할 때
        사용합니다. 어떤 이름이 남아 있는지는 호출자가 관찰자로 기록해 전달합니다.

        Args:
            operations: 정리할 작업 (bind 순서)
            ignore_missing: 이미 없는 이름은 건너뜀

        Returns:
            실제로 언바인딩한 이름 수
        """
        pending = [replace(op, action=NamingAction.UNBIND) for op in operations]
        if not pending:
            return 0

        self._require_configured(need_proxy_factory=False)

        count = 0
        for operation in reversed(pending):
            try:
                self._apply(operation)
            except NameNotFoundError:
                if not ignore_missing:
                    raise
                self._logger.debug(f"이미 제거된 이름: {operation.name}", scope=operation.scope.value)
                continue
            count += 1

        self._logger.info(f"잔여 이름 정리 완료: {self._component.key}", name_count=count)
        return count

    # === 이름 계획 ===

    def planned_operations(
        self,
        action: NamingAction = NamingAction.BIND,
    ) -> list[NamingOperation]:
        """
        bind()/unbind()가 수행할 디렉터리 쓰기를 순서대로 반환합니다.

        디렉터리에는 접근하지 않습니다.
        """
        return [
            operation
            for view in self._views
            for operation in self._operations(view, NamingAction(action))
        ]

    def names(self) -> list[tuple[NamingScope, str]]:
        """bind()가 바인딩할 (스코프, 이름) 목록"""
        return [(op.scope, op.name) for op in self.planned_operations()]

    def _operations(self, view: View, action: NamingAction) -> list[NamingOperation]:
        order = _BIND_ORDER if action is NamingAction.BIND else _UNBIND_ORDER
        single = self.has_single_view()

        operations: list[NamingOperation] = []
        for scope in order:
            name = scoped_name(scope, self._component, view.interface)
            operations.append(NamingOperation(action, scope, name, view))

            if single:
                alias = scoped_name(scope, self._component, None)
                # no-interface 단일 뷰는 한정 이름과 별칭이 같으므로 한 번만 쓴다
                if alias != name:
                    operations.append(NamingOperation(action, scope, alias, view, alias=True))
        return operations

    # === 내부 구현 ===

    def _context(self, scope: NamingScope) -> NamingContext | None:
        if scope is NamingScope.GLOBAL:
            return self._global_context
        if scope is NamingScope.APPLICATION:
            return self._component.application.context
        return self._component.module.context

    def _require_configured(self, need_proxy_factory: bool) -> None:
        missing = [scope.value for scope in _BIND_ORDER if self._context(scope) is None]
        if need_proxy_factory and self._proxy_factory is None:
            missing.append("proxy_factory")
        if missing:
            raise BinderError(
                ErrorCode.BINDER_NOT_CONFIGURED,
                f"바인더 설정이 완료되지 않았습니다: {', '.join(missing)}",
                details={"component": self._component.key, "missing": missing},
            )

    def _produce(self, view: View) -> Any:
        try:
            return self._proxy_factory.produce(view)  # type: ignore[union-attr]
        except BinderError:
            raise
        except Exception as e:
            raise ProxyError(
                f"프록시 생성 실패: {view}",
                interface=view.interface,
                view_type=view.type.value,
                details={"error": str(e)},
            ) from e

    def _apply(self, operation: NamingOperation, obj: Any = None) -> None:
        set_scope_context(operation.scope.value)
        try:
            for observer in self._observers:
                observer.before(operation)

            self._write(operation, obj)

            for observer in self._observers:
                observer.after(operation)
        finally:
            set_scope_context(None)

    def _write(self, operation: NamingOperation, obj: Any) -> None:
        context = self._context(operation.scope)
        try:
            if operation.action is NamingAction.BIND:
                context.bind(operation.name, obj)  # type: ignore[union-attr]
            else:
                context.unbind(operation.name)  # type: ignore[union-attr]
        except BinderError:
            raise
        except Exception as e:
            raise DirectoryError(
                f"디렉터리 {operation.action.value} 실패: {operation.name}",
                name=operation.name,
                scope=operation.scope.value,
                details={"error": str(e)},
            ) from e
