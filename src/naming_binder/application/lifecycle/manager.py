"""
배포 생명주기 관리자

컴포넌트의 활성화(바인딩)와 비활성화(언바인딩)를 관리합니다.
컴포넌트마다 NamingBinder를 하나씩 만들어 활성화 시 bind(),
비활성화 시 같은 인스턴스로 unbind()를 호출합니다.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Iterable

from naming_binder.application.binder.binder import NamingBinder
from naming_binder.application.binder.observers import WriteLedger
from naming_binder.common.errors import BinderError, ComponentError, ErrorCode
from naming_binder.common.logging import (
    generate_trace_id,
    get_logger,
    set_component_context,
    set_trace_id,
)
from naming_binder.domain.interfaces.directory import NamingContext
from naming_binder.domain.interfaces.observer import NamingObserver
from naming_binder.domain.interfaces.proxy import ProxyFactory
from naming_binder.domain.models.component import ComponentDescription
from naming_binder.domain.models.deployment import ComponentState, ComponentStatus
from naming_binder.domain.models.operation import NamingOperation

logger = get_logger(__name__)


class DeploymentManager:
    """
    컴포넌트 배포 생명주기 관리자

    활성화/비활성화 호출을 내부 락으로 직렬화합니다. 바인딩 실패 시
    컴포넌트는 FAILED 상태가 되고 예외는 그대로 전파됩니다.
    이미 기록된 이름은 자동으로 되돌리지 않고 남은 이름으로 기록해 두며,
    FAILED 컴포넌트에 deactivate()를 호출하면 그 이름만 정리합니다.

    Example:
        >>> manager = DeploymentManager(
        ...     global_context=directory.global_context,
        ...     proxy_factory=CachingProxyFactory(resolver),
        ... )
        >>> manager.register(component)
        >>> manager.activate("shop/orders.jar/OrderBean")
        >>> manager.deactivate("shop/orders.jar/OrderBean")
    """

    def __init__(
        self,
        global_context: NamingContext | None = None,
        proxy_factory: ProxyFactory | None = None,
    ) -> None:
        self._states: dict[str, ComponentState] = {}
        self._binders: dict[str, NamingBinder] = {}
        self._leftovers: dict[str, list[NamingOperation]] = {}
        self._lock = threading.RLock()
        self._global_context = global_context
        self._proxy_factory = proxy_factory
        self._observers: list[NamingObserver] = []
        self._on_status_change: Callable[[str, ComponentStatus], None] | None = None

    def set_global_context(self, context: NamingContext) -> None:
        self._global_context = context

    def set_proxy_factory(self, proxy_factory: ProxyFactory) -> None:
        self._proxy_factory = proxy_factory

    def add_observer(self, observer: NamingObserver) -> None:
        """이후 생성되는 모든 바인더에 등록할 관찰자를 추가합니다."""
        self._observers.append(observer)

    def set_on_status_change(
        self,
        callback: Callable[[str, ComponentStatus], None] | None,
    ) -> None:
        self._on_status_change = callback

    # === 등록 ===

    def register(self, component: ComponentDescription) -> ComponentState:
        """
        컴포넌트를 등록합니다.

        Raises:
            ComponentError: 같은 키가 이미 등록된 경우
        """
        with self._lock:
            key = component.key
            if key in self._states:
                raise ComponentError(
                    ErrorCode.COMPONENT_ALREADY_REGISTERED,
                    f"이미 등록된 컴포넌트입니다: {key}",
                    component_key=key,
                )
            state = ComponentState(component=component)
            self._states[key] = state
            logger.debug(f"컴포넌트 등록: {key}", component_name=key)
            return state

    def register_all(self, components: Iterable[ComponentDescription]) -> list[ComponentState]:
        return [self.register(component) for component in components]

    def unregister(self, key: str) -> None:
        """
        활성 상태가 아닌 컴포넌트의 등록을 해제합니다.

        Raises:
            ComponentError: 등록되지 않았거나 활성 상태인 경우
        """
        with self._lock:
            state = self._get(key)
            if state.is_active:
                raise ComponentError(
                    ErrorCode.COMPONENT_ALREADY_ACTIVE,
                    f"활성 상태인 컴포넌트는 등록 해제할 수 없습니다: {key}",
                    component_key=key,
                )
            del self._states[key]
            self._binders.pop(key, None)
            leftovers = self._leftovers.pop(key, None)
            if leftovers:
                logger.warning(
                    f"정리되지 않은 이름을 남긴 채 등록 해제: {key}",
                    names=[op.name for op in leftovers],
                )
            logger.debug(f"컴포넌트 등록 해제: {key}", component_name=key)

    # === 생명주기 ===

    def activate(self, key: str) -> ComponentState:
        """
        컴포넌트의 뷰를 바인딩합니다.

        바인딩이 중간에 실패하면 그때까지 쓴 이름을 기록해 두고 컴포넌트를
        FAILED로 표시합니다. 남은 이름은 deactivate()로 정리한 뒤에만
        다시 활성화할 수 있습니다.

        Raises:
            ComponentError: 등록되지 않았거나 이미 활성 상태인 경우,
                정리되지 않은 이름이 남은 경우 (COMPONENT_NAMES_LEFT)
            BinderError: 바인딩 실패 (컴포넌트는 FAILED 상태가 됨)
        """
        with self._lock:
            state = self._get(key)
            if state.is_active:
                raise ComponentError(
                    ErrorCode.COMPONENT_ALREADY_ACTIVE,
                    f"컴포넌트가 이미 활성 상태입니다: {key}",
                    component_key=key,
                )
            if self._leftovers.get(key):
                raise ComponentError(
                    ErrorCode.COMPONENT_NAMES_LEFT,
                    f"정리되지 않은 이름이 남아 있습니다. 먼저 비활성화하세요: {key}",
                    component_key=key,
                    details={"names": [op.name for op in self._leftovers[key]]},
                )

            binder = self._create_binder(state.component)
            ledger = WriteLedger()
            binder.add_observer(ledger)
            set_trace_id(generate_trace_id())
            set_component_context(key)
            try:
                binder.bind()
            except Exception as e:
                self._keep_leftovers(state, binder, ledger.remaining())
                self._set_status(state, ComponentStatus.FAILED, error=str(e))
                logger.error(
                    f"컴포넌트 활성화 실패: {key} - {e}",
                    error=str(e),
                    code=e.code.value if isinstance(e, BinderError) else None,
                    bound_names=state.bound_names,
                )
                raise
            finally:
                binder.remove_observer(ledger)
                set_component_context(None)
                set_trace_id(None)

            self._binders[key] = binder
            state.bound_names = len(binder.planned_operations())
            self._set_status(state, ComponentStatus.ACTIVE)
            logger.info(
                f"컴포넌트 활성화: {key}",
                component_name=key,
                bound_names=state.bound_names,
            )
            return state

    def deactivate(self, key: str) -> ComponentState:
        """
        활성화에 사용한 바인더로 컴포넌트의 뷰를 언바인딩합니다.

        FAILED 상태에서 남은 이름이 있으면 그 이름만 정리합니다. 이미 없는
        이름은 건너뛰며, 다른 소유자가 바인딩한 이름은 건드리지 않습니다.

        Raises:
            ComponentError: 등록되지 않았거나 활성 상태가 아니고 남은 이름도 없는 경우
            BinderError: 언바인딩 실패 (컴포넌트는 FAILED 상태가 됨)
        """
        with self._lock:
            state = self._get(key)
            binder = self._binders.get(key)
            leftovers = self._leftovers.get(key)
            if binder is None or not (state.is_active or leftovers):
                raise ComponentError(
                    ErrorCode.COMPONENT_NOT_ACTIVE,
                    f"활성 상태가 아닌 컴포넌트입니다: {key}",
                    component_key=key,
                    details={"status": state.status.value},
                )

            if state.is_active:
                ledger = WriteLedger(binder.planned_operations())
            else:
                ledger = WriteLedger(leftovers)
            binder.add_observer(ledger)
            set_trace_id(generate_trace_id())
            set_component_context(key)
            try:
                if state.is_active:
                    binder.unbind()
                else:
                    binder.unbind_operations(leftovers, ignore_missing=True)
            except Exception as e:
                self._keep_leftovers(state, binder, ledger.remaining())
                self._set_status(state, ComponentStatus.FAILED, error=str(e))
                logger.error(
                    f"컴포넌트 비활성화 실패: {key} - {e}",
                    error=str(e),
                    bound_names=state.bound_names,
                )
                raise
            finally:
                binder.remove_observer(ledger)
                set_component_context(None)
                set_trace_id(None)

            self._binders.pop(key, None)
            self._leftovers.pop(key, None)
            state.bound_names = 0
            self._set_status(state, ComponentStatus.INACTIVE)
            logger.info(f"컴포넌트 비활성화: {key}", component_name=key)
            return state

    def activate_all(self) -> list[ComponentState]:
        """
        활성 상태가 아닌 컴포넌트를 등록 순서대로 활성화합니다.

        첫 실패에서 중단하고 예외를 전파합니다.
        """
        with self._lock:
            keys = [key for key, state in self._states.items() if not state.is_active]
            return [self.activate(key) for key in keys]

    def deactivate_all(self) -> list[ComponentState]:
        """
        활성 컴포넌트와 이름이 남은 FAILED 컴포넌트를 등록 역순으로 비활성화합니다.

        종료 경로에서 사용하므로 개별 실패는 기록(FAILED)만 하고 계속 진행합니다.

        Returns:
            비활성화를 시도한 컴포넌트 상태 목록
        """
        with self._lock:
            keys = [
                key
                for key, state in self._states.items()
                if state.is_active or self._leftovers.get(key)
            ]
            results: list[ComponentState] = []
            for key in reversed(keys):
                try:
                    results.append(self.deactivate(key))
                except BinderError as e:
                    logger.warning(f"비활성화 실패 (계속 진행): {key} - {e.message}")
                    results.append(self._states[key])
            return results

    # === 조회 ===

    def get_state(self, key: str) -> ComponentState | None:
        return self._states.get(key)

    def list_states(self) -> list[ComponentState]:
        with self._lock:
            return list(self._states.values())

    def get_active_states(self) -> list[ComponentState]:
        with self._lock:
            return [state for state in self._states.values() if state.is_active]

    def preview(self, key: str) -> list[dict[str, Any]]:
        """
        활성화 시 바인딩될 이름 목록을 반환합니다 (디렉터리 접근 없음).

        Raises:
            ComponentError: 등록되지 않은 컴포넌트
        """
        state = self._get(key)
        binder = NamingBinder(state.component)
        return [
            {
                "scope": operation.scope.value,
                "name": operation.name,
                "alias": operation.alias,
                "view": operation.view.to_dict(),
            }
            for operation in binder.planned_operations()
        ]

    def summary(self) -> dict[str, int]:
        """상태별 컴포넌트 수"""
        with self._lock:
            counts = {status.value: 0 for status in ComponentStatus}
            for state in self._states.values():
                counts[state.status.value] += 1
            return counts

    # === 내부 구현 ===

    def _get(self, key: str) -> ComponentState:
        state = self._states.get(key)
        if state is None:
            raise ComponentError(
                ErrorCode.COMPONENT_NOT_FOUND,
                f"컴포넌트를 찾을 수 없습니다: {key}",
                component_key=key,
            )
        return state

    def _create_binder(self, component: ComponentDescription) -> NamingBinder:
        binder = NamingBinder(component)
        if self._global_context is not None:
            binder.set_global_context(self._global_context)
        if self._proxy_factory is not None:
            binder.set_proxy_factory(self._proxy_factory)
        for observer in self._observers:
            binder.add_observer(observer)
        return binder

    def _keep_leftovers(
        self,
        state: ComponentState,
        binder: NamingBinder,
        leftovers: list[NamingOperation],
    ) -> None:
        key = state.key
        state.bound_names = len(leftovers)
        if leftovers:
            self._binders[key] = binder
            self._leftovers[key] = leftovers
        else:
            self._binders.pop(key, None)
            self._leftovers.pop(key, None)

    def _set_status(
        self,
        state: ComponentState,
        status: ComponentStatus,
        error: str | None = None,
    ) -> None:
        state.set_status(status, error=error)
        if self._on_status_change:
            try:
                self._on_status_change(state.key, status)
            except Exception as e:
                logger.error(f"상태 변경 콜백 오류: {e}", error=str(e))

