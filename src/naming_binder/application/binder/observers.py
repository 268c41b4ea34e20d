"""
네이밍 관찰자 구현

바인더의 디렉터리 쓰기를 로그로 남기는 관찰자와, 성공한 쓰기를 기록해
실패 후 남은 이름을 계산하는 관찰자를 제공합니다.
"""

from __future__ import annotations

from typing import Iterable

from naming_binder.common.logging import get_logger
from naming_binder.domain.models.operation import NamingAction, NamingOperation, NamingScope

logger = get_logger(__name__)


class LoggingObserver:
    """
    디렉터리 쓰기 로깅 관찰자

    쓰기 직전과 성공 직후에 DEBUG 로그를 남기고, 성공한 쓰기 횟수를
    작업 종류별로 집계합니다.
    """

    def __init__(self) -> None:
        self.counts: dict[NamingAction, int] = {action: 0 for action in NamingAction}

    def before(self, operation: NamingOperation) -> None:
        verb = "바인딩" if operation.action is NamingAction.BIND else "언바인딩"
        suffix = " (별칭)" if operation.alias else ""
        logger.debug(
            f"{verb}: {operation.name}{suffix}",
            component_name=operation.view.component.key,
            scope=operation.scope.value,
            view=str(operation.view),
        )

    def after(self, operation: NamingOperation) -> None:
        self.counts[operation.action] += 1
        logger.debug(
            f"{operation.action.value} 완료: {operation.name}",
            component_name=operation.view.component.key,
            scope=operation.scope.value,
        )


class WriteLedger:
    """
    성공한 디렉터리 쓰기 기록 관찰자

    after()로 전달된 작업만 기록하므로 실패한 쓰기는 남지 않습니다.
    remaining()은 기록을 재생해 아직 바인딩된 채로 남은 이름을 계산합니다.
    """

    def __init__(self, bound: Iterable[NamingOperation] = ()) -> None:
        """
        Args:
            bound: 기록 시작 시점에 이미 바인딩되어 있는 작업
        """
        self.operations: list[NamingOperation] = list(bound)

    def before(self, operation: NamingOperation) -> None:
        pass

    def after(self, operation: NamingOperation) -> None:
        self.operations.append(operation)

    def remaining(self) -> list[NamingOperation]:
        """바인딩된 채로 남은 작업 (바인딩 순서)"""
        bound: dict[tuple[NamingScope, str], NamingOperation] = {}
        for operation in self.operations:
            slot = (operation.scope, operation.name)
            if operation.action is NamingAction.BIND:
                bound[slot] = operation
            else:
                bound.pop(slot, None)
        return list(bound.values())
