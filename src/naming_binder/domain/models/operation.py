"""
네이밍 작업 모델

디렉터리에 대한 개별 쓰기(바인딩/언바인딩)를 나타내는 값 객체입니다.
관찰자 훅과 이름 미리보기에서 사용합니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from naming_binder.domain.models.view import View


class NamingScope(str, Enum):
    """
    네이밍 스코프

    선언 순서는 바인딩 시 쓰기 순서(global → application → module)와 같습니다.
    """

    GLOBAL = "global"
    APPLICATION = "application"
    MODULE = "module"


class NamingAction(str, Enum):
    """디렉터리 쓰기 종류"""

    BIND = "bind"
    UNBIND = "unbind"


@dataclass(frozen=True)
class NamingOperation:
    """
    단일 디렉터리 쓰기

    Attributes:
        action: 바인딩 또는 언바인딩
        scope: 대상 스코프
        name: 대상 이름
        view: 이름의 근거가 된 뷰
        alias: 단일 뷰 별칭 이름 여부
    """

    action: NamingAction
    scope: NamingScope
    name: str
    view: View
    alias: bool = False

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            "action": self.action.value,
            "scope": self.scope.value,
            "name": self.name,
            "view": self.view.to_dict(),
            "alias": self.alias,
        }
