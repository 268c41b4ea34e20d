"""
컴포넌트 디스크립션 모델

배포 단위(컴포넌트)와 이를 포함하는 모듈, 애플리케이션을 읽기 전용 참조
그래프로 표현합니다. ComponentDescription → Module → Application 순서로
참조하며, 런타임 조회나 리플렉션 없이 필요한 필드만 노출합니다.

이 모듈은 외부 라이브러리에 의존하지 않습니다.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from naming_binder.domain.interfaces.directory import NamingContext


def _require_name(kind: str, value: str) -> None:
    if not value:
        raise ValueError(f"{kind} 이름은 비워둘 수 없습니다")


@dataclass(frozen=True)
class Application:
    """
    애플리케이션 디스크립션

    Attributes:
        name: 애플리케이션 이름 (예: "shop")
        multi_module: 멀티 모듈 아카이브(.ear 등)로 패키징되었는지 여부.
            True이면 전역 이름 앞에 애플리케이션 이름이 붙습니다.
        context: 애플리케이션 스코프 네이밍 컨텍스트
    """

    name: str
    multi_module: bool = False
    context: NamingContext | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        _require_name("애플리케이션", self.name)


@dataclass(frozen=True)
class Module:
    """
    모듈 디스크립션

    Attributes:
        name: 모듈 이름 (예: "orders.jar")
        application: 모듈을 포함하는 애플리케이션
        context: 모듈 스코프 네이밍 컨텍스트
    """

    name: str
    application: Application
    context: NamingContext | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        _require_name("모듈", self.name)

    @property
    def key(self) -> str:
        """애플리케이션/모듈 형태의 식별 키"""
        return f"{self.application.name}/{self.name}"


@dataclass(frozen=True)
class ComponentDescription:
    """
    컴포넌트 디스크립션

    배포 메타데이터 서브시스템이 소유하며, 바인더 수명 동안 변경되지 않습니다.

    Attributes:
        name: 컴포넌트 이름 (모듈 내에서 고유)
        module: 컴포넌트를 포함하는 모듈
        business_locals: 비즈니스 로컬 인터페이스 식별자 목록 (None이면 없음)
        business_remotes: 비즈니스 원격 인터페이스 식별자 목록 (None이면 없음)
        home: 홈 인터페이스 식별자 (선택)
        local_home: 로컬 홈 인터페이스 식별자 (선택)
        local_bean: no-interface 로컬 뷰 노출 여부

    Example:
        >>> shop = Application(name="shop")
        >>> orders = Module(name="orders.jar", application=shop)
        >>> bean = ComponentDescription(
        ...     name="OrderBean",
        ...     module=orders,
        ...     business_locals=["com.acme.OrderService"],
        ... )
        >>> bean.key
        'shop/orders.jar/OrderBean'
    """

    name: str
    module: Module
    business_locals: tuple[str, ...] | None = None
    business_remotes: tuple[str, ...] | None = None
    home: str | None = None
    local_home: str | None = None
    local_bean: bool = False

    def __post_init__(self) -> None:
        _require_name("컴포넌트", self.name)
        # frozen 이므로 object.__setattr__로 튜플 정규화
        object.__setattr__(self, "business_locals", _as_tuple(self.business_locals))
        object.__setattr__(self, "business_remotes", _as_tuple(self.business_remotes))

    @property
    def application(self) -> Application:
        """컴포넌트가 속한 애플리케이션"""
        return self.module.application

    @property
    def key(self) -> str:
        """애플리케이션/모듈/컴포넌트 형태의 식별 키"""
        return f"{self.module.key}/{self.name}"

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            "key": self.key,
            "name": self.name,
            "module": self.module.name,
            "application": self.application.name,
            "multi_module": self.application.multi_module,
            "business_locals": list(self.business_locals or ()),
            "business_remotes": list(self.business_remotes or ()),
            "home": self.home,
            "local_home": self.local_home,
            "local_bean": self.local_bean,
        }


def _as_tuple(values: Iterable[str] | None) -> tuple[str, ...] | None:
    if values is None:
        return None
    return tuple(values)
