"""
이름 유도 규칙

컴포넌트와 (선택적) 인터페이스 식별자로부터 세 스코프의 이름을 계산하는
순수 함수 모음입니다.

    module:      <component>[!<interface>]
    application: <module>/<component>[!<interface>]
    global:      [<application>/]<module>/<component>[!<interface>]

전역 이름의 애플리케이션 접두사는 멀티 모듈 아카이브일 때만 붙습니다.
"""

from __future__ import annotations

from naming_binder.domain.models.component import ComponentDescription
from naming_binder.domain.models.operation import NamingScope

INTERFACE_SEPARATOR = "!"
PATH_SEPARATOR = "/"


def module_name(component: ComponentDescription, interface: str | None = None) -> str:
    """모듈 스코프 이름. interface가 없으면 컴포넌트 이름 그대로입니다."""
    if interface is None:
        return component.name
    return component.name + INTERFACE_SEPARATOR + interface


def app_name(component: ComponentDescription, interface: str | None = None) -> str:
    """애플리케이션 스코프 이름 (모듈 이름 접두사)"""
    return component.module.name + PATH_SEPARATOR + module_name(component, interface)


def global_name(component: ComponentDescription, interface: str | None = None) -> str:
    """전역 스코프 이름 (멀티 모듈 아카이브면 애플리케이션 이름 접두사)"""
    application = component.application
    prefix = application.name + PATH_SEPARATOR if application.multi_module else ""
    return prefix + app_name(component, interface)


_NAME_FUNCTIONS = {
    NamingScope.GLOBAL: global_name,
    NamingScope.APPLICATION: app_name,
    NamingScope.MODULE: module_name,
}


def scoped_name(
    scope: NamingScope,
    component: ComponentDescription,
    interface: str | None = None,
) -> str:
    """
    스코프에 해당하는 이름을 계산합니다.

    Args:
        scope: 네이밍 스코프
        component: 컴포넌트 디스크립션
        interface: 인터페이스 식별자 (None이면 별칭 형태)

    Returns:
        스코프 내 이름
    """
    return _NAME_FUNCTIONS[NamingScope(scope)](component, interface)
