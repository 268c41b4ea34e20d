"""
인터페이스 모듈

바인더가 외부 협력자에게 요구하는 인터페이스(Protocol)를 정의합니다.
"""

from naming_binder.domain.interfaces.directory import NamingContext
from naming_binder.domain.interfaces.observer import NamingObserver
from naming_binder.domain.interfaces.proxy import ProxyFactory

__all__ = ["NamingContext", "NamingObserver", "ProxyFactory"]
