# -*- coding: utf-8 -*-
"""
Infrastructure Layer 패키지.

바인더가 사용하는 외부 협력자의 기본 구현을 제공합니다:
- naming: 계층형 인메모리 네이밍 컨텍스트, 3단계 디렉터리
- proxy: 지연 해석 뷰 프록시 팩토리
"""

from naming_binder.infrastructure.naming.memory import InMemoryNamingContext
from naming_binder.infrastructure.naming.directory import NamingDirectory
from naming_binder.infrastructure.proxy.factory import CachingProxyFactory, ViewProxy

__all__ = [
    "InMemoryNamingContext",
    "NamingDirectory",
    "CachingProxyFactory",
    "ViewProxy",
]
