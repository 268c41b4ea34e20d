# -*- coding: utf-8 -*-
"""
Proxy Infrastructure 패키지.

뷰별 지연 해석 프록시와 캐싱 팩토리를 제공합니다.
"""

from naming_binder.infrastructure.proxy.factory import (
    CachingProxyFactory,
    ViewProxy,
    describe_view,
)

__all__ = [
    "CachingProxyFactory",
    "ViewProxy",
    "describe_view",
]
