# -*- coding: utf-8 -*-
"""
Naming Infrastructure 패키지.

- 계층형 인메모리 네이밍 컨텍스트
- global / application / module 3단계 디렉터리
"""

from naming_binder.infrastructure.naming.memory import InMemoryNamingContext
from naming_binder.infrastructure.naming.directory import NamingDirectory

__all__ = [
    "InMemoryNamingContext",
    "NamingDirectory",
]
