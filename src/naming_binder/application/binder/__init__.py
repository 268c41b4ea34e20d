"""
바인더 모듈

뷰 이름 유도 결과를 네이밍 디렉터리에 바인딩/언바인딩합니다.
"""

from naming_binder.application.binder.binder import NamingBinder
from naming_binder.application.binder.observers import LoggingObserver

__all__ = ["NamingBinder", "LoggingObserver"]
