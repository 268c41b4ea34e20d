"""
HTTP API

컴포넌트 활성화/비활성화와 디렉터리 조회를 위한 FastAPI 애플리케이션입니다.
"""

from naming_binder.interface.api.app import create_app
from naming_binder.interface.api.dependencies import AppContext, set_app_context

__all__ = ["create_app", "AppContext", "set_app_context"]
