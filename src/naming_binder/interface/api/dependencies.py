"""
FastAPI dependency wiring.

Interface 계층에서 사용할 의존성을 관리합니다.
Composition Root(main.py)에서 set_app_context로 주입합니다.
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Depends, FastAPI, Request

from naming_binder.application.lifecycle.manager import DeploymentManager
from naming_binder.infrastructure.naming.directory import NamingDirectory


@dataclass
class AppContext:
    deployment_manager: DeploymentManager
    directory: NamingDirectory


def set_app_context(app: FastAPI, context: AppContext) -> None:
    """FastAPI app.state에 AppContext를 저장합니다"""
    app.state.app_context = context


def get_app_context(request: Request) -> AppContext:
    context: AppContext | None = getattr(request.app.state, "app_context", None)
    if context is None:
        raise RuntimeError("AppContext가 설정되지 않았습니다")
    return context


def get_deployment_manager(context: AppContext = Depends(get_app_context)) -> DeploymentManager:
    return context.deployment_manager


def get_directory(context: AppContext = Depends(get_app_context)) -> NamingDirectory:
    return context.directory
