"""
헬스 체크 엔드포인트
"""

from __future__ import annotations

import time
from typing import Any

from fastapi import APIRouter, Depends

from naming_binder.application.lifecycle.manager import DeploymentManager
from naming_binder.domain.models.deployment import ComponentStatus
from naming_binder.infrastructure.naming.directory import NamingDirectory
from naming_binder.interface.api.dependencies import get_deployment_manager, get_directory

router = APIRouter()


@router.get("/health/live")
async def health_live() -> dict[str, str]:
    """라이브니스 체크 (단순 200)."""
    return {"status": "live"}


@router.get("/health")
async def health(
    manager: DeploymentManager = Depends(get_deployment_manager),
    directory: NamingDirectory = Depends(get_directory),
) -> dict[str, Any]:
    """통합 헬스 체크 (컴포넌트 상태 요약 + 바인딩 수)."""
    summary = manager.summary()
    return {
        "status": "degraded" if summary.get(ComponentStatus.FAILED.value) else "healthy",
        "ts": time.time(),
        "components": summary,
        "bindings": directory.total_bindings(),
    }
